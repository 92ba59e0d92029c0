"""Tests for activity service."""

from datetime import date, datetime

from family_planner.adapters.memory_repositories import (
    InMemoryActivityRepository,
    InMemoryUserRepository,
)
from family_planner.services.activities import ActivityService


def _payload(title: str, start_time: datetime, assigned_to: int | None) -> dict:
    return {
        "title": title,
        "start_time": start_time,
        "activity_type": "sports",
        "assigned_to": assigned_to,
    }


def test_list_activities_attaches_users(
    activity_repository: InMemoryActivityRepository,
    user_repository: InMemoryUserRepository,
) -> None:
    service = ActivityService(activity_repository, user_repository)
    service.create(_payload("Soccer", datetime(2024, 3, 1, 17, 0), 2), created_by=1)

    [detail] = service.list_activities()

    assert detail.title == "Soccer"
    assert detail.assigned_user is not None
    assert detail.assigned_user.username == "mike_johnson"
    assert detail.created_by_user is not None
    assert detail.created_by_user.username == "sarah_johnson"


def test_list_activities_filters_by_user_and_date(
    activity_repository: InMemoryActivityRepository,
    user_repository: InMemoryUserRepository,
) -> None:
    service = ActivityService(activity_repository, user_repository)
    service.create(_payload("Piano", datetime(2024, 3, 1, 9, 0), 3), created_by=1)
    service.create(_payload("Dentist", datetime(2024, 3, 2, 9, 0), None), created_by=1)

    by_user = service.list_activities(user_id=3)
    by_day = service.list_activities(day=date(2024, 3, 2))

    assert [detail.title for detail in by_user] == ["Piano"]
    assert [detail.title for detail in by_day] == ["Dentist"]
    assert by_day[0].assigned_user is None


def test_update_and_delete_activity(
    activity_repository: InMemoryActivityRepository,
    user_repository: InMemoryUserRepository,
) -> None:
    service = ActivityService(activity_repository, user_repository)
    activity = service.create(
        _payload("Swim", datetime(2024, 3, 3, 8, 0), 2), created_by=2
    )

    updated = service.update(activity.id, {"completed": True})

    assert updated is not None
    assert updated.completed is True
    assert service.delete(activity.id) is True
    assert service.delete(activity.id) is False
