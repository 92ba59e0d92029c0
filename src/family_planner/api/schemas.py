"""Request and response models for the JSON API."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Role = Literal["parent", "cook", "driver", "admin"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]
ActivityType = Literal["sports", "music", "appointment", "transport"]


class ApiModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


def reject_null(value: object) -> object:
    """Reject an explicit null for a column that cannot be empty."""
    if value is None:
        raise ValueError("must not be null")
    return value


class Preferences(ApiModel):
    cuisines: list[str] = Field(default_factory=list)
    dietary: list[str] = Field(default_factory=list)


class UserCreate(ApiModel):
    username: str = Field(min_length=1)
    role: Role = "parent"
    name: str = Field(min_length=1)
    avatar: str | None = None
    preferences: Preferences = Field(default_factory=Preferences)


class UserOut(ApiModel):
    id: int
    username: str
    role: str
    name: str
    avatar: str | None
    preferences: dict[str, list[str]]


class MealCreate(ApiModel):
    name: str = Field(min_length=1)
    description: str | None = None
    cuisine: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: str | None = None
    meal_type: MealType
    servings: int = Field(default=4, ge=1)
    prep_time_minutes: int | None = Field(default=None, ge=0)
    created_by: int


class MealOut(ApiModel):
    id: int
    name: str
    description: str | None
    cuisine: str | None
    ingredients: list[str]
    instructions: str | None
    meal_type: str
    servings: int
    prep_time_minutes: int | None
    created_by: int


class SuggestionRequest(ApiModel):
    cuisines: list[str] = Field(default_factory=list)
    dietary: list[str] = Field(default_factory=list)
    meal_type: MealType = "dinner"


class MealPlanCreate(ApiModel):
    user_id: int | None = None
    meal_id: int
    planned_date: date
    meal_type: MealType
    completed: bool = False


class MealPlanUpdate(ApiModel):
    user_id: int | None = None
    meal_id: int | None = None
    planned_date: date | None = None
    meal_type: MealType | None = None
    completed: bool | None = None

    non_null = field_validator(
        "meal_id", "planned_date", "meal_type", "completed"
    )(reject_null)


class MealPlanOut(ApiModel):
    id: int
    user_id: int | None
    meal_id: int
    planned_date: date
    meal_type: str
    completed: bool


class MealPlanDetailOut(MealPlanOut):
    meal: MealOut | None


class ActivityCreate(ApiModel):
    title: str = Field(min_length=1)
    description: str | None = None
    start_time: datetime
    end_time: datetime | None = None
    location: str | None = None
    assigned_to: int | None = None
    activity_type: ActivityType
    recurring: bool = False
    completed: bool = False
    created_by: int


class ActivityUpdate(ApiModel):
    title: str | None = None
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = None
    assigned_to: int | None = None
    activity_type: ActivityType | None = None
    recurring: bool | None = None
    completed: bool | None = None

    non_null = field_validator(
        "title", "start_time", "activity_type", "recurring", "completed"
    )(reject_null)


class ActivityOut(ApiModel):
    id: int
    title: str
    description: str | None
    start_time: datetime
    end_time: datetime | None
    location: str | None
    assigned_to: int | None
    created_by: int
    activity_type: str
    recurring: bool
    completed: bool


class ActivityDetailOut(ActivityOut):
    assigned_user: UserOut | None
    created_by_user: UserOut | None


class ShoppingListCreate(ApiModel):
    name: str = Field(min_length=1)
    created_by: int


class ShoppingListUpdate(ApiModel):
    name: str | None = None
    completed: bool | None = None

    non_null = field_validator("name", "completed")(reject_null)


class GenerateShoppingListRequest(ApiModel):
    start_date: date
    end_date: date
    user_id: int


class ShoppingItemCreate(ApiModel):
    list_id: int
    name: str = Field(min_length=1)
    quantity: str | None = None
    category: str | None = None
    completed: bool = False
    related_meal: str | None = None
    added_by: int


class ShoppingItemUpdate(ApiModel):
    name: str | None = None
    quantity: str | None = None
    category: str | None = None
    completed: bool | None = None
    related_meal: str | None = None

    non_null = field_validator("name", "completed")(reject_null)


class ShoppingItemOut(ApiModel):
    id: int
    list_id: int
    name: str
    quantity: str | None
    category: str | None
    completed: bool
    added_by: int
    related_meal: str | None


class ShoppingListOut(ApiModel):
    id: int
    name: str
    created_by: int
    completed: bool
    items: list[ShoppingItemOut]
