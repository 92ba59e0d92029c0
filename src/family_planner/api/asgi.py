"""ASGI entrypoint for the family planner API."""

from family_planner.api.app import create_app
from family_planner.containers import build_container

app = create_app(build_container())
