"""ASGI entrypoint for the food API."""

from food_api.api.app import create_app
from food_api.containers import build_container

app = create_app(build_container())
