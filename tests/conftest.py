"""Shared test fixtures."""

import random
from dataclasses import dataclass
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from food_api.adapters.memory_food_repository import InMemoryFoodRepository
from food_api.api.app import create_app
from food_api.config import Settings
from food_api.containers import AppContainer
from food_api.domain.foods import FoodEntity
from food_api.services.foods import FoodService


@dataclass
class UnsavableFoodRepository(InMemoryFoodRepository):
    """In-memory repository whose commits always fail."""

    def save(self) -> bool:
        return False


def make_food(  # noqa: PLR0913
    food_id: int = 0,
    name: str = "Apple",
    calories: int = 95,
    food_type: str | None = None,
    created: datetime | None = None,
) -> FoodEntity:
    return FoodEntity(
        id=food_id,
        name=name,
        calories=calories,
        type=food_type,
        created=created or datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="local", seed_data=False)


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(rng=random.Random(7))


@pytest.fixture
def food_service(food_repository: InMemoryFoodRepository) -> FoodService:
    return FoodService(food_repository)


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    food_service: FoodService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_repository=food_repository,
        food_service=food_service,
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
