"""Tests for seed data."""

from food_api.adapters.memory_food_repository import InMemoryFoodRepository
from food_api.domain.foods import MEAL_COURSES
from food_api.services.seed import SEED_FOODS, seed_foods


def test_seed_fills_empty_store_once() -> None:
    repository = InMemoryFoodRepository()

    assert seed_foods(repository) == len(SEED_FOODS)
    assert seed_foods(repository) == 0
    assert repository.count() == len(SEED_FOODS)


def test_seed_covers_every_course() -> None:
    assert {food_type for _, food_type, _ in SEED_FOODS} == set(MEAL_COURSES)
