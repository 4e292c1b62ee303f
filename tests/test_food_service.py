"""Tests for the food service."""

import pytest

from food_api.adapters.memory_food_repository import InMemoryFoodRepository
from food_api.domain.foods import QueryParameters
from food_api.errors import ConflictError, NotFoundError, ValidationError
from food_api.services.foods import FoodService
from tests.conftest import UnsavableFoodRepository


def test_create_assigns_increasing_ids(food_service: FoodService) -> None:
    apple = food_service.create_food("Apple", 95)
    banana = food_service.create_food("Banana", 105, "Snack")

    assert (apple.id, banana.id) == (1, 2)
    assert banana.type == "Snack"
    assert apple.created.tzinfo is not None


def test_create_rejects_invalid_fields_without_mutation(
    food_service: FoodService, food_repository: InMemoryFoodRepository
) -> None:
    with pytest.raises(ValidationError):
        food_service.create_food("", 95)
    with pytest.raises(ValidationError):
        food_service.create_food("Apple", 0)

    assert food_repository.count() == 0


def test_update_checks_mismatch_before_existence(food_service: FoodService) -> None:
    with pytest.raises(ConflictError):
        food_service.update_food(0, 5, "Apple", 95)


def test_update_replaces_fields_and_keeps_created(food_service: FoodService) -> None:
    created = food_service.create_food("Apple", 95, "Snack")

    updated = food_service.update_food(created.id, created.id, "Green apple", 80)

    assert updated.name == "Green apple"
    assert updated.calories == 80
    assert updated.type is None
    assert updated.created == created.created
    assert food_service.get_food(created.id) == updated


def test_delete_removes_food(food_service: FoodService) -> None:
    created = food_service.create_food("Apple", 95)

    food_service.delete_food(created.id)

    with pytest.raises(NotFoundError):
        food_service.get_food(created.id)


def test_details_matches_get(food_service: FoodService) -> None:
    created = food_service.create_food("Apple", 95)

    assert food_service.get_food_details(created.id) == food_service.get_food(
        created.id
    )
    with pytest.raises(NotFoundError):
        food_service.get_food_details(0)


def test_patch_applies_operations_in_order(food_service: FoodService) -> None:
    created = food_service.create_food("Apple", 95)

    patched = food_service.patch_food(
        created.id,
        [
            {"op": "test", "path": "/calories", "value": 95},
            {"op": "replace", "path": "/calories", "value": 110},
            {"op": "add", "path": "/type", "value": "Snack"},
        ],
    )

    assert (patched.name, patched.calories, patched.type) == ("Apple", 110, "Snack")
    assert patched.created == created.created


def test_patch_checks_id_before_document(food_service: FoodService) -> None:
    with pytest.raises(NotFoundError):
        food_service.patch_food(-1, "not a patch")
    with pytest.raises(ValidationError, match="Invalid patch data"):
        food_service.patch_food(1, "not a patch")


def test_list_returns_page_and_total(food_service: FoodService) -> None:
    for index in range(3):
        food_service.create_food(f"Food {index}", 100 + index)

    items, total = food_service.list_foods(QueryParameters(page=2, page_count=2))

    assert [item.name for item in items] == ["Food 2"]
    assert total == 3


def test_list_rejects_unknown_order_field(food_service: FoodService) -> None:
    with pytest.raises(ValidationError):
        food_service.list_foods(QueryParameters(order_by="colour"))


def test_failed_save_raises() -> None:
    service = FoodService(UnsavableFoodRepository())

    with pytest.raises(RuntimeError, match="failed on save"):
        service.create_food("Apple", 95)
