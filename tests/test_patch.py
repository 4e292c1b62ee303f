"""Tests for patch document application."""

import pytest

from food_api.domain.patch import PatchOperation, apply_patch
from food_api.errors import ValidationError
from tests.conftest import make_food


def test_replace_changes_only_target_field() -> None:
    food = make_food(food_id=3, food_type="Snack")

    patched = apply_patch(
        food, [PatchOperation(op="replace", path="/name", value="Pear")]
    )

    assert patched == make_food(food_id=3, name="Pear", food_type="Snack")
    assert food.name == "Apple"


def test_remove_resets_optional_type() -> None:
    patched = apply_patch(
        make_food(food_type="Snack"), [PatchOperation(op="remove", path="/type")]
    )

    assert patched.type is None


def test_numeric_strings_are_accepted_for_calories() -> None:
    patched = apply_patch(
        make_food(), [PatchOperation(op="replace", path="/Calories", value="120")]
    )

    assert patched.calories == 120


@pytest.mark.parametrize(
    "operation",
    [
        PatchOperation(op="replace", path="calories", value=1),
        PatchOperation(op="replace", path="/created", value="2024-01-01"),
        PatchOperation(op="replace", path="/weight", value=1),
        PatchOperation(op="replace", path="/calories", value=True),
        PatchOperation(op="replace", path="/calories", value=12.5),
        PatchOperation(op="replace", path="/name", value=5),
        PatchOperation(op="test", path="/calories", value=96),
        PatchOperation(op="replace", path="/calories", value="--5"),
        PatchOperation(op="replace", path="/calories", value="\u00b2"),
        PatchOperation(op="replace", path="/calories", value="1" * 5000),
    ],
)
def test_invalid_operations_raise(operation: PatchOperation) -> None:
    with pytest.raises(ValidationError):
        apply_patch(make_food(), [operation])


def test_test_operation_passes_on_match() -> None:
    food = make_food()
    operation = PatchOperation(op="test", path="/name", value="Apple")

    assert apply_patch(food, [operation]) == food
