"""Food item business logic."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from food_api.domain.foods import SORTABLE_FIELDS, FoodEntity, QueryParameters
from food_api.domain.patch import PatchOperation, apply_patch
from food_api.errors import ConflictError, NotFoundError, ValidationError

_logger = logging.getLogger(__name__)

_PATCH_DOCUMENT = TypeAdapter(list[PatchOperation])


class FoodRepository(Protocol):
    """Persistence interface for food items."""

    def get_single(self, food_id: int) -> FoodEntity | None:
        """Return a food by id, if present."""

    def add(self, food: FoodEntity) -> FoodEntity:
        """Store a new food, assigning its id, and return it."""

    def delete(self, food_id: int) -> None:
        """Remove a food by id."""

    def update(self, food_id: int, food: FoodEntity) -> FoodEntity:
        """Replace a stored food and return it."""

    def get_all(self, query: QueryParameters) -> Iterable[FoodEntity]:
        """Return one filtered, ordered page of foods."""

    def get_random_meal(self) -> list[FoodEntity]:
        """Return one random food per meal course."""

    def count(self, query: QueryParameters | None = None) -> int:
        """Return the number of foods matching the query filters."""

    def save(self) -> bool:
        """Commit pending changes and report success."""


@dataclass
class FoodService:
    """Application service behind the food endpoints."""

    repository: FoodRepository

    def list_foods(self, query: QueryParameters) -> tuple[list[FoodEntity], int]:
        """Return the requested page of foods and the total matching count."""
        if query.sort_field not in SORTABLE_FIELDS:
            raise ValidationError(f"Cannot order by '{query.order_by}'.")
        items = list(self.repository.get_all(query))
        return items, self.repository.count(query)

    def get_food(self, food_id: int) -> FoodEntity:
        """Return a food by id or raise NotFoundError."""
        if food_id <= 0:
            raise NotFoundError(f"Food item {food_id} not found.")
        food = self.repository.get_single(food_id)
        if food is None:
            raise NotFoundError(f"Food item {food_id} not found.")
        return food

    def get_food_details(self, food_id: int) -> FoodEntity:
        """Deprecated alias of get_food."""
        _logger.warning("Deprecated food details lookup used: food_id=%s", food_id)
        return self.get_food(food_id)

    def create_food(
        self, name: str, calories: int, food_type: str | None = None
    ) -> FoodEntity:
        """Validate and store a new food item."""
        _validate_fields(name, calories)
        created = self.repository.add(
            FoodEntity(
                id=0,
                name=name,
                calories=calories,
                type=food_type,
                created=datetime.now(tz=UTC),
            )
        )
        self._save("Creating a food item failed on save.")
        _logger.info("Food created: id=%s name=%s", created.id, created.name)
        return created

    def update_food(  # noqa: PLR0913
        self,
        food_id: int,
        body_id: int,
        name: str,
        calories: int,
        food_type: str | None = None,
    ) -> FoodEntity:
        """Replace all mutable fields of an existing food item."""
        if food_id != body_id:
            raise ConflictError("Food item ID mismatch.")
        existing = self.get_food(food_id)
        _validate_fields(name, calories)
        updated = self.repository.update(
            food_id,
            replace(existing, name=name, calories=calories, type=food_type),
        )
        self._save(f"Updating food item {food_id} failed on save.")
        _logger.info("Food updated: id=%s", food_id)
        return updated

    def delete_food(self, food_id: int) -> None:
        """Remove an existing food item."""
        self.get_food(food_id)
        self.repository.delete(food_id)
        self._save(f"Deleting food item {food_id} failed on save.")
        _logger.info("Food deleted: id=%s", food_id)

    def patch_food(self, food_id: int, document: object) -> FoodEntity:
        """Apply a patch document to an existing food item."""
        if food_id <= 0:
            raise NotFoundError(f"Food item {food_id} not found.")
        operations = _parse_patch_document(document)
        existing = self.get_food(food_id)
        patched = apply_patch(existing, operations)
        _validate_fields(patched.name, patched.calories)
        updated = self.repository.update(food_id, patched)
        self._save(f"Patching food item {food_id} failed on save.")
        _logger.info("Food patched: id=%s operations=%s", food_id, len(operations))
        return updated

    def random_meal(self) -> list[FoodEntity]:
        """Return a random starter, main and dessert."""
        return self.repository.get_random_meal()

    def _save(self, failure_message: str) -> None:
        if not self.repository.save():
            raise RuntimeError(failure_message)


def _validate_fields(name: str | None, calories: int) -> None:
    if not name or not name.strip() or calories <= 0:
        raise ValidationError("Invalid food item details.")


def _parse_patch_document(document: object) -> list[PatchOperation]:
    if document is None:
        raise ValidationError("Invalid patch data.")
    try:
        return _PATCH_DOCUMENT.validate_python(document)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid patch data.") from exc
