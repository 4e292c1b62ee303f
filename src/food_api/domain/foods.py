"""Domain models for food items."""

import math
from dataclasses import dataclass
from datetime import datetime

MEAL_COURSES = ("Starter", "Main", "Dessert")
SORTABLE_FIELDS = frozenset({"id", "name", "calories", "type", "created"})


@dataclass(frozen=True)
class FoodEntity:
    """Represents a food item held by a repository."""

    id: int
    name: str
    calories: int
    type: str | None
    created: datetime


@dataclass(frozen=True)
class QueryParameters:
    """Paging, filtering and ordering controls for listing foods."""

    page: int = 1
    page_count: int = 10
    query: str | None = None
    type: str | None = None
    order_by: str = "name"

    @property
    def has_query(self) -> bool:
        return bool(self.query and self.query.strip())

    @property
    def sort_field(self) -> str:
        return self.order_by.split()[0].lower() if self.order_by.strip() else "name"

    @property
    def is_descending(self) -> bool:
        parts = self.order_by.split()
        return len(parts) > 1 and parts[1].lower() == "desc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_count

    def total_pages(self, total_count: int) -> int:
        """Return the number of pages needed for ``total_count`` items."""
        return math.ceil(total_count / self.page_count)

    def has_previous(self) -> bool:
        return self.page > 1

    def has_next(self, total_count: int) -> bool:
        return self.page < self.total_pages(total_count)

    def matches(self, food: FoodEntity) -> bool:
        """Return true when the food passes the text and type filters."""
        if self.type and (food.type or "").lower() != self.type.strip().lower():
            return False
        if not self.has_query:
            return True
        needle = self.query.strip().lower()
        return needle in food.name.lower() or needle in str(food.calories)
