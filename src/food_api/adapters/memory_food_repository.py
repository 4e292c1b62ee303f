"""In-memory implementation of the food repository."""

import random
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from itertools import islice

from food_api.domain.foods import MEAL_COURSES, FoodEntity, QueryParameters
from food_api.services.foods import FoodRepository


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """Process-local food store guarded by a single lock."""

    foods: dict[int, FoodEntity] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _next_id: int = field(default=1, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_single(self, food_id: int) -> FoodEntity | None:
        """Return a food by id, if present."""
        with self._lock:
            return self.foods.get(food_id)

    def add(self, food: FoodEntity) -> FoodEntity:
        """Store a new food under the next free id."""
        with self._lock:
            stored = replace(food, id=self._next_id)
            self.foods[stored.id] = stored
            self._next_id += 1
            return stored

    def delete(self, food_id: int) -> None:
        """Remove a food by id."""
        with self._lock:
            self.foods.pop(food_id, None)

    def update(self, food_id: int, food: FoodEntity) -> FoodEntity:
        """Replace the stored food, keeping its id."""
        with self._lock:
            if food_id not in self.foods:
                raise KeyError(food_id)
            stored = replace(food, id=food_id)
            self.foods[food_id] = stored
            return stored

    def get_all(self, query: QueryParameters) -> Iterator[FoodEntity]:
        """Return a lazy iterator over one page of matching foods."""
        with self._lock:
            matches = [food for food in self.foods.values() if query.matches(food)]
        matches.sort(key=lambda food: _sort_key(food, query.sort_field))
        if query.is_descending:
            matches.reverse()
        return islice(matches, query.offset, query.offset + query.page_count)

    def get_random_meal(self) -> list[FoodEntity]:
        """Pick one random food per course, skipping empty courses."""
        with self._lock:
            foods = list(self.foods.values())
        meal = []
        for course in MEAL_COURSES:
            candidates = [
                food for food in foods if (food.type or "").lower() == course.lower()
            ]
            if candidates:
                meal.append(self.rng.choice(candidates))
        return meal

    def count(self, query: QueryParameters | None = None) -> int:
        """Return how many foods match the filters."""
        with self._lock:
            if query is None:
                return len(self.foods)
            return sum(1 for food in self.foods.values() if query.matches(food))

    def save(self) -> bool:
        """Changes apply immediately, so saving always succeeds."""
        return True


def _sort_key(food: FoodEntity, sort_field: str) -> tuple[bool, object]:
    value = getattr(food, sort_field)
    if isinstance(value, str):
        value = value.lower()
    return value is None, value if value is not None else ""
