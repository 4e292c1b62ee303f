"""Supabase implementation of the food repository."""

import random
from dataclasses import dataclass, field
from datetime import datetime

from supabase import Client

from food_api.domain.foods import MEAL_COURSES, FoodEntity, QueryParameters
from food_api.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food items."""

    client: Client
    table_name: str = "foods"
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def get_single(self, food_id: int) -> FoodEntity | None:
        """Return a food by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def add(self, food: FoodEntity) -> FoodEntity:
        """Insert a food and return it with its database id."""
        response = (
            self.client.table(self.table_name).insert(_serialize_food(food)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_food(response.data[0])

    def delete(self, food_id: int) -> None:
        """Delete a food by id."""
        self.client.table(self.table_name).delete().eq("id", food_id).execute()

    def update(self, food_id: int, food: FoodEntity) -> FoodEntity:
        """Update a food row and return it."""
        response = (
            self.client.table(self.table_name)
            .update(_serialize_food(food))
            .eq("id", food_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to update food item {food_id}")
        return _parse_food(response.data[0])

    def get_all(self, query: QueryParameters) -> list[FoodEntity]:
        """Return one filtered, ordered page of foods."""
        request = self._filtered(self.client.table(self.table_name).select("*"), query)
        response = (
            request.order(query.sort_field, desc=query.is_descending)
            .range(query.offset, query.offset + query.page_count - 1)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_random_meal(self) -> list[FoodEntity]:
        """Pick one random food per course, skipping empty courses."""
        meal = []
        for course in MEAL_COURSES:
            response = (
                self.client.table(self.table_name)
                .select("*")
                .ilike("type", course)
                .execute()
            )
            if response.data:
                meal.append(_parse_food(self.rng.choice(response.data)))
        return meal

    def count(self, query: QueryParameters | None = None) -> int:
        """Return the exact number of rows matching the filters."""
        request = self.client.table(self.table_name).select("id", count="exact")
        if query is not None:
            request = self._filtered(request, query)
        response = request.execute()
        return response.count or 0

    def save(self) -> bool:
        """Supabase writes are immediate, so saving always succeeds."""
        return True

    @staticmethod
    def _filtered(request, query: QueryParameters):  # type: ignore[no-untyped-def]
        if query.has_query:
            request = request.ilike("name", f"%{query.query.strip()}%")
        if query.type:
            request = request.ilike("type", query.type.strip())
        return request


def _serialize_food(food: FoodEntity) -> dict[str, object]:
    return {
        "name": food.name,
        "calories": food.calories,
        "type": food.type,
        "created": food.created.isoformat(),
    }


def _parse_food(row: dict[str, object]) -> FoodEntity:
    """Parse a food row into a domain model."""
    return FoodEntity(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        calories=int(row.get("calories", 0)),
        type=row.get("type"),
        created=datetime.fromisoformat(str(row.get("created"))),
    )
