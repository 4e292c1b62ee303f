"""Request and response bodies for the food endpoints."""

from pydantic import BaseModel

from food_api.domain.foods import FoodEntity


class FoodCreate(BaseModel):
    """Body of a create request."""

    name: str = ""
    calories: int = 0
    type: str | None = None


class FoodUpdate(BaseModel):
    """Body of a full replace request."""

    id: int
    name: str = ""
    calories: int = 0
    type: str | None = None


class FoodItem(BaseModel):
    """Food item as returned to clients."""

    id: int
    name: str
    calories: int
    type: str | None = None

    @classmethod
    def from_entity(cls, food: FoodEntity) -> "FoodItem":
        return cls(id=food.id, name=food.name, calories=food.calories, type=food.type)

    def to_payload(self) -> dict[str, object]:
        """Dump the item, leaving out an unset type."""
        return self.model_dump(exclude_none=True)
