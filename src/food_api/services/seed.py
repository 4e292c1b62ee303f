"""Initial food data for fresh stores."""

import logging
from datetime import UTC, datetime

from food_api.domain.foods import FoodEntity
from food_api.services.foods import FoodRepository

_logger = logging.getLogger(__name__)

SEED_FOODS: tuple[tuple[str, str, int], ...] = (
    ("Lasagne", "Main", 1000),
    ("Hamburger", "Main", 1100),
    ("Spaghetti", "Main", 1200),
    ("Pizza", "Main", 1300),
    ("Tomato soup", "Starter", 250),
    ("Caesar salad", "Starter", 400),
    ("Tiramisu", "Dessert", 450),
    ("Apple pie", "Dessert", 410),
)


def seed_foods(repository: FoodRepository) -> int:
    """Populate an empty repository and return how many foods were added."""
    if repository.count() > 0:
        return 0
    now = datetime.now(tz=UTC)
    for name, food_type, calories in SEED_FOODS:
        repository.add(
            FoodEntity(id=0, name=name, calories=calories, type=food_type, created=now)
        )
    if not repository.save():
        raise RuntimeError("Seeding food items failed on save.")
    _logger.info("Seeded food store: count=%s", len(SEED_FOODS))
    return len(SEED_FOODS)
