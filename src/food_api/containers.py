"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_api.adapters.memory_food_repository import InMemoryFoodRepository
from food_api.adapters.supabase_food_repository import SupabaseFoodRepository
from food_api.config import Settings
from food_api.services.foods import FoodRepository, FoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_repository: FoodRepository
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


def build_food_repository(settings: Settings) -> FoodRepository:
    """Create the repository for the configured backend."""
    if settings.food_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseFoodRepository(client, table_name=settings.supabase_table)
    return InMemoryFoodRepository()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    food_repository = build_food_repository(resolved_settings)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        food_repository=food_repository,
        food_service=FoodService(food_repository),
        close_resources=close_resources,
    )
