"""Versioned food endpoints."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from food_api.api.food_models import FoodCreate, FoodItem, FoodUpdate
from food_api.config import normalize_api_version, parse_api_versions
from food_api.domain.foods import FoodEntity, QueryParameters
from food_api.errors import UnsupportedApiVersionError, ValidationError
from food_api.services.links import LinkService

if TYPE_CHECKING:
    from food_api.containers import AppContainer

router = APIRouter(prefix="/api/v{version}/food", tags=["food"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def resolve_api_version(version: str, request: Request, response: Response) -> str:
    """Reject versions the app does not serve and advertise the ones it does."""
    supported = parse_api_versions(_container(request).settings.api_versions)
    response.headers["api-supported-versions"] = ", ".join(supported)
    if normalize_api_version(version) not in supported:
        raise UnsupportedApiVersionError(
            f"The requested API version '{version}' is not supported."
        )
    return version


def get_query_parameters(  # noqa: PLR0913
    request: Request,
    page: int = Query(default=1, ge=1),
    page_count: int = Query(default=10, ge=1, alias="pageCount"),
    query: str | None = Query(default=None),
    food_type: str | None = Query(default=None, alias="type"),
    order_by: str = Query(default="name", alias="orderBy"),
) -> QueryParameters:
    """Collect paging and filter parameters from the query string."""
    max_page_count = _container(request).settings.max_page_count
    if page_count > max_page_count:
        raise ValidationError(f"pageCount must not exceed {max_page_count}.")
    return QueryParameters(
        page=page,
        page_count=page_count,
        query=query,
        type=food_type,
        order_by=order_by,
    )


def _links(request: Request) -> LinkService:
    return LinkService(str(request.base_url))


def _expanded(
    links: LinkService, food: FoodEntity, version: str
) -> dict[str, object]:
    return links.expand_single_food(
        FoodItem.from_entity(food).to_payload(), food.id, version
    )


@router.get("")
async def list_foods(
    request: Request,
    response: Response,
    version: str = Depends(resolve_api_version),
    query: QueryParameters = Depends(get_query_parameters),
) -> dict[str, object]:
    """Return one page of food items with navigation links."""
    foods, total_count = _container(request).food_service.list_foods(query)
    links = _links(request)
    response.headers["X-Pagination"] = json.dumps(
        {
            "totalCount": total_count,
            "pageSize": query.page_count,
            "currentPage": query.page,
            "totalPages": query.total_pages(total_count),
        }
    )
    return {
        "value": [_expanded(links, food, version) for food in foods],
        "links": [
            asdict(link)
            for link in links.create_links_for_collection(query, total_count, version)
        ],
    }


@router.get("/random-meal")
async def random_meal(
    request: Request, version: str = Depends(resolve_api_version)
) -> dict[str, object]:
    """Return a random starter, main and dessert."""
    foods = _container(request).food_service.random_meal()
    links = _links(request)
    return {
        "value": [_expanded(links, food, version) for food in foods],
        "links": [
            asdict(link) for link in links.create_links_for_random_meal(version)
        ],
    }


@router.get("/details/{food_id}", deprecated=True)
async def food_details(
    food_id: int,
    request: Request,
    response: Response,
    version: str = Depends(resolve_api_version),
) -> dict[str, object]:
    """Return a food item. Deprecated in favour of ``GET /food/{id}``."""
    food = _container(request).food_service.get_food_details(food_id)
    response.headers["Deprecation"] = "true"
    return _expanded(_links(request), food, version)


@router.get("/{food_id}")
async def get_food(
    food_id: int, request: Request, version: str = Depends(resolve_api_version)
) -> dict[str, object]:
    """Return a single food item with links."""
    food = _container(request).food_service.get_food(food_id)
    return _expanded(_links(request), food, version)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    body: FoodCreate,
    request: Request,
    response: Response,
    version: str = Depends(resolve_api_version),
) -> dict[str, object]:
    """Create a food item."""
    food = _container(request).food_service.create_food(
        body.name, body.calories, body.type
    )
    response.headers["Location"] = _links(request).food_url(version, food.id)
    return FoodItem.from_entity(food).to_payload()


@router.put("/{food_id}")
async def update_food(
    food_id: int,
    body: FoodUpdate,
    request: Request,
    _version: str = Depends(resolve_api_version),
) -> dict[str, object]:
    """Replace all mutable fields of a food item."""
    food = _container(request).food_service.update_food(
        food_id, body.id, body.name, body.calories, body.type
    )
    return FoodItem.from_entity(food).to_payload()


@router.delete("/{food_id}")
async def delete_food(
    food_id: int, request: Request, _version: str = Depends(resolve_api_version)
) -> dict[str, str]:
    """Delete a food item."""
    _container(request).food_service.delete_food(food_id)
    return {"message": "Food item deleted successfully."}


@router.patch("/{food_id}")
async def patch_food(
    food_id: int,
    request: Request,
    document: Any = Body(default=None),
    _version: str = Depends(resolve_api_version),
) -> dict[str, object]:
    """Apply a JSON Patch style document to a food item."""
    food = _container(request).food_service.patch_food(food_id, document)
    return FoodItem.from_entity(food).to_payload()
