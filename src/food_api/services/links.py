"""HATEOAS link generation for food resources."""

from dataclasses import asdict, dataclass
from urllib.parse import urlencode

from food_api.domain.foods import QueryParameters
from food_api.domain.links import Link


@dataclass
class LinkService:
    """Builds version-aware navigation links rooted at ``base_url``."""

    base_url: str

    def food_url(self, version: str, food_id: int | None = None) -> str:
        """Return the collection URL, or the item URL when an id is given."""
        url = f"{self.base_url.rstrip('/')}/api/v{version}/food"
        if food_id is not None:
            url = f"{url}/{food_id}"
        return url

    def expand_single_food(
        self, item: dict[str, object], food_id: int, version: str
    ) -> dict[str, object]:
        """Return the item with links for the operations it supports."""
        item_url = self.food_url(version, food_id)
        links = [
            Link(href=item_url, rel="self", method="GET"),
            Link(href=item_url, rel="delete_food", method="DELETE"),
            Link(href=self.food_url(version), rel="create_food", method="POST"),
            Link(href=item_url, rel="update_food", method="PUT"),
            Link(href=item_url, rel="patch_food", method="PATCH"),
        ]
        return {**item, "links": [asdict(link) for link in links]}

    def create_links_for_collection(
        self, query: QueryParameters, total_count: int, version: str
    ) -> list[Link]:
        """Return self/first/last links plus next and previous when they exist."""
        last_page = max(query.total_pages(total_count), 1)
        links = [
            Link(
                href=self._page_url(query, query.page, version),
                rel="self",
                method="GET",
            ),
            Link(href=self._page_url(query, 1, version), rel="first", method="GET"),
            Link(
                href=self._page_url(query, last_page, version),
                rel="last",
                method="GET",
            ),
        ]
        if query.has_next(total_count):
            links.append(
                Link(
                    href=self._page_url(query, query.page + 1, version),
                    rel="next",
                    method="GET",
                )
            )
        if query.has_previous():
            links.append(
                Link(
                    href=self._page_url(
                        query, min(query.page - 1, last_page), version
                    ),
                    rel="previous",
                    method="GET",
                )
            )
        return links

    def create_links_for_random_meal(self, version: str) -> list[Link]:
        """Return the self link of the random meal endpoint."""
        return [
            Link(
                href=f"{self.food_url(version)}/random-meal",
                rel="self",
                method="GET",
            )
        ]

    def _page_url(self, query: QueryParameters, page: int, version: str) -> str:
        params: dict[str, object] = {
            "page": page,
            "pageCount": query.page_count,
            "orderBy": query.order_by,
        }
        if query.has_query:
            params["query"] = query.query
        if query.type:
            params["type"] = query.type
        return f"{self.food_url(version)}?{urlencode(params)}"
