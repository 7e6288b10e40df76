"""
Component API Client

Synchronous wrapper over the catalog endpoints.

Every call sends the session's bearer header when logged in, and turns
any failure (transport error or non-2xx response) into ClientError
carrying the backend's message.

Usage:
======
    client = ComponentClient(http, session)
    cards = client.get_components(ComponentFilters(category="cards", sort="name"))
    client.toggle_favorite(cards[0].id)
"""

from dataclasses import dataclass
from typing import Any, Optional

import httpx
import structlog

from tailblocks.client.exceptions import ClientError, raise_for_error
from tailblocks.client.models import Component
from tailblocks.client.session import AuthSession

logger = structlog.get_logger(__name__)


@dataclass
class ComponentFilters:
    search_term: Optional[str] = None
    category: Optional[str] = None
    sort: Optional[str] = None
    favorites: bool = False

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.search_term:
            params["search"] = self.search_term
        if self.category:
            params["category"] = self.category
        if self.sort:
            params["sort"] = self.sort
        if self.favorites:
            params["favorites"] = "true"
        return params


class ComponentClient:
    """Catalog calls against the API."""

    def __init__(self, http: httpx.Client, session: AuthSession) -> None:
        self.http = http
        self.session = session

    def _request(
        self,
        method: str,
        path: str,
        fallback: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = self.http.request(
                method,
                path,
                headers=self.session.auth_header(),
                **kwargs,
            )
        except httpx.HTTPError as e:
            logger.warning("Request failed", method=method, path=path, error=str(e))
            raise ClientError(f"Could not reach server: {e}") from e
        raise_for_error(response, fallback)
        return response

    def get_components(self, filters: Optional[ComponentFilters] = None) -> list[Component]:
        """
        List components.

        Raises:
            ClientError: On any failure
        """
        params = (filters or ComponentFilters()).to_params()
        response = self._request(
            "GET", "/components", "Failed to load components", params=params
        )
        return [Component.model_validate(item) for item in response.json()]

    def get_component(self, component_id: str) -> Component:
        response = self._request(
            "GET", f"/components/{component_id}", "Failed to load component"
        )
        return Component.model_validate(response.json())

    def create_component(
        self,
        name: str,
        description: str,
        category: str,
        code: str,
        tags: Optional[list[str]] = None,
    ) -> Component:
        """
        Upload a component. Requires a logged-in session.

        Raises:
            ClientError: With the backend's validation or auth message
        """
        payload = {
            "name": name,
            "description": description,
            "category": category,
            "tags": tags or [],
            "code": code,
        }
        response = self._request(
            "POST", "/components", "Failed to create component", json=payload
        )
        return Component.model_validate(response.json())

    def toggle_favorite(self, component_id: str) -> bool:
        """
        Toggle a component in the user's favorites.

        Returns:
            The new favorite state
        """
        response = self._request(
            "POST",
            f"/components/{component_id}/favorite",
            "Favorite toggle failed",
        )
        return bool(response.json().get("isFavorite"))
