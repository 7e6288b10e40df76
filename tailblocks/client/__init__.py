"""
Tailblocks Client

Library and command line tool for the Tailblocks API.

Modules:
========
- settings:   ClientSettings (TAILBLOCKS_* environment variables)
- session:    TokenStore, AuthSession
- api_client: ComponentClient, ComponentFilters
- views:      catalog_view, favorites_view, insert_component
- cli:        `tailblocks` command

Usage:
======
    import httpx
    from tailblocks.client import AuthSession, ComponentClient, TokenStore

    http = httpx.Client(base_url="http://localhost:3000/api")
    session = AuthSession(http, TokenStore(Path("~/.config/tailblocks/credentials.json").expanduser()))
    session.restore()
    components = ComponentClient(http, session).get_components()
"""

from tailblocks.client.api_client import ComponentClient, ComponentFilters
from tailblocks.client.exceptions import ClientError
from tailblocks.client.session import AuthSession, TokenStore
from tailblocks.client.settings import ClientSettings
from tailblocks.client.views import TreeRow, catalog_view, favorites_view, insert_component

__all__ = [
    "AuthSession",
    "ClientError",
    "ClientSettings",
    "ComponentClient",
    "ComponentFilters",
    "TokenStore",
    "TreeRow",
    "catalog_view",
    "favorites_view",
    "insert_component",
]
