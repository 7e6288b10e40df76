"""
Catalog Views

Tree projections of the catalog and the editor action of inserting a
component into a file.

Each view returns a flat list of TreeRow. When there is nothing to show,
the list holds a single placeholder row whose context says why:

    context="component"  a real entry (component_id set)
    context="empty"      the list is empty
    context="login"      favorites need a logged-in session
    context="error"      the backend call failed (tooltip holds the message)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tailblocks.client.api_client import ComponentClient, ComponentFilters
from tailblocks.client.exceptions import ClientError
from tailblocks.client.models import Component
from tailblocks.client.session import AuthSession


@dataclass(frozen=True)
class TreeRow:
    label: str
    description: str = ""
    tooltip: str = ""
    component_id: Optional[str] = None
    context: str = "component"


def component_row(component: Component) -> TreeRow:
    label = f"★ {component.name}" if component.is_favorite else component.name
    return TreeRow(
        label=label,
        description=component.category,
        tooltip=component.description,
        component_id=component.id,
    )


def _rows(components: list[Component], empty_label: str) -> list[TreeRow]:
    if not components:
        return [TreeRow(label=empty_label, context="empty")]
    return [component_row(component) for component in components]


def catalog_view(
    client: ComponentClient,
    filters: Optional[ComponentFilters] = None,
) -> list[TreeRow]:
    """Rows for the component catalog."""
    try:
        components = client.get_components(filters)
    except ClientError as e:
        return [TreeRow(label="Failed to load components", tooltip=str(e), context="error")]
    return _rows(components, "No components")


def favorites_view(client: ComponentClient, session: AuthSession) -> list[TreeRow]:
    """Rows for the caller's favorites."""
    if not session.is_authenticated:
        return [TreeRow(label="Log in to see your favorites", context="login")]
    try:
        components = client.get_components(ComponentFilters(favorites=True))
    except ClientError as e:
        return [TreeRow(label="Failed to load favorites", tooltip=str(e), context="error")]
    return _rows(components, "No favorites yet")


def insert_component(path: Path, code: str, line: Optional[int] = None) -> int:
    """
    Insert component code into a text file.

    Args:
        path: Target file; created if missing
        code: Code to insert
        line: 1-based line to insert before; None appends at the end

    Returns:
        The 1-based line where the code starts
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8") if path.exists() else ""
    lines = text.splitlines(keepends=True)
    if lines and not lines[-1].endswith("\n"):
        lines[-1] += "\n"

    snippet = code if code.endswith("\n") else code + "\n"
    index = len(lines) if line is None else max(0, min(line - 1, len(lines)))
    lines.insert(index, snippet)

    path.write_text("".join(lines), encoding="utf-8")
    return index + 1
