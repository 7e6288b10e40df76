"""
Tailblocks Command Line Tool

Usage:
======
    tailblocks register alice alice@x.com
    tailblocks login alice@x.com
    tailblocks list --search "card dark" --category cards --sort popular
    tailblocks favorites
    tailblocks show <component-id>
    tailblocks upload --name Btn --description "A primary button" \\
        --category buttons --tags ui,primary --code-file btn.html
    tailblocks favorite <component-id>
    tailblocks insert <component-id> page.html --line 12
    tailblocks whoami
    tailblocks logout

Every backend failure, and every unreadable or undecodable local file, is
printed as a single "Error: ..." line on stderr and leaves the stored
session untouched. Exit status is 1 in that case.
"""

import argparse
import getpass
import sys
from pathlib import Path
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from tailblocks import __version__
from tailblocks.client.api_client import ComponentClient, ComponentFilters
from tailblocks.client.exceptions import ClientError
from tailblocks.client.session import AuthSession, TokenStore
from tailblocks.client.settings import ClientSettings
from tailblocks.client.views import (
    TreeRow,
    catalog_view,
    favorites_view,
    insert_component,
)

CATEGORIES = ["buttons", "cards", "forms", "navigation", "other"]
SORT_KEYS = ["newest", "name", "popular"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tailblocks",
        description="Browse, favorite, upload and insert UI components.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    register = commands.add_parser("register", help="Create an account")
    register.add_argument("username")
    register.add_argument("email")
    register.add_argument("--password", help="Prompted for when omitted")

    login = commands.add_parser("login", help="Log in and remember the token")
    login.add_argument("email")
    login.add_argument("--password", help="Prompted for when omitted")

    commands.add_parser("logout", help="Forget the stored token")
    commands.add_parser("whoami", help="Show the logged-in user")

    listing = commands.add_parser("list", help="List components")
    listing.add_argument("--search", help="Whitespace-separated search terms")
    listing.add_argument("--category", choices=CATEGORIES)
    listing.add_argument("--sort", choices=SORT_KEYS)

    commands.add_parser("favorites", help="List your favorite components")

    show = commands.add_parser("show", help="Show one component with its code")
    show.add_argument("component_id")

    upload = commands.add_parser("upload", help="Upload a component")
    upload.add_argument("--name", required=True)
    upload.add_argument("--description", required=True)
    upload.add_argument("--category", required=True, choices=CATEGORIES)
    upload.add_argument("--tags", default="", help="Comma-separated tags")
    upload.add_argument("--code-file", required=True, type=Path)

    favorite = commands.add_parser("favorite", help="Toggle a component in your favorites")
    favorite.add_argument("component_id")

    insert = commands.add_parser("insert", help="Insert a component's code into a file")
    insert.add_argument("component_id")
    insert.add_argument("file", type=Path)
    insert.add_argument("--line", type=int, help="1-based line to insert before (default: end)")

    return parser


def _print_rows(rows: list[TreeRow]) -> None:
    for row in rows:
        if row.component_id:
            print(f"{row.component_id}  {row.label}  [{row.description}]")
        else:
            print(row.label)
        if row.context == "error" and row.tooltip:
            print(f"  {row.tooltip}")


def _password(value: Optional[str]) -> str:
    return value if value is not None else getpass.getpass("Password: ")


def run(
    args: argparse.Namespace,
    session: AuthSession,
    client: ComponentClient,
) -> int:
    """Execute a parsed command. ClientError propagates to the caller."""
    command = args.command

    if command == "register":
        print(session.register(args.username, args.email, _password(args.password)))
    elif command == "login":
        user = session.login(args.email, _password(args.password))
        print(f"Logged in as {user.username}")
    elif command == "logout":
        session.logout()
        print("Logged out")
    elif command == "whoami":
        user = session.current_user
        if user is None:
            print("Not logged in")
            return 1
        print(f"{user.username} <{user.email}>")
    elif command == "list":
        filters = ComponentFilters(
            search_term=args.search,
            category=args.category,
            sort=args.sort,
        )
        _print_rows(catalog_view(client, filters))
    elif command == "favorites":
        _print_rows(favorites_view(client, session))
    elif command == "show":
        component = client.get_component(args.component_id)
        star = " ★" if component.is_favorite else ""
        print(f"{component.name}{star}  [{component.category}] by {component.author.username}")
        print(component.description)
        if component.tags:
            print("Tags: " + ", ".join(component.tags))
        print()
        print(component.code)
    elif command == "upload":
        code = args.code_file.read_text(encoding="utf-8")
        tags = [tag.strip() for tag in args.tags.split(",") if tag.strip()]
        component = client.create_component(
            name=args.name,
            description=args.description,
            category=args.category,
            code=code,
            tags=tags,
        )
        print(f"Uploaded {component.name} ({component.id})")
    elif command == "favorite":
        is_favorite = client.toggle_favorite(args.component_id)
        print("Added to favorites" if is_favorite else "Removed from favorites")
    elif command == "insert":
        component = client.get_component(args.component_id)
        line = insert_component(args.file, component.code, args.line)
        print(f"Inserted {component.name} into {args.file} at line {line}")

    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    """
    Command line entry point.

    Args:
        argv: Arguments (default: sys.argv[1:])
        transport: httpx transport override

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        settings = ClientSettings()
    except ValidationError:
        print("Error: TAILBLOCKS_API_URL is not set", file=sys.stderr)
        return 1

    with httpx.Client(
        base_url=settings.API_URL,
        timeout=settings.TIMEOUT,
        transport=transport,
    ) as http:
        session = AuthSession(http, TokenStore(settings.TOKEN_FILE))
        session.restore()
        client = ComponentClient(http, session)
        try:
            return run(args, session, client)
        except ClientError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
