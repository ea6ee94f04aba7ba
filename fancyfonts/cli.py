"""
Command-line interface.

Renders text through the catalog from a terminal. Preferences
(favorites, decorator choice) are stored for the local user in the same
database the API uses.

Usage:
    fancyfonts render "Hello" --font bold-serif --decorator stars
    fancyfonts render "Hi" --style block
    fancyfonts list --query script
    fancyfonts styles
    fancyfonts favorite flip
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from fancyfonts.config import ALL, LOCAL_USER_ID, settings
from fancyfonts.db.database import async_session_factory, commit_or_rollback, init_db
from fancyfonts.models.catalog import Catalog
from fancyfonts.models.filter_state import FilterState
from fancyfonts.services.font_data import get_catalog
from fancyfonts.services.font_search import search_fonts
from fancyfonts.services.preferences import (
    load_filter_state,
    save_decorator_id,
    toggle_favorite,
)
from fancyfonts.services.transform import render

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command cannot run with the given arguments."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fancyfonts",
        description="Style text with Unicode and block-letter fonts.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    render_cmd = commands.add_parser("render", help="Render text through matching fonts")
    render_cmd.add_argument("text", nargs="?", default=settings.default_text)
    render_cmd.add_argument("--font", default=ALL, help="Render with a single font id")
    render_cmd.add_argument("--decorator", default=None, help="Decorator id (saved as default)")
    _add_filter_arguments(render_cmd)

    list_cmd = commands.add_parser("list", help="List matching fonts")
    _add_filter_arguments(list_cmd)

    commands.add_parser("styles", help="List style tags")

    favorite_cmd = commands.add_parser("favorite", help="Toggle a font as favorite")
    favorite_cmd.add_argument("font_id")

    return parser


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--query", default="", help="Free-text filter")
    parser.add_argument("--style", default=ALL, help="Style tag filter")
    parser.add_argument("--favorites", action="store_true", help="Only show favorites")
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.default_page_size,
        help="Maximum number of fonts to show",
    )


def format_font_output(catalog: Catalog, state: FilterState) -> str:
    """Render the visible page as text blocks headed by the font name."""
    page = search_fonts(catalog, state)
    decorator = catalog.get_decorator(state.decorator_id)

    blocks = []
    for font in page.fonts:
        marker = "*" if state.is_favorite(font.id) else " "
        kind = " (block)" if font.is_block_font else ""
        header = f"{marker} {font.display_name} [{font.id}]{kind}"
        blocks.append(f"{header}\n{render(state.text, font, decorator)}")

    blocks.append(page.summary)
    return "\n\n".join(blocks)


def format_font_list(catalog: Catalog, state: FilterState) -> str:
    """List the visible page as one row per font."""
    page = search_fonts(catalog, state)
    lines = [
        f"{'*' if state.is_favorite(font.id) else ' '} {font.id:<20} "
        f"{font.display_name:<24} [{', '.join(font.styles)}]"
        for font in page.fonts
    ]
    lines.append(page.summary)
    return "\n".join(lines)


async def run_command(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its output."""
    catalog = get_catalog()

    if args.command == "styles":
        return "\n".join(catalog.styles)

    await init_db()
    async with async_session_factory() as session:
        if args.command == "favorite":
            if catalog.get_font(args.font_id) is None:
                raise CommandError(f"Unknown font: {args.font_id}")
            favorites = await toggle_favorite(session, LOCAL_USER_ID, args.font_id)
            await commit_or_rollback(session)
            status = "added to" if args.font_id in favorites else "removed from"
            return f"{args.font_id} {status} favorites"

        page_size = max(1, args.limit)
        state = await load_filter_state(
            session,
            LOCAL_USER_ID,
            query=args.query,
            style=args.style,
            fav_only=args.favorites,
            page_size=page_size,
            limit=page_size,
        )

        if args.command == "list":
            return format_font_list(catalog, state)

        if args.decorator is not None:
            if not catalog.has_decorator(args.decorator):
                logger.warning("Unknown decorator %r, using default", args.decorator)
            else:
                await save_decorator_id(session, LOCAL_USER_ID, args.decorator)
                await commit_or_rollback(session)
            state = state.with_decorator(args.decorator)

        state = state.with_text(args.text)
        if args.font != ALL:
            if catalog.get_font(args.font) is None:
                raise CommandError(f"Unknown font: {args.font}")
            state = state.with_selected_font(args.font)

        return format_font_output(catalog, state)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        output = asyncio.run(run_command(args))
    except FileNotFoundError as e:
        logger.error("Font catalog unavailable: %s", e)
        sys.exit(1)
    except CommandError as e:
        print(f"fancyfonts: {e}", file=sys.stderr)
        sys.exit(2)

    print(output)


if __name__ == "__main__":
    main()
