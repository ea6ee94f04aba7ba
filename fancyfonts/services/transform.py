"""
Text transform engine.

Renders input text through a font in one of two ways:

- Inline: each code point is replaced by its glyph, one-to-one.
- Block: glyphs are multi-row ASCII art. Each input line becomes a block of
  rows where every glyph occupies its own column, padded to that glyph's
  width so columns line up even when glyphs differ in width and height.

Examples:
    >>> font = build_font({"id": "flip", "characters": {"a": "ɐ"}})
    >>> render("ab", font)
    'ɐb'

    >>> font = build_font({"id": "block", "characters": {"A": "#\\n#", "B": "##\\n.#"}})
    >>> render("AB", font)
    '# ##\\n# .#'

Unmapped characters are never an error: they pass through verbatim on the
inline path and act as single-row, single-column glyphs on the block path.
"""

from collections.abc import Mapping

from fancyfonts.models.font import GLYPH_ROW_BREAK, Decorator, Font
from fancyfonts.services.decorators import decorate

LINE_BREAK = "\n"

# Block renderings of successive input lines are separated by a blank line.
# Inline renderings are not; both behaviours are relied on by clients.
BLOCK_LINE_SEPARATOR = LINE_BREAK * 2

GLYPH_JOINER = " "


def split_lines(text: str | None) -> list[str]:
    """Split input at line breaks. Empty input yields a single empty line."""
    return str(text or "").split(LINE_BREAK)


def _resolve_glyph(char: str, characters: Mapping[str, str]) -> str:
    if char in characters:
        return characters[char]
    return char


def transform_inline(line: str, characters: Mapping[str, str]) -> str:
    """Substitute each code point of a line with its mapped glyph."""
    return "".join(_resolve_glyph(char, characters) for char in line)


def _glyph_rows(line: str, characters: Mapping[str, str]) -> list[list[str]]:
    return [_resolve_glyph(char, characters).split(GLYPH_ROW_BREAK) for char in line]


def _row_width(rows: list[str]) -> int:
    return max(1, max((len(row) for row in rows), default=0))


def glyph_widths(line: str, characters: Mapping[str, str]) -> list[int]:
    """
    Column width reserved for each glyph of a line on the block path.

    A glyph's width is its longest row, with a floor of one column.
    """
    return [_row_width(rows) for rows in _glyph_rows(line, characters)]


def transform_block(
    line: str,
    characters: Mapping[str, str],
    joiner: str = GLYPH_JOINER,
) -> str:
    """
    Render a single input line as multi-row block art.

    Args:
        line: One input line (must not contain a line break)
        characters: Font character map
        joiner: Separator appended after every glyph column

    Returns:
        The block's rows joined with line breaks, trailing whitespace
        stripped from every row.
    """
    glyphs = _glyph_rows(line, characters)
    max_rows = max(1, max((len(rows) for rows in glyphs), default=0))
    widths = [_row_width(rows) for rows in glyphs]

    rows = [""] * max_rows
    for glyph, width in zip(glyphs, widths, strict=True):
        for r in range(max_rows):
            part = glyph[r] if r < len(glyph) else ""
            rows[r] += part.ljust(width) + joiner

    return LINE_BREAK.join(row.rstrip() for row in rows)


def render_plain(text: str | None, font: Font) -> str:
    """Transform text through a font, without decoration."""
    lines = split_lines(text)

    if font.is_block_font:
        return BLOCK_LINE_SEPARATOR.join(
            transform_block(line, font.characters) for line in lines
        )

    return LINE_BREAK.join(transform_inline(line, font.characters) for line in lines)


def render(text: str | None, font: Font, decorator: Decorator | None = None) -> str:
    """
    Transform text through a font, then wrap it with the decorator.

    Args:
        text: Raw input, may span several lines
        font: Font to render with
        decorator: Optional wrapping marker

    Returns:
        The fully transformed and decorated string.
    """
    return decorate(render_plain(text, font), decorator)
