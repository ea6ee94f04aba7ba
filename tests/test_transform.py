import pytest

from fancyfonts.models.font import Decorator, build_font
from fancyfonts.services.transform import (
    glyph_widths,
    render,
    render_plain,
    split_lines,
    transform_block,
    transform_inline,
)

BLOCK_CHARS = {"A": "#\n#", "B": "##\n.#"}


@pytest.fixture
def flip_font():
    return build_font({"id": "flip", "styles": ["fun"], "characters": {"a": "ɐ"}})


@pytest.fixture
def block_font():
    return build_font({"id": "block", "characters": BLOCK_CHARS})


class TestSplitLines:
    def test_empty_text_is_one_empty_line(self) -> None:
        assert split_lines("") == [""]
        assert split_lines(None) == [""]

    def test_splits_on_line_breaks(self) -> None:
        assert split_lines("a\nb\n") == ["a", "b", ""]


class TestInline:
    def test_flip_scenario(self, flip_font) -> None:
        assert render("ab", flip_font) == "ɐb"

    def test_unmapped_pass_through(self) -> None:
        assert transform_inline("a-b!", {"a": "ɐ"}) == "ɐ-b!"

    def test_empty_glyph_removes_character(self) -> None:
        assert transform_inline("axa", {"x": ""}) == "aa"

    def test_iterates_by_code_point(self) -> None:
        # Astral-plane characters are single code points
        assert transform_inline("a😀b", {"😀": "☺"}) == "a☺b"
        assert transform_inline("𝐚", {"𝐚": "A"}) == "A"

    def test_multiline_input_keeps_line_breaks(self, flip_font) -> None:
        assert render("a\na", flip_font) == "ɐ\nɐ"

    def test_multiline_input_has_no_blank_separator(self, flip_font) -> None:
        assert "\n\n" not in render("a\nb\nc", flip_font)

    @pytest.mark.parametrize("text", ["", "hello", "Hello\nWorld", "  spaced  ", "ü😀\t\n"])
    def test_empty_map_is_identity(self, text: str) -> None:
        font = build_font({"id": "plain"})
        assert render(text, font, None) == text

    def test_empty_text(self, flip_font) -> None:
        assert render("", flip_font) == ""


class TestBlock:
    def test_two_glyph_scenario(self, block_font) -> None:
        assert render("AB", block_font) == "# ##\n# .#"

    def test_row_count_is_tallest_glyph(self) -> None:
        chars = {"a": "1", "b": "1\n2\n3", "c": "1\n2"}
        rows = transform_block("abc", chars).split("\n")
        assert len(rows) == 3

    def test_shorter_glyphs_padded_below(self) -> None:
        chars = {"t": "#\n#\n#", "s": "*"}
        assert transform_block("ts", chars) == "# *\n#\n#"

    def test_unmapped_char_is_single_cell_glyph(self, block_font) -> None:
        assert render("AxB", block_font) == "# x ##\n#   .#"

    def test_glyph_widths_use_longest_row(self) -> None:
        chars = {"w": "###\n#", "n": "#\n#"}
        assert glyph_widths("wn?", chars) == [3, 1, 1]

    def test_empty_row_reserves_one_column(self) -> None:
        chars = {"e": "\n", "b": "#\n#"}
        assert glyph_widths("e", chars) == [1]
        assert transform_block("eb", chars) == "  #\n  #"

    def test_interior_padding_preserved(self) -> None:
        chars = {"w": "###\n#", "n": "@\n@"}
        assert transform_block("wn", chars) == "### @\n#   @"

    def test_leading_glyph_spacing_preserved(self) -> None:
        chars = {"i": " #\n #"}
        assert transform_block("i", chars) == " #\n #"

    def test_trailing_whitespace_stripped(self) -> None:
        chars = {"s": "#  \n#  "}
        assert transform_block("s", chars) == "#\n#"

    def test_empty_line_is_single_empty_row(self) -> None:
        assert transform_block("", BLOCK_CHARS) == ""

    def test_empty_text(self, block_font) -> None:
        assert render("", block_font) == ""

    def test_lines_separated_by_blank_line(self, block_font) -> None:
        assert render("A\nB", block_font) == "#\n#\n\n##\n.#"

    def test_empty_input_line_between_blocks(self, block_font) -> None:
        assert render("A\n\nA", block_font) == "#\n#\n\n\n\n#\n#"

    def test_custom_joiner(self) -> None:
        assert transform_block("AB", BLOCK_CHARS, joiner="|") == "#|##|\n#|.#|"

    def test_columns_recoverable_from_widths(self) -> None:
        chars = {"a": "/\\\n\\/\n||", "b": "#", "c": "----\n|  |"}
        line = "abc"
        widths = glyph_widths(line, chars)
        rows = transform_block(line, chars).split("\n")

        glyph_rows = [chars[ch].split("\n") for ch in line]
        for r, row in enumerate(rows):
            padded = row.ljust(sum(w + 1 for w in widths))
            offset = 0
            for glyph, width in zip(glyph_rows, widths, strict=True):
                cell = padded[offset : offset + width]
                expected = glyph[r] if r < len(glyph) else ""
                assert cell.rstrip() == expected.rstrip()
                offset += width + 1


class TestRenderWithDecorator:
    def test_decorator_wraps_inline(self, flip_font) -> None:
        stars = Decorator(id="stars", name="Stars", value="★")
        assert render("ab", flip_font, stars) == "★ ɐb ★"

    def test_decorator_wraps_block_once(self, block_font) -> None:
        stars = Decorator(id="stars", name="Stars", value="★")
        assert render("AB", block_font, stars) == "★ # ##\n# .# ★"

    def test_render_plain_ignores_decorator(self, flip_font) -> None:
        assert render_plain("ab", flip_font) == "ɐb"
