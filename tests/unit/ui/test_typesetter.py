# tests/unit/ui/test_typesetter.py
# Unit tests for the Rich-backed typesetter

from rich.text import Text

from helpgrid.core.types import Cell
from helpgrid.ui.theming import get_help_theme
from helpgrid.ui.typesetter import RichTypesetter, Typesetter


def _plain(width=40):
    return RichTypesetter(width, color=False)


class TestRichTypesetter:

    # * Verify the Rich typesetter satisfies the protocol
    def test_protocol(self):
        assert isinstance(_plain(), Typesetter)

    # * Verify block padding adds blank lines above & below
    def test_block_padding(self):
        setter = _plain()
        setter.start_block(Text("  TITLE  "), (1, 0, 1, 0))
        assert setter.render() == "\n  TITLE\n\n"

    # * Verify fixed-width cells pad to their column width
    def test_fixed_width_columns(self):
        setter = _plain()
        setter.row(Cell(Text("-a"), width=3), Cell(Text("--all"), width=6), Cell(Text("Everything.")))
        assert setter.render() == "-a --all Everything.\n"

    # * Verify right-aligned unsized cell reaches the line end
    def test_right_alignment(self):
        setter = _plain(30)
        setter.row(Cell(Text("--size"), width=7), Cell(Text("(Default: 1)"), align="right"))
        line = setter.render().split("\n")[0]
        assert len(line) == 30
        assert line.endswith("(Default: 1)")

    # * Verify left padding indents a single cell
    def test_left_padding(self):
        setter = _plain()
        setter.row(Cell(Text("indented"), padding=(0, 0, 0, 5)))
        assert setter.render() == "     indented\n"

    # * Verify long cells wrap within the line length
    def test_wrapping(self):
        setter = _plain(20)
        setter.row(Cell(Text("--x"), width=4), Cell(Text("alpha beta gamma delta epsilon")))
        output = setter.render().rstrip("\n").split("\n")
        assert len(output) > 1
        assert all(len(line) <= 20 for line in output)
        assert all(line.startswith("    ") for line in output[1:])

    # * Verify themed styles emit escape codes only w/ color
    def test_color(self):
        styled = Text("OPTIONS", style="help.title.options")
        colored = RichTypesetter(40, theme=get_help_theme("classic"), color=True)
        colored.start_block(styled)
        assert "\x1b[" in colored.render()
        plain = RichTypesetter(40, theme=get_help_theme("classic"), color=False)
        plain.start_block(styled)
        assert plain.render() == "OPTIONS\n"
