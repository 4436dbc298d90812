# tests/unit/help/test_renderer.py
# Unit tests for the render orchestrator & typeset output

import pytest

from helpgrid import COMMON_FLAGS, ConfigurationError, HelpConfig, flag, render
from helpgrid.core.exceptions import UnknownThemeError
from helpgrid.help.renderer import build_row_specs, typeset

from test_support.rows import RecordingTypesetter, lines


class TestRenderPlain:

    # * Verify minimal render: usage w/ options marker & one flag row
    def test_minimal(self):
        output = render(command="tool", flags={"size": flag("Size.")}, color=False)
        assert lines(output) == [
            "",
            "     USAGE",
            "",
            "$ tool [options]",
            "",
            "    OPTIONS",
            "",
            "--size Size.",
            "",
            "",
        ]

    # * Verify required argument produces marker & one required note
    def test_required_argument(self):
        output = render(command="tool", args={"path*": "Target path."}, color=False)
        rendered = lines(output)
        assert "$ tool <path>*" in rendered
        assert "<path>* Target path." in rendered
        assert rendered.count("* Required field.") == 1
        assert "ARGUMENTS" in output

    # * Verify two-row layout: default right-aligned, description indented below
    def test_two_row(self):
        output = render(command="tool", flags={"size": flag("Size of the thing.", default=10)}, line_length=40, color=False)
        rendered = lines(output)
        name_line = next(line for line in rendered if line.startswith("--size"))
        assert name_line.endswith("(Default: 10)")
        assert len(name_line) == 40
        assert rendered[rendered.index(name_line) + 1] == "     Size of the thing."

    # * Verify long descriptions wrap inside their column
    def test_wrapping(self):
        output = render(command="tool", flags={"a": flag("word " * 30)}, line_length=80, color=False)
        rendered = [line for line in lines(output) if "word" in line]
        assert len(rendered) > 1
        assert rendered[0].startswith("--a word")
        assert all(len(line) <= 80 for line in rendered)
        assert all(line.startswith("    word") for line in rendered[1:])

    # * Verify examples are prompt-prefixed after options
    def test_examples(self):
        output = render(command="tool", flags=COMMON_FLAGS, examples="tool --help", color=False)
        rendered = lines(output)
        assert rendered.index("$ tool --help") > rendered.index("--help    Show help.")

    # * Verify header lines appear when auto help is disabled
    def test_header(self):
        output = render(command="tool", description="Does things.", auto_help=False, color=False)
        rendered = lines(output)
        assert rendered[:4] == ["", "tool", "", "Does things."]

    # * Verify package metadata fallback
    def test_pkg_fallback(self):
        output = render(pkg={"name": "pkgtool", "description": "From pkg."}, color=False)
        assert "$ pkgtool" in output


class TestRenderStyled:

    # * Verify color output carries escape codes & plain output does not
    def test_color_toggle(self):
        options = dict(command="tool", flags={"size": flag("Size.", required=True)})
        assert "\x1b[" in render(**options, color=True)
        assert "\x1b[" not in render(**options, color=False)

    # * Verify every theme renders
    @pytest.mark.parametrize("theme", ["classic", "ocean", "mono"])
    def test_themes(self, theme):
        output = render(command="tool", flags={"size": flag("Size.")}, theme=theme)
        assert "OPTIONS" in output

    # * Verify unknown theme raises
    def test_unknown_theme(self):
        with pytest.raises(UnknownThemeError):
            render(command="tool", theme="neon")


class TestRenderContract:

    # * Verify missing command & package name raises
    def test_missing_command(self):
        with pytest.raises(ConfigurationError):
            render(flags={"size": flag("Size.")})

    # * Verify config & keyword options are mutually exclusive
    def test_config_and_options(self):
        config = HelpConfig.from_options(command="tool")
        with pytest.raises(TypeError):
            render(config, line_length=80)

    # * Verify custom typesetter receives bands & rows in order
    def test_custom_typesetter(self):
        setter = RecordingTypesetter()
        result = render(HelpConfig.from_options(command="tool", flags={"size": flag("Size.")}), typesetter=setter)
        assert result == "recorded"
        kinds = [kind for kind, _ in setter.calls]
        assert kinds == ["block", "row", "block", "row", "row"]
        assert setter.calls[0][1] == ("     USAGE     ", (1, 0, 1, 0))
        assert setter.calls[-1] == ("row", ("",))

    # * Verify computed requiredness is evaluated once per render
    def test_predicate_called_once(self):
        calls = []

        def predicate():
            calls.append(1)
            return True

        render(command="tool", flags={"size": flag("Size.", required=predicate)}, color=False)
        assert len(calls) == 1

    # * Verify rendering is deterministic for identical inputs
    def test_deterministic(self, cli_flags):
        config = HelpConfig.from_options(command="tool", flags=cli_flags, line_length=100, color=False)
        assert render(config) == render(config)

    # * Verify typeset works on prebuilt specs
    def test_typeset_prebuilt(self):
        specs = build_row_specs(HelpConfig.from_options(command="tool"))
        setter = RecordingTypesetter()
        typeset(specs, setter)
        assert setter.calls[1] == ("row", ("$ tool",))


class TestRenderHeader:

    # * Verify an empty description leaves no blank padded row under the command name
    def test_empty_description(self):
        output = render(command="tool", description="", auto_help=False, color=False)
        assert lines(output)[:5] == ["", "tool", "", "     USAGE", ""]
