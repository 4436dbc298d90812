# tests/unit/ui/theming/test_theme_engine.py
# Unit tests for theme lookup & text decoration helpers

import pytest
from rich.theme import Theme

from helpgrid.core.exceptions import ConfigurationError, UnknownThemeError
from helpgrid.ui.theming import THEMES, HelpRoles, compose, get_help_theme, styled, theme_names


ROLES = [
    HelpRoles.PROMPT,
    HelpRoles.COMMAND,
    HelpRoles.COMMAND_NAME,
    HelpRoles.OPTION,
    HelpRoles.ARGUMENT,
    HelpRoles.REQUIRED,
    HelpRoles.DEFAULT_LABEL,
    HelpRoles.DEFAULT_VALUE,
    HelpRoles.GROUP,
    HelpRoles.DESCRIPTION,
] + [HelpRoles.title(section) for section in ("usage", "arguments", "options", "examples")]


class TestThemes:

    # * Verify registered theme names
    def test_theme_names(self):
        assert theme_names() == ["classic", "mono", "ocean"]

    # * Verify every theme defines every role
    @pytest.mark.parametrize("name", sorted(THEMES))
    def test_all_roles_defined(self, name):
        theme = get_help_theme(name)
        assert isinstance(theme, Theme)
        for role in ROLES:
            assert role in theme.styles

    # * Verify unknown theme names raise a configuration error listing valid themes
    def test_unknown_theme(self):
        with pytest.raises(UnknownThemeError, match="classic, mono, ocean") as exc:
            get_help_theme("neon")
        assert exc.value.theme == "neon"
        assert isinstance(exc.value, ConfigurationError)


class TestTextHelpers:

    # * Verify styled text carries its role as style
    def test_styled(self):
        text = styled("--size", HelpRoles.OPTION)
        assert text.plain == "--size"
        assert text.style == "help.option"

    # * Verify compose joins plain strings & styled spans
    def test_compose(self):
        text = compose(styled("$", HelpRoles.PROMPT), " ", styled("tool", HelpRoles.COMMAND), " run")
        assert text.plain == "$ tool run"
        assert [span.style for span in text.spans] == ["help.prompt", "help.command"]
