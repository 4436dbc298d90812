# tests/unit/core/test_types.py
# Unit tests for descriptors, requiredness variants & config normalization

import pytest

from helpgrid.config.settings import HelpSettings
from helpgrid.core.exceptions import ConfigurationError
from helpgrid.core.types import (
    ArgSpec,
    COMMON_FLAGS,
    FlagDescriptor,
    GroupDescriptor,
    HelpConfig,
    PackageMetadata,
    RequiredComputed,
    RequiredLiteral,
    arrify,
    as_requiredness,
    flag,
)


class TestRequiredness:

    # * Verify bools become literal variants
    def test_bool_becomes_literal(self):
        assert as_requiredness(True) == RequiredLiteral(True)
        assert as_requiredness(False).evaluate() is False

    # * Verify callables become computed variants
    def test_callable_becomes_computed(self):
        req = as_requiredness(lambda: True)
        assert isinstance(req, RequiredComputed)
        assert req.evaluate() is True

    # * Verify existing variants pass through
    def test_variants_pass_through(self):
        literal = RequiredLiteral(True)
        assert as_requiredness(literal) is literal


class TestFlagDescriptor:

    # * Verify flag() defaults
    def test_flag_defaults(self):
        f = flag("Size.")
        assert f.description == "Size."
        assert f.alias is None
        assert f.has_default is False
        assert f.required.evaluate() is False
        assert f.multiple is False

    # * Verify from_dict reads camelCase & desc keys
    def test_from_dict_camel_case(self):
        f = FlagDescriptor.from_dict(
            {"alias": "c", "type": "string", "default": "x", "isRequired": True, "isMultiple": True, "desc": "D"}
        )
        assert f.alias == "c"
        assert f.default == "x"
        assert f.required.evaluate() is True
        assert f.multiple is True
        assert f.description == "D"

    # * Verify common flags
    def test_common_flags(self):
        assert set(COMMON_FLAGS) == {"help", "version"}
        assert COMMON_FLAGS["help"].description == "Show help."


class TestArgSpec:

    @pytest.mark.parametrize(
        "key,name,required,variadic,display",
        [
            ("path", "path", False, False, "<path>"),
            ("path*", "path", True, False, "<path>*"),
            ("paths...", "paths", False, True, "<paths>..."),
            ("paths...*", "paths", True, True, "<paths>...*"),
        ],
    )
    # * Verify markers are stripped & re-added as decoration
    def test_parse(self, key, name, required, variadic, display):
        spec = ArgSpec.parse(key)
        assert (spec.name, spec.required, spec.variadic) == (name, required, variadic)
        assert spec.display == display


class TestHelpConfig:

    # * Verify explicit command wins over package metadata
    def test_command_resolution_prefers_explicit(self):
        config = HelpConfig.from_options(command="tool", pkg={"name": "pkg"})
        assert config.command == "tool"

    # * Verify package metadata fallback for command & description
    def test_package_fallback(self):
        config = HelpConfig.from_options(pkg={"name": "pkg", "description": "From pkg."})
        assert config.command == "pkg"
        assert config.description == ("From pkg.",)

    # * Verify an explicit empty command is rejected rather than replaced by the package name
    def test_empty_command_not_replaced(self):
        with pytest.raises(ConfigurationError):
            HelpConfig.from_options(command="", pkg={"name": "pkg"})

    # * Verify missing command raises configuration error
    def test_missing_command_raises(self):
        with pytest.raises(ConfigurationError, match="Either 'command'"):
            HelpConfig.from_options(args={"path": "some"})

    # * Verify settings provide layout defaults
    def test_settings_defaults(self):
        config = HelpConfig.from_options(HelpSettings(line_length=90, title_length=20), command="tool")
        assert config.line_length == 90
        assert config.title_length == 20
        assert config.multiline_threshold == 50

    # * Verify caller options override settings
    def test_caller_overrides(self):
        config = HelpConfig.from_options(
            HelpSettings(line_length=90), command="tool", line_length=60, multiline_threshold=0
        )
        assert config.line_length == 60
        assert config.multiline_threshold == 0

    # * Verify single strings are arrified
    def test_arrify_inputs(self):
        config = HelpConfig.from_options(command="tool", usage="tool <x>", examples=["a", "b"])
        assert config.usage == ("tool <x>",)
        assert config.examples == ("a", "b")
        assert arrify(None) == ()

    # * Verify from_dict maps camelCase keys & coerces nested mappings
    def test_from_dict(self):
        config = HelpConfig.from_dict(
            {
                "command": "tool",
                "lineLength": 70,
                "multilineThreshold": 10,
                "autoHelp": False,
                "flags": {"size": {"desc": "Size."}},
                "groups": {"size": {"title": "General"}},
                "unknown": 1,
            }
        )
        assert config.line_length == 70
        assert config.multiline_threshold == 10
        assert config.auto_help is False
        assert isinstance(config.flags["size"], FlagDescriptor)
        assert config.groups["size"] == GroupDescriptor(title="General")

    # * Verify from_dict overrides beat spec values
    def test_from_dict_overrides(self):
        config = HelpConfig.from_dict({"command": "tool", "lineLength": 70}, line_length=40, theme=None)
        assert config.line_length == 40

    # * Verify package metadata ignores empty values
    def test_package_metadata_empty(self):
        assert PackageMetadata.from_mapping(None) == PackageMetadata()
        assert PackageMetadata.from_mapping({"name": ""}).name is None
