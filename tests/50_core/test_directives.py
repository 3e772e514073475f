# tests/50_core/test_directives.py
"""Tests for //OX.INSERT directive parsing and expansion."""

import pytest

import oxify.directives as mod_directives
import oxify.types as mod_types


PLUGIN_INFO_LINE = (
    "    //OX.INSERT(PluginInfo, Alice, http://example.com/1234-plugin, "
    "http://github.com/x)"
)


def _state() -> mod_types.MergeState:
    return mod_types.MergeState(plugin_name="Demo", plugin_version="1.0.0")


def _cursor() -> mod_types.FileCursor:
    return mod_types.FileCursor(rel_path="Main.cs", namespace="Oxide.Plugins")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://example.com/1234-plugin", "1234"),
        ("https://umod.org/plugins/98765", "9876"),
        ("http://oxidemod.org/plugins/fancy.2044/", "2044"),
        ("http://example.com/plugin", "UNKNOWN"),
        ("http://example.com/123/45", "UNKNOWN"),
    ],
)
def test_extract_resource_id(url: str, expected: str) -> None:
    assert mod_directives.extract_resource_id(url) == expected


def test_directive_indent_is_text_before_comment() -> None:
    assert mod_directives.directive_indent(PLUGIN_INFO_LINE) == "    "
    assert mod_directives.directive_indent("\t//OX.INSERT(PluginInfo)") == "\t"


def test_parse_plugin_info() -> None:
    directive = mod_directives.parse_directive(PLUGIN_INFO_LINE)
    assert directive.kind is mod_directives.DirectiveKind.PLUGIN_INFO
    assert directive.args == (
        "Alice",
        "http://example.com/1234-plugin",
        "http://github.com/x",
    )
    assert directive.indent == "    "


@pytest.mark.parametrize(
    "line",
    [
        "    //OX.INSERT(BuildDate)",
        "    //OX.INSERT()",
        "    //OX.INSERT(PluginInfo, Alice, http://example.com/1234)",
        "    //OX.INSERT(PluginInfo, Alice, http://a/1234, http://b, extra)",
        "    //OX.INSERT(pluginInfo, Alice, http://a/1234, http://b)",
    ],
)
def test_parse_malformed_directives_are_noop(line: str) -> None:
    directive = mod_directives.parse_directive(line)
    assert directive.kind is mod_directives.DirectiveKind.NOOP


def test_expand_plugin_info_sets_metadata_and_returns_attribute() -> None:
    state = _state()
    result = mod_directives.expand_directive(PLUGIN_INFO_LINE, state, _cursor())

    assert result == '    [Info("Demo", "Alice", "1.0.0", ResourceId = 1234)]'
    assert state.metadata.author == "Alice"
    assert state.metadata.resource_id == "1234"
    assert state.metadata.plugin_url == "http://example.com/1234-plugin"
    assert state.metadata.source_url == "http://github.com/x"


def test_expand_plugin_info_without_resource_id() -> None:
    state = _state()
    line = "\t//OX.INSERT(PluginInfo, Bob, http://example.com/plugin, http://gh/y)"
    result = mod_directives.expand_directive(line, state, _cursor())

    assert result == '\t[Info("Demo", "Bob", "1.0.0", ResourceId = UNKNOWN)]'
    assert state.metadata.resource_id == "UNKNOWN"
    assert state.metadata.author == "Bob"


def test_expand_unknown_kind_drops_line() -> None:
    state = _state()
    result = mod_directives.expand_directive(
        "    //OX.INSERT(Version, 1.2.3)", state, _cursor()
    )
    assert result is None
    assert state.metadata == mod_types.PluginMetadata()


def test_metadata_is_only_set_by_first_plugin_info() -> None:
    state = _state()
    mod_directives.expand_directive(PLUGIN_INFO_LINE, state, _cursor())
    second = mod_directives.expand_directive(
        "    //OX.INSERT(PluginInfo, Carol, http://example.com/5678, http://gh/z)",
        state,
        _cursor(),
    )

    assert second == '    [Info("Demo", "Carol", "1.0.0", ResourceId = 5678)]'
    assert state.metadata.author == "Alice"
    assert state.metadata.resource_id == "1234"


def test_every_kind_has_a_handler() -> None:
    assert set(mod_directives._HANDLERS) == set(mod_directives.DirectiveKind)  # noqa: SLF001  # pyright: ignore[reportPrivateUsage]
