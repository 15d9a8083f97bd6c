"""
Tests for dispatch, error reporting and the built-in commands.
"""

import logging

import pytest

from chatcmd.commands import (
    ArgumentCountError,
    Command,
    CommandResult,
    Parameter,
    Severity,
    TypeParser,
)
from chatcmd.interface import format_command_help, list_commands, signature_legend


def _last(console):
    message = console.sink.last
    return message.text, message.label, message.severity


# =============================================================================
# Dispatcher
# =============================================================================

class TestExecute:
    def test_blank_line_is_ignored(self, console):
        console.execute("")
        console.execute("    ")
        assert console.sink.messages == []

    def test_unknown_command(self, console):
        console.execute("foo bar")
        text, label, severity = _last(console)
        assert text == 'Command called "foo" does not exist.'
        assert label == "System"
        assert severity is Severity.WARNING

    def test_unknown_command_hint(self, console):
        console.execute("hepl")
        assert "Did you mean: help" in console.sink.last.text

    def test_success_is_labelled_with_command(self, geo_console):
        geo_console.execute("add 2 3")
        assert _last(geo_console) == ("5", "Add", Severity.INFO)

    def test_label_is_simplified_name(self, console):
        console.registry.register(Command("roll dice", lambda n, a: "4"))
        console.execute("roll_dice")
        assert console.sink.last.label == "Roll Dice"

    def test_too_few_arguments(self, geo_console):
        geo_console.execute("add 1")
        assert _last(geo_console) == ("Requires at least 2 argument(s)", "Add", Severity.WARNING)

    def test_parse_failure_from_handler(self, geo_console):
        geo_console.execute("add 1 x")
        text, label, severity = _last(geo_console)
        assert text.startswith("Error parsing argument 2: ")
        assert severity is Severity.ERROR

    def test_linked_arguments(self, geo_console):
        geo_console.execute("say  hello   there")
        assert geo_console.sink.last.text == "hello there"

    def test_handler_console_error(self, console):
        def handler(name, args):
            raise ArgumentCountError("Needs more")

        console.registry.register(Command("needy", handler))
        console.execute("needy")
        assert _last(console) == ("Needs more", "Needy", Severity.WARNING)

    def test_handler_crash_is_contained(self, console, caplog):
        def handler(name, args):
            raise RuntimeError("boom")

        console.registry.register(Command("crash", handler))
        with caplog.at_level(logging.ERROR, logger="chatcmd.interface.handler"):
            console.execute("crash")
        assert _last(console) == ("RuntimeError: boom", "Crash", Severity.ERROR)
        assert "Command 'crash' failed" in caplog.text

    def test_result_rendering_crash_is_contained(self, console, caplog):
        class Unprintable:
            def __str__(self):
                raise RuntimeError("no str")

        console.registry.register(Command("show", lambda n, a: Unprintable()))
        with caplog.at_level(logging.ERROR, logger="chatcmd.interface.handler"):
            console.execute("show")
        assert _last(console) == ("RuntimeError: no str", "Show", Severity.ERROR)
        assert "Command 'show' failed" in caplog.text

    def test_invalid_schema_is_refused(self, console):
        calls = []
        params = (Parameter("a", str, optional=True), Parameter("b", str))
        console.registry.register(Command("bad", lambda n, a: calls.append(a), parameters=params))
        console.execute("bad x y")
        assert calls == []
        assert _last(console) == ("Command parameters are invalid", "Bad", Severity.ERROR)

    def test_none_result_emits_nothing(self, console):
        console.registry.register(Command("quiet", lambda n, a: None))
        console.execute("quiet")
        assert console.sink.messages == []

    def test_structured_result(self, console):
        console.registry.register(
            Command("warn", lambda n, a: CommandResult("careful", Severity.WARNING)))
        console.execute("warn")
        assert _last(console) == ("careful", "Warn", Severity.WARNING)


# =============================================================================
# Help
# =============================================================================

class TestHelp:
    def test_listing(self, console):
        console.execute("help")
        assert _last(console) == (
            "Commands (4):\nhelp\nclear\nplugins\nparsers", "Help", Severity.INFO)

    def test_listing_counts_plugin_commands(self, geo_console):
        text = list_commands(geo_console.registry)
        assert text.splitlines()[0] == "Commands (7):"
        assert text.splitlines()[-3:] == ["hello", "add", "say"]

    def test_command_details(self, geo_console):
        geo_console.execute("help add")
        assert geo_console.sink.last.text == "\n".join([
            "Name: add",
            "Description: Add two numbers",
            "Plugin: test.geo",
            "Parameters: a[int] b[int]",
            "[] shows what type it is",
        ])

    def test_builtin_details(self, console):
        text = format_command_help(console.registry, "help")
        assert "Plugin:" not in text
        assert "Parameters: ?command[string]" in text
        assert "? means optional" in text

    def test_missing_command(self, console):
        console.execute("help nope")
        assert _last(console) == ('Command called "nope" does not exist', "Help", Severity.WARNING)

    def test_legend(self):
        assert signature_legend("#?msg[string](text)") == [
            "? means optional",
            "# means the following arguments are linked",
            "() shows a description",
            "[] shows what type it is",
        ]
        assert signature_legend("a[int]") == ["[] shows what type it is"]


# =============================================================================
# clear / plugins / parsers
# =============================================================================

class TestBuiltins:
    def test_clear(self, console):
        console.message("one")
        console.message("two")
        console.execute("clear")
        assert console.sink.texts() == ["Messages have been cleared!"]

    def test_plugins_without_hosts(self, console):
        console.execute("plugins")
        assert console.sink.last.text == "No plugins have been found"

    def test_plugins_table(self, geo_console):
        geo_console.execute("plugins")
        lines = geo_console.sink.last.text.splitlines()
        assert lines[0] == "Plugins (2):"
        assert lines[1].split() == ["Name", "GUID", "Version", "Dependency"]
        assert lines[3].split() == ["Geo", "test.geo", "1.2.0", "Yes"]
        assert lines[4].split() == ["Idle", "test.idle", "0.0.0", "No"]

    def test_parsers_without_any(self, console):
        console.execute("parsers")
        assert console.sink.last.text == "No parsers have been found"

    def test_parsers_listing(self, geo_console):
        geo_console.execute("parsers")
        assert geo_console.sink.last.text == "Parsers (1):\nPoint"

    def test_parser_details(self, geo_console):
        geo_console.execute("parsers Point")
        assert geo_console.sink.last.text == "Name: Point\nExample: 1,2\nPlugin: test.geo"

    @pytest.mark.parametrize("sample, expected, severity", [
        ("1,2", "Valid", Severity.INFO),
        ("x", 'Error parsing argument 2: "x" is not x,y', Severity.ERROR),
    ])
    def test_parser_check(self, geo_console, sample, expected, severity):
        geo_console.execute(f"parsers Point {sample}")
        assert _last(geo_console) == (expected, "Parsers", severity)

    def test_unknown_parser(self, geo_console):
        geo_console.execute("parsers Nope")
        assert _last(geo_console) == (
            'Parser with type "Nope" does not exist', "Parsers", Severity.WARNING)

    def test_crashing_parser_check(self, console, caplog):
        class Widget:
            pass

        def explode(position, text):
            raise KeyError(text)

        console.parsers.register(TypeParser(Widget, explode, example="w"), owner="test.widget")
        with caplog.at_level(logging.ERROR, logger="chatcmd.interface.builtins"):
            console.execute("parsers Widget x")
        assert _last(console) == ("Something went wrong", "Parsers", Severity.ERROR)
        assert "Parser for type 'Widget' failed on 'x'" in caplog.text
