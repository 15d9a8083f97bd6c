"""
Tests for ghost-text suggestions and tab completion.
"""

import pytest

from chatcmd.commands import Command, CommandRegistry, Parameter
from chatcmd.interface import closest_command, complete_name, split_signature, suggest


@pytest.fixture
def commands():
    registry = CommandRegistry()
    noop = lambda name, args: None  # noqa: E731
    registry.register(Command("hello", noop))
    registry.register(Command("help", noop, parameters=[Parameter("command", str, optional=True)]))
    registry.register(Command("add", noop, parameters=[Parameter("a", int), Parameter("b", int)]))
    registry.register(Command("say", noop, parameters=[Parameter("message", str, linked=True)]))
    return registry


class TestClosestCommand:
    def test_shortest_name_wins(self, commands):
        assert closest_command(commands, "he").name == "help"

    def test_cursor_inside_first_word(self, commands):
        assert closest_command(commands, "he", 1).name == "help"

    def test_ties_break_by_name(self):
        registry = CommandRegistry()
        registry.register(Command("abd", lambda n, a: None))
        registry.register(Command("abc", lambda n, a: None))
        assert closest_command(registry, "ab").name == "abc"

    def test_no_match(self, commands):
        assert closest_command(commands, "zz") is None
        assert closest_command(commands, "") is None
        assert closest_command(commands, "   ") is None

    def test_partial_word_followed_by_space(self, commands):
        assert closest_command(commands, "hel ", 4) is None

    def test_full_word_followed_by_space(self, commands):
        assert closest_command(commands, "help ", 5).name == "help"


class TestSuggest:
    @pytest.mark.parametrize("text, expected", [
        ("he", "help ?command[string]"),
        ("hel", "help ?command[string]"),
        ("hell", "hello"),
        ("hello", "hello"),
        ("help", "help ?command[string]"),
        ("help ", "help ?command[string]"),
        ("help add", "help add"),
        ("a", "add a[int] b[int]"),
        ("add ", "add a[int] b[int]"),
        ("add 1", "add 1 b[int]"),
        ("add 1 ", "add 1 b[int]"),
        ("add 1 2", "add 1 2"),
        ("say hi", "say hi #message[string]"),
        ("say hi there ", "say hi there #message[string]"),
    ])
    def test_ghost_text(self, commands, text, expected):
        assert suggest(commands, text, len(text)) == expected

    def test_cursor_defaults_to_end(self, commands):
        assert suggest(commands, "add 1 ") == "add 1 b[int]"

    def test_nothing_to_suggest(self, commands):
        assert suggest(commands, "") is None
        assert suggest(commands, "xyz") is None

    def test_cursor_at_start_uses_first_char(self, commands):
        assert suggest(commands, "he", 0) == "help ?command[string]"


class TestSplitSignature:
    def test_descriptions_keep_their_spaces(self):
        signature = "?dice[Dice](e.g. 2d6) b[int] #rest[string](the whole rest)"
        assert split_signature(signature) == [
            "?dice[Dice](e.g. 2d6)",
            "b[int]",
            "#rest[string](the whole rest)",
        ]


class TestCompleteName:
    def test_completes_partial(self, commands):
        assert complete_name(commands, "he", 2) == "help"
        assert complete_name(commands, "sa", 2) == "say"

    def test_already_complete(self, commands):
        assert complete_name(commands, "help", 4) is None
        assert complete_name(commands, "add 1", 5) is None

    def test_unknown(self, commands):
        assert complete_name(commands, "q", 1) is None
