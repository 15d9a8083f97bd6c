"""
Tests for argument binding, value coercion and the parser registry.
"""

import logging

import pytest

from chatcmd.commands import (
    ArgumentParseFailure,
    ArgumentTypeMismatch,
    Err,
    ErrorKind,
    Ok,
    Parameter,
    ParserRegistry,
    Severity,
    TypeParser,
)
from chatcmd.interface import bind_arguments, coerce_value, tokenize
from tests.helpers import POINT_PARSER, Point


class Unparsed:
    pass


# =============================================================================
# Binding
# =============================================================================

class TestBindArguments:
    def test_tokenize_collapses_whitespace(self):
        assert tokenize("  add   1\t2 ") == ["add", "1", "2"]
        assert tokenize("   ") == []

    def test_no_schema_binds_nothing(self):
        result = bind_arguments(None, ["x", "y"])
        assert isinstance(result, Ok)
        assert len(result.value) == 0
        assert not result.value

    def test_too_few_tokens(self):
        result = bind_arguments([Parameter("a", int), Parameter("b", int)], ["1"])
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.ARGUMENT_COUNT
        assert result.message == "Requires at least 2 argument(s)"
        assert result.severity is Severity.WARNING

    def test_extra_tokens_are_ignored(self):
        args = bind_arguments([Parameter("a", int), Parameter("b", int)], ["1", "2", "3"]).unwrap()
        assert len(args) == 2
        assert [arg.position for arg in args] == [1, 2]
        assert args.value(1) == 2

    def test_optional_parameter_left_out(self):
        args = bind_arguments([Parameter("a", int), Parameter("b", int, optional=True)], ["5"]).unwrap()
        assert len(args) == 1
        assert args.get(1) is None
        assert args.value(1, 7) == 7
        assert args.value(0) == 5

    def test_optional_only_accepts_zero_tokens(self):
        args = bind_arguments([Parameter("command", str, optional=True)], []).unwrap()
        assert len(args) == 0

    def test_linked_parameter_takes_the_rest(self):
        params = [Parameter("to", str), Parameter("message", str, linked=True)]
        args = bind_arguments(params, ["bob", "hi", "there"]).unwrap()
        assert args[0].value() == "bob"
        assert args[1].linked
        assert args[1].position == 2
        assert args[1].values() == ["hi", "there"]
        assert args[1].raw == "hi there"

    def test_optional_linked_after_required(self):
        params = [Parameter("to", str), Parameter("rest", str, optional=True, linked=True)]
        args = bind_arguments(params, ["a", "b", "c"]).unwrap()
        assert args.value(0) == "a"
        assert args[1].values() == ["b", "c"]

    def test_linked_positions_continue_per_token(self):
        args = bind_arguments([Parameter("nums", int, linked=True)], ["1", "x"]).unwrap()
        result = args[0].parse_all()
        assert isinstance(result, Err)
        assert result.message.startswith("Error parsing argument 2:")

    def test_accessor_must_match_kind(self):
        args = bind_arguments([Parameter("a", int), Parameter("rest", int, linked=True)],
                              ["1", "2"]).unwrap()
        assert args[0].parse_all().message == "Use value() instead"
        assert args[1].parse().message == "Use values() instead"
        with pytest.raises(ArgumentTypeMismatch):
            args[0].values()

    def test_type_mismatch(self):
        args = bind_arguments([Parameter("a", int)], ["1"]).unwrap()
        result = args[0].parse(str)
        assert result.kind is ErrorKind.TYPE_MISMATCH
        assert result.severity is Severity.WARNING
        assert result.message == (
            'The argument 1 has a type of "int" instead of the expected type "string"')
        with pytest.raises(ArgumentTypeMismatch):
            args[0].value(str)

    def test_custom_type_through_registry(self, parsers):
        args = bind_arguments([Parameter("p", Point)], ["3,4"], parsers).unwrap()
        assert args.value(0) == Point(3, 4)


# =============================================================================
# Coercion
# =============================================================================

class TestCoerceValue:
    @pytest.mark.parametrize("text, value_type, expected", [
        ("hi", str, "hi"),
        ("42", int, 42),
        ("-1.5", float, -1.5),
        ("Yes", bool, True),
        ("off", bool, False),
    ])
    def test_native_types(self, text, value_type, expected):
        assert coerce_value(1, text, value_type) == Ok(expected)

    def test_native_failure(self):
        result = coerce_value(3, "abc", int)
        assert result.kind is ErrorKind.PARSE_FAILURE
        assert result.severity is Severity.ERROR
        assert result.message.startswith("Error parsing argument 3: ")

    def test_bad_boolean(self):
        result = coerce_value(1, "maybe", bool)
        assert result.kind is ErrorKind.PARSE_FAILURE
        assert "'maybe' is not a valid boolean" in result.message

    def test_unknown_parser(self, parsers):
        result = coerce_value(1, "x", Unparsed, parsers)
        assert result.kind is ErrorKind.UNKNOWN_PARSER
        assert result.message == 'No parser has been found for type "Unparsed"'
        assert result.severity is Severity.ERROR

    def test_parser_failure_is_forwarded(self, parsers):
        result = coerce_value(2, "nope", Point, parsers)
        assert result.kind is ErrorKind.PARSE_FAILURE
        assert result.message == 'Error parsing argument 2: "nope" is not x,y'

    def test_unwrap_raises_matching_error(self, parsers):
        with pytest.raises(ArgumentParseFailure) as info:
            coerce_value(2, "nope", Point, parsers).unwrap()
        assert info.value.severity is Severity.ERROR


# =============================================================================
# Parser registry
# =============================================================================

class TestParserRegistry:
    def test_owner_is_attached(self, parsers):
        parser = parsers.get(Point)
        assert parser.owner == "test.geo"
        assert POINT_PARSER.owner is None
        assert Point in parsers
        assert parsers.find("Point") is parser
        assert parsers.find("Nope") is None
        assert parsers.list() == [(Point, "1,2", "test.geo")]

    def test_first_registration_wins(self, parsers, caplog):
        other = TypeParser(Point, lambda pos, text: Point(0, 0), example="0,0")
        with caplog.at_level(logging.WARNING, logger="chatcmd.commands.parsers"):
            assert parsers.register(other, owner="test.late") is False
        assert parsers.get(Point).owner == "test.geo"
        assert "already provided by test.geo" in caplog.text
        assert len(parsers) == 1

    def test_parser_call(self):
        registry = ParserRegistry()
        registry.register(POINT_PARSER)
        assert registry.get(Point)(1, "5,6") == Point(5, 6)
        assert [p.name for p in registry] == ["Point"]
