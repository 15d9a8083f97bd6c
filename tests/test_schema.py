"""
Tests for parameter schemas, signatures and naming helpers.
"""

import pytest

from chatcmd.commands import (
    Command,
    Parameter,
    format_signature,
    normalize_name,
    schema_problem,
    simplify,
    validate_parameters,
)


class TestValidateParameters:
    """Schema shape rules."""

    def test_none_means_no_parameters(self):
        assert validate_parameters(None) is True

    def test_empty_list_is_invalid(self):
        assert validate_parameters([]) is False
        assert schema_problem(()) == "parameter list is empty"

    def test_required_then_optional(self):
        assert validate_parameters([Parameter("a", int), Parameter("b", int, optional=True)])

    def test_required_after_optional_is_invalid(self):
        params = [Parameter("a", int, optional=True), Parameter("b", int)]
        assert validate_parameters(params) is False
        assert "'b'" in schema_problem(params)

    def test_two_linked_parameters_are_invalid(self):
        params = [Parameter("a", str, linked=True), Parameter("b", str, linked=True)]
        assert schema_problem(params) == "more than one linked parameter"

    def test_linked_must_be_last(self):
        params = [Parameter("a", str, linked=True), Parameter("b", str)]
        assert schema_problem(params) == "linked parameter is not the last one"

    def test_optional_linked_tail(self):
        params = [Parameter("to", str), Parameter("rest", str, optional=True, linked=True)]
        assert validate_parameters(params)


class TestSignatures:
    """Annotation rendering."""

    def test_parameter_name_is_normalized(self):
        assert Parameter("Dice Count", int).name == "dice_count"

    @pytest.mark.parametrize("param, expected", [
        (Parameter("a", int), "a[int]"),
        (Parameter("name", str, optional=True), "?name[string]"),
        (Parameter("ok", bool, description="yes or no"), "ok[bool](yes or no)"),
        (Parameter("msg", str, optional=True, linked=True, description="text"), "#?msg[string](text)"),
    ])
    def test_parameter_str(self, param, expected):
        assert str(param) == expected

    def test_custom_type_uses_class_name(self):
        class Dice:
            pass

        assert str(Parameter("dice", Dice)) == "dice[Dice]"

    def test_format_signature(self):
        assert format_signature(None) is None
        assert format_signature([]) is None
        assert format_signature([Parameter("a", int), Parameter("b", float)]) == "a[int] b[float]"

    def test_command_signature_and_name(self):
        cmd = Command("Roll Dice", lambda n, a: None, parameters=[Parameter("n", int)])
        assert cmd.name == "roll_dice"
        assert cmd.parameters == (Parameter("n", int),)
        assert cmd.signature == "n[int]"


class TestNames:
    def test_normalize_name(self):
        assert normalize_name("Coin Flip") == "coin_flip"

    @pytest.mark.parametrize("name, label", [
        ("roll_dice", "Roll Dice"),
        ("help", "Help"),
        ("add_1", "Add 1"),
        ("", "System"),
        (None, "System"),
    ])
    def test_simplify(self, name, label):
        assert simplify(name) == label
