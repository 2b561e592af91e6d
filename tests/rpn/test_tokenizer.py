"""Tests for the RPN tokenizer."""

import math

import numpy as np
import pytest

from rpn import RPNOperator, RPNToken, RPNTokenType


ADD = RPNOperator.ADD
SUB = RPNOperator.SUBTRACT
MUL = RPNOperator.MULTIPLY
DIV = RPNOperator.DIVIDE


class TestTokenizer:
    """Test tokenization of numbers, operators and whitespace."""

    def test_single_integers(self, tokenizer, helpers):
        """Test that lone integers become integer tokens."""
        assert tokenizer.tokenize("2") == [helpers.int_token(2)]
        assert tokenizer.tokenize("22") == [helpers.int_token(22)]
        assert tokenizer.tokenize("0") == [helpers.int_token(0)]

    @pytest.mark.parametrize("expression,expected", [
        ("1.4", 1.4),
        ("10.", 10.0),
        ("10.5", 10.5),
        (".5", 0.5),
        ("-1.5", -1.5),
        ("-.25", -0.25),
    ])
    def test_floats(self, tokenizer, helpers, expression, expected):
        """Test that numerals containing a '.' become float tokens."""
        assert tokenizer.tokenize(expression) == [helpers.float_token(expected)]

    def test_float_values_are_float32(self, tokenizer):
        """Test that float tokens hold 32-bit values."""
        [token] = tokenizer.tokenize("1.4")
        assert isinstance(token.value, np.float32)
        assert token.value == np.float32(1.4)

    def test_integer_values_are_int32(self, tokenizer):
        """Test that integer tokens hold 32-bit values."""
        [token] = tokenizer.tokenize("-10")
        assert isinstance(token.value, np.int32)
        assert token.value == -10

    @pytest.mark.parametrize("expression,expected", [
        ("-3", -3),
        ("-10", -10),
        ("-0", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ])
    def test_signed_and_boundary_integers(self, tokenizer, helpers, expression, expected):
        """Test negative integers and the limits of the 32-bit range."""
        assert tokenizer.tokenize(expression) == [helpers.int_token(expected)]

    @pytest.mark.parametrize("expression", ["2147483648", "-2147483649", "99999999999999999999"])
    def test_out_of_range_integers_are_unrecognized(self, tokenizer, helpers, expression):
        """Test that integers which do not fit in 32 bits are not silently wrapped."""
        assert tokenizer.tokenize(expression) == [helpers.unrecognized(expression)]

    def test_huge_float_becomes_infinity(self, tokenizer):
        """Test that floats beyond the float32 range are still floats."""
        [token] = tokenizer.tokenize("9" * 50 + ".0")
        assert token.type == RPNTokenType.FLOAT
        assert math.isinf(token.value)

    def test_float_just_above_halfway_rounds_up(self, tokenizer):
        """Test a numeral a hair above the midpoint of 1.0 and the next float32."""
        [token] = tokenizer.tokenize("1.000000059604644775390625000001")
        assert token.value == np.nextafter(np.float32(1.0), np.float32(2.0))

    def test_float_just_below_halfway_rounds_down(self, tokenizer):
        [token] = tokenizer.tokenize("1.000000059604644775390624999999")
        assert token.value == np.float32(1.0)

    def test_float_exactly_halfway_rounds_to_even(self, tokenizer):
        """Test that an exact midpoint picks the float32 with an even mantissa."""
        [token] = tokenizer.tokenize("1.000000059604644775390625")
        assert token.value == np.float32(1.0)

        [token] = tokenizer.tokenize("1.000000178813934326171875")
        assert token.value == np.float32(1.0) + 2 * np.float32(2.0 ** -23)

    @pytest.mark.parametrize("expression", ["-0.0", "0.", "-.0"])
    def test_float_zero_keeps_sign(self, tokenizer, expression):
        [token] = tokenizer.tokenize(expression)
        assert token.value == 0.0
        assert math.copysign(1.0, token.value) == (-1.0 if expression.startswith("-") else 1.0)

    @pytest.mark.parametrize("expression,operator", [
        ("+", ADD),
        ("-", SUB),
        ("*", MUL),
        ("/", DIV),
    ])
    def test_lone_operators(self, tokenizer, helpers, expression, operator):
        """Test that operator symbols standing alone are operators."""
        assert tokenizer.tokenize(expression) == [helpers.op_token(operator)]

    def test_whitespace_separation(self, tokenizer, helpers):
        """Test that runs of any whitespace separate tokens and produce nothing themselves."""
        assert tokenizer.tokenize("10.5 4") == [helpers.float_token(10.5), helpers.int_token(4)]
        assert tokenizer.tokenize("  10.5   4    ") == [helpers.float_token(10.5), helpers.int_token(4)]
        assert tokenizer.tokenize("1\t2\n+\r\n") == [
            helpers.int_token(1), helpers.int_token(2), helpers.op_token(ADD)
        ]

    @pytest.mark.parametrize("expression", ["", " ", "\t\n  "])
    def test_empty_input(self, tokenizer, expression):
        """Test that blank input produces no tokens."""
        assert tokenizer.tokenize(expression) == []

    @pytest.mark.parametrize("expression,operator,left", [
        ("10 4 +", ADD, 10),
        ("10 4 *", MUL, 10),
        ("10 4.5 -", SUB, 10),
    ])
    def test_binary_expressions(self, tokenizer, helpers, expression, operator, left):
        """Test simple two operand expressions."""
        tokens = tokenizer.tokenize(expression)
        assert tokens[0] == helpers.int_token(left)
        assert tokens[-1] == helpers.op_token(operator)
        assert len(tokens) == 3

    def test_mixed_expression(self, tokenizer, helpers):
        """Test a float, integer and operator together."""
        assert tokenizer.tokenize("10. 4 /") == [
            helpers.float_token(10.0), helpers.int_token(4), helpers.op_token(DIV)
        ]

    def test_longer_expressions(self, tokenizer, helpers):
        """Test operators interleaved with operands."""
        assert tokenizer.tokenize("10 4 * 2 +") == [
            helpers.int_token(10),
            helpers.int_token(4),
            helpers.op_token(MUL),
            helpers.int_token(2),
            helpers.op_token(ADD),
        ]
        assert tokenizer.tokenize("2 10 4 * +") == [
            helpers.int_token(2),
            helpers.int_token(10),
            helpers.int_token(4),
            helpers.op_token(MUL),
            helpers.op_token(ADD),
        ]

    def test_minus_is_operator_after_operand(self, tokenizer, helpers):
        """Test that a separated '-' is subtraction while a glued one is a sign."""
        assert tokenizer.tokenize("3 -") == [helpers.int_token(3), helpers.op_token(SUB)]
        assert tokenizer.tokenize("3 -2 -") == [
            helpers.int_token(3), helpers.int_token(-2), helpers.op_token(SUB)
        ]

    def test_positions(self, tokenizer):
        """Test that tokens record where they start and how long they are."""
        tokens = tokenizer.tokenize("10 -4.5  +")
        assert [token.position for token in tokens] == [0, 3, 9]
        assert [token.length for token in tokens] == [2, 4, 1]


class TestTokenizerUnrecognized:
    """Test that malformed input becomes UNRECOGNIZED tokens instead of failing."""

    def test_single_letter(self, tokenizer, helpers):
        """Test a lone letter."""
        assert tokenizer.tokenize("f") == [helpers.unrecognized("f")]

    def test_word_is_one_token(self, tokenizer, helpers):
        """Test that a whole run of garbage yields a single token."""
        assert tokenizer.tokenize("asdf") == [helpers.unrecognized("asdf")]

    def test_garbage_between_valid_tokens(self, tokenizer, helpers):
        """Test that scanning continues after unrecognized runs."""
        assert tokenizer.tokenize("22 asdf *(") == [
            helpers.int_token(22), helpers.unrecognized("asdf"), helpers.unrecognized("*(")
        ]

    def test_numbers_with_letters(self, tokenizer, helpers):
        """Test that digits glued to letters spoil the whole run."""
        tokens = tokenizer.tokenize("2f f32 3f65")
        assert tokens == [helpers.unrecognized("2f"), helpers.unrecognized("f32"), helpers.unrecognized("3f65")]

    @pytest.mark.parametrize("expression", ["3-", "3+", "3*", "3/"])
    def test_trailing_glued_operator(self, tokenizer, helpers, expression):
        """Test that an operator glued after a number is not split off."""
        assert tokenizer.tokenize(expression) == [helpers.unrecognized(expression)]

    @pytest.mark.parametrize("expression", ["+3", "*3", "/3"])
    def test_leading_glued_operator(self, tokenizer, helpers, expression):
        """Test that an operator glued before a number is not split off."""
        assert tokenizer.tokenize(expression) == [helpers.unrecognized(expression)]

    @pytest.mark.parametrize("expression", ["3-2", "1+1", "--3", "-x", "-3-", "+-", "1-2-3"])
    def test_glued_runs(self, tokenizer, helpers, expression):
        """Test that runs mixing numerals and operators are a single unrecognized token."""
        assert tokenizer.tokenize(expression) == [helpers.unrecognized(expression)]

    @pytest.mark.parametrize("expression", [".", "-.", "1.2.3", "..", "1..", "-1.2.3"])
    def test_malformed_numerals(self, tokenizer, helpers, expression):
        """Test that numeral runs which do not parse are unrecognized."""
        assert tokenizer.tokenize(expression) == [helpers.unrecognized(expression)]

    def test_non_ascii_digits(self, tokenizer, helpers):
        """Test that only ASCII digits form numerals."""
        assert tokenizer.tokenize("²") == [helpers.unrecognized("²")]
        assert tokenizer.tokenize("1٣") == [helpers.unrecognized("1٣")]

    def test_unrecognized_position_covers_run(self, tokenizer):
        """Test that an unrecognized token spans its entire run, including buffered digits."""
        [_one, token] = tokenizer.tokenize("1 12abc")
        assert token == RPNToken(RPNTokenType.UNRECOGNIZED, "12abc")
        assert token.position == 2
        assert token.length == 5

    def test_tokenizer_never_raises(self, tokenizer):
        """Test that arbitrary input always tokenizes."""
        for expression in ["(+ 1 2)", "1 2 + )", "#t", "\x00\x01", "1e10", "NaN inf"]:
            tokens = tokenizer.tokenize(expression)
            assert all(isinstance(token, RPNToken) for token in tokens)
