"""Tokenizer for RPN expressions."""

from fractions import Fraction
import logging
from typing import List

import numpy as np

from rpn.rpn_token import RPNOperator, RPNToken, RPNTokenType


class RPNTokenizer:
    """
    Tokenizes RPN expressions.

    Tokenizing never fails.  Malformed input is reported as UNRECOGNIZED tokens so that later stages can
    decide what to do with it.
    """

    DIGITS = "0123456789"
    INT32_MIN = int(np.iinfo(np.int32).min)
    INT32_MAX = int(np.iinfo(np.int32).max)

    def __init__(self) -> None:
        self._logger = logging.getLogger("RPNTokenizer")

    def tokenize(self, expression: str) -> List[RPNToken]:
        """
        Tokenize an RPN expression.

        Numbers and operators must be separated by whitespace.  An operator symbol is only an operator when
        it stands alone; a '-' that starts a longer run begins a negative number.  Any other run of
        non-whitespace characters becomes a single UNRECOGNIZED token.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of tokens
        """
        tokens: List[RPNToken] = []
        buffer: List[str] = []
        i = 0

        while i < len(expression):
            char = expression[i]

            if char.isspace():
                buffer.clear()
                i += 1
                continue

            at_boundary = self._is_boundary(expression, i + 1)

            operator = RPNOperator.from_symbol(char)
            if operator is not None and not buffer and at_boundary:
                tokens.append(RPNToken(RPNTokenType.OPERATOR, operator, i))
                i += 1
                continue

            # A '-' glued to what follows is the sign of a number
            if char == '-' and not buffer:
                buffer.append(char)
                i += 1
                continue

            if char in self.DIGITS or char == '.':
                buffer.append(char)
                if at_boundary:
                    start = i + 1 - len(buffer)
                    tokens.append(self._read_numeral("".join(buffer), start))
                    buffer.clear()

                i += 1
                continue

            # Anything else spoils the whole run, including whatever is already buffered
            start = i - len(buffer)
            end = self._skip_to_whitespace(expression, i)
            tokens.append(RPNToken(RPNTokenType.UNRECOGNIZED, expression[start:end], start, end - start))
            buffer.clear()
            i = end

        self._logger.debug("tokenized %r into %d tokens", expression, len(tokens))
        return tokens

    def _is_boundary(self, expression: str, index: int) -> bool:
        """Check if index is at the end of the expression or at whitespace."""
        return index >= len(expression) or expression[index].isspace()

    def _skip_to_whitespace(self, expression: str, start: int) -> int:
        """Return the index of the first whitespace character at or after start."""
        end = start
        while end < len(expression) and not expression[end].isspace():
            end += 1

        return end

    def _read_numeral(self, text: str, start: int) -> RPNToken:
        """
        Convert a completed numeral run into a token.

        Args:
            text: Characters of the run (digits, '.', and an optional leading '-')
            start: Position of the first character of the run

        Returns:
            FLOAT token if the run contains '.', INTEGER token otherwise, or UNRECOGNIZED if the run does not
            parse or the integer does not fit in 32 bits
        """
        if '.' in text:
            try:
                value = float(text)

            except ValueError:
                return RPNToken(RPNTokenType.UNRECOGNIZED, text, start, len(text))

            return RPNToken(RPNTokenType.FLOAT, self._nearest_float32(text, value), start, len(text))

        try:
            integer = int(text)

        except ValueError:
            return RPNToken(RPNTokenType.UNRECOGNIZED, text, start, len(text))

        if not self.INT32_MIN <= integer <= self.INT32_MAX:
            return RPNToken(RPNTokenType.UNRECOGNIZED, text, start, len(text))

        return RPNToken(RPNTokenType.INTEGER, integer, start, len(text))

    @staticmethod
    def _nearest_float32(text: str, approximation: float) -> np.float32:
        """
        Round a decimal numeral to the nearest float32, ties to even.

        Narrowing the float64 approximation can round twice, landing one float32 step away from the correct
        result when the numeral sits just off a float32 halfway point.  The approximation and its two float32
        neighbours are therefore compared against the exact value of the numeral.

        Args:
            text: Numeral text, already known to parse as a float
            approximation: float64 value of the numeral

        Returns:
            The float32 nearest to the numeral, or infinity if it is beyond float32 range
        """
        with np.errstate(over='ignore'):
            candidate = np.float32(approximation)

        if not np.isfinite(candidate):
            return candidate

        exact = Fraction(text)
        neighbours = [
            candidate,
            np.nextafter(candidate, np.float32(-np.inf)),
            np.nextafter(candidate, np.float32(np.inf)),
        ]

        def closeness(value: np.float32) -> tuple:
            odd_mantissa = int(np.array([value], dtype=np.float32).view(np.uint32)[0]) & 1
            return abs(Fraction(float(value)) - exact), odd_mantissa

        return min(neighbours, key=closeness)
