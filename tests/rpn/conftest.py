"""Shared fixtures and utilities for RPN tests."""

import pytest
from typing import List

from rpn import (
    RPN, RPNBinaryOp, RPNEvaluator, RPNExpression, RPNLiteral, RPNOperator, RPNToken, RPNTokenType, RPNTokenizer
)


@pytest.fixture
def rpn():
    """Create a fresh RPN instance for each test."""
    return RPN()


@pytest.fixture
def rpn_strict():
    """Create an RPN instance that rejects unrecognized input while parsing."""
    return RPN(reject_unrecognized=True)


@pytest.fixture
def tokenizer():
    """Create a fresh tokenizer for each test."""
    return RPNTokenizer()


@pytest.fixture
def evaluator():
    """Create a fresh evaluator for each test."""
    return RPNEvaluator()


class RPNTestHelpers:
    """Helper utilities for RPN testing."""

    @staticmethod
    def int_token(value: int) -> RPNToken:
        """Build an integer token."""
        return RPNToken(RPNTokenType.INTEGER, value)

    @staticmethod
    def float_token(value: float) -> RPNToken:
        """Build a float token."""
        return RPNToken(RPNTokenType.FLOAT, value)

    @staticmethod
    def op_token(operator: RPNOperator) -> RPNToken:
        """Build an operator token."""
        return RPNToken(RPNTokenType.OPERATOR, operator)

    @staticmethod
    def unrecognized(text: str) -> RPNToken:
        """Build an unrecognized token."""
        return RPNToken(RPNTokenType.UNRECOGNIZED, text)

    @staticmethod
    def lit(token: RPNToken) -> RPNLiteral:
        """Wrap a token in a literal node."""
        return RPNLiteral(token)

    @staticmethod
    def int_lit(value: int) -> RPNLiteral:
        """Build an integer literal node."""
        return RPNLiteral(RPNTestHelpers.int_token(value))

    @staticmethod
    def float_lit(value: float) -> RPNLiteral:
        """Build a float literal node."""
        return RPNLiteral(RPNTestHelpers.float_token(value))

    @staticmethod
    def calc(operator: RPNOperator, left: RPNExpression, right: RPNExpression) -> RPNBinaryOp:
        """Build a binary operation node."""
        return RPNBinaryOp(operator, left, right)

    @staticmethod
    def token_types(tokens: List[RPNToken]) -> List[RPNTokenType]:
        """Extract the type of each token."""
        return [token.type for token in tokens]


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return RPNTestHelpers
