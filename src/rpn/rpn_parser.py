"""Parser for RPN token streams."""

import logging
from typing import List

from rpn.rpn_ast import RPNBinaryOp, RPNExpression, RPNLiteral
from rpn.rpn_error import (
    RPNNoExpressionError, RPNOperatorMissingOperandError, RPNUnbalancedEquationError, RPNUnrecognizedTokenError
)
from rpn.rpn_token import RPNToken, RPNTokenType


class RPNParser:
    """Builds an expression tree from RPN tokens using an operand stack."""

    def __init__(self, tokens: List[RPNToken], expression: str = "", reject_unrecognized: bool = False):
        """
        Initialize parser with tokens and original expression.

        Args:
            tokens: List of tokens to parse
            expression: Original expression string for log context
            reject_unrecognized: If True, fail at the first UNRECOGNIZED token.  By default such tokens are
                pushed as literals and rejected later by the evaluator.
        """
        self.tokens = tokens
        self.expression = expression
        self.reject_unrecognized = reject_unrecognized
        self._logger = logging.getLogger("RPNParser")

    def parse(self) -> RPNExpression:
        """
        Parse the tokens into a single expression tree.

        Returns:
            The root of the expression tree

        Raises:
            RPNUnrecognizedTokenError: If reject_unrecognized is set and an UNRECOGNIZED token is seen
            RPNOperatorMissingOperandError: If an operator has fewer than two operands available
            RPNNoExpressionError: If there are no tokens
            RPNUnbalancedEquationError: If more than one value remains after the last token
        """
        stack: List[RPNExpression] = []

        for token in self.tokens:
            if token.type == RPNTokenType.UNRECOGNIZED and self.reject_unrecognized:
                raise RPNUnrecognizedTokenError(token)

            if token.type != RPNTokenType.OPERATOR:
                stack.append(RPNLiteral(token))
                continue

            # The first value popped is the right-hand operand
            if len(stack) < 2:
                raise RPNOperatorMissingOperandError(token.value, token.position)

            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(RPNBinaryOp(token.value, operand1, operand2))

        if not stack:
            raise RPNNoExpressionError()

        if len(stack) > 1:
            raise RPNUnbalancedEquationError(len(stack))

        expr = stack[0]
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("parsed %r as: %s", self.expression, expr.to_rpn())

        return expr
