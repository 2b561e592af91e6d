"""Evaluator for RPN expression trees."""

import logging
from typing import List, Tuple

from rpn.rpn_ast import RPNBinaryOp, RPNExpression, RPNLiteral
from rpn.rpn_error import RPNUnexpectedLiteralError
from rpn.rpn_number import RPNFloat, RPNInteger, RPNNumber
from rpn.rpn_operators import RPNOperators
from rpn.rpn_token import RPNTokenType


class RPNEvaluator:
    """Reduces RPN expression trees to a single number."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("RPNEvaluator")

    def evaluate(self, expr: RPNExpression) -> RPNNumber:
        """
        Evaluate an expression tree.

        Sub-expressions are evaluated left before right, so a failure on the left stops evaluation before
        the right is visited.  The walk uses an explicit stack rather than recursion.

        Args:
            expr: Root of the expression tree

        Returns:
            The resulting number

        Raises:
            RPNUnexpectedLiteralError: If a literal holds anything other than a number
        """
        pending: List[Tuple[RPNExpression, bool]] = [(expr, False)]
        values: List[RPNNumber] = []

        while pending:
            node, expanded = pending.pop()

            if isinstance(node, RPNLiteral):
                values.append(self._evaluate_literal(node))
                continue

            assert isinstance(node, RPNBinaryOp), f"Unexpected expression node: {type(node).__name__}"
            if not expanded:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
                continue

            right = values.pop()
            left = values.pop()
            values.append(RPNOperators.apply(node.operator, left, right))

        result = values.pop()
        self._logger.debug("evaluated to %s (%s)", result, result.type_name())
        return result

    def _evaluate_literal(self, literal: RPNLiteral) -> RPNNumber:
        """Convert a numeral literal to a number."""
        token = literal.token
        if token.type == RPNTokenType.INTEGER:
            return RPNInteger(token.value)

        if token.type == RPNTokenType.FLOAT:
            return RPNFloat(token.value)

        raise RPNUnexpectedLiteralError(token)
