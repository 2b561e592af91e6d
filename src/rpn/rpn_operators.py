"""Arithmetic operator implementations for RPN numbers."""

import operator
from typing import Callable, Dict

import numpy as np

from rpn.rpn_number import RPNNumber, RPNInteger, RPNFloat
from rpn.rpn_token import RPNOperator


def _truncating_divide(left: np.int32, right: np.int32) -> np.int32:
    """
    Divide two 32-bit integers, rounding toward zero.

    numpy's floor division rounds toward negative infinity, so the quotient is corrected when the signs
    differ and the division is inexact.  Division by zero yields 0, as numpy does for integers.
    """
    if right == 0:
        return np.int32(0)

    quotient = left // right
    if left % right != 0 and (left < 0) != (right < 0):
        quotient += np.int32(1)

    return np.int32(quotient)


class RPNOperators:
    """Applies binary operators to RPN numbers with int/float promotion."""

    INTEGER_OPERATIONS: Dict[RPNOperator, Callable[[np.int32, np.int32], np.int32]] = {
        RPNOperator.ADD: operator.add,
        RPNOperator.SUBTRACT: operator.sub,
        RPNOperator.MULTIPLY: operator.mul,
        RPNOperator.DIVIDE: _truncating_divide,
    }

    FLOAT_OPERATIONS: Dict[RPNOperator, Callable[[np.float32, np.float32], np.float32]] = {
        RPNOperator.ADD: operator.add,
        RPNOperator.SUBTRACT: operator.sub,
        RPNOperator.MULTIPLY: operator.mul,
        RPNOperator.DIVIDE: operator.truediv,
    }

    @classmethod
    def apply(cls, op: RPNOperator, left: RPNNumber, right: RPNNumber) -> RPNNumber:
        """
        Apply a binary operator to two numbers.

        Two integers produce an integer using wrapping 32-bit arithmetic.  Any float operand promotes the
        whole operation to 32-bit float.  Overflow, division by zero and invalid float operations are
        not trapped: they produce whatever the fixed-width numpy types produce.

        Args:
            op: The operator to apply
            left: Left (first) operand
            right: Right (second) operand

        Returns:
            The result of the operation
        """
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            if isinstance(left, RPNInteger) and isinstance(right, RPNInteger):
                return RPNInteger(np.int32(cls.INTEGER_OPERATIONS[op](left.value, right.value)))

            return RPNFloat(np.float32(cls.FLOAT_OPERATIONS[op](left.as_float32(), right.as_float32())))
