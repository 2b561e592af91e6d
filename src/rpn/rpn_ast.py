"""Expression tree nodes produced by the RPN parser."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from rpn.rpn_token import RPNOperator, RPNToken, RPNTokenType


class RPNExpression(ABC):
    """Abstract base class for expression tree nodes.  All nodes are immutable."""

    @abstractmethod
    def to_rpn(self) -> str:
        """Render the expression back to postfix source text."""


@dataclass(frozen=True)
class RPNLiteral(RPNExpression):
    """
    A leaf holding a single token.

    Trees built by the parser wrap numeral tokens, or unrecognized tokens when those are deferred to
    evaluation.  The evaluator rejects anything that is not a numeral.
    """
    token: RPNToken

    def to_rpn(self) -> str:
        if self.token.type == RPNTokenType.OPERATOR:
            return self.token.value.value

        return str(self.token.value)


@dataclass(frozen=True)
class RPNBinaryOp(RPNExpression):
    """An operator applied to a left and a right sub-expression."""
    operator: RPNOperator
    left: RPNExpression
    right: RPNExpression

    def to_rpn(self) -> str:
        # Iterative post-order walk; trees can be far deeper than the recursion limit
        parts: List[str] = []
        pending: List[tuple[RPNExpression, bool]] = [(self, False)]
        while pending:
            node, expanded = pending.pop()
            if not isinstance(node, RPNBinaryOp):
                parts.append(node.to_rpn())
                continue

            if expanded:
                parts.append(node.operator.value)
                continue

            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))

        return " ".join(parts)
