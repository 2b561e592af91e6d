"""Token types and token representation for RPN expressions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np


class RPNTokenType(Enum):
    """Token types for RPN expressions."""
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    OPERATOR = "OPERATOR"
    UNRECOGNIZED = "UNRECOGNIZED"


class RPNOperator(Enum):
    """Binary arithmetic operators."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> "RPNOperator | None":
        """Look up an operator by its source symbol, or None if it isn't one."""
        for operator in cls:
            if operator.value == symbol:
                return operator

        return None


@dataclass(frozen=True)
class RPNToken:
    """
    Represents a single token in an RPN expression.

    Position and length locate the token in the source line but are not part of its identity.
    """
    type: RPNTokenType
    value: Any
    position: int = field(default=0, compare=False)
    length: int = field(default=1, compare=False)

    def __post_init__(self) -> None:
        # Numeral values are always held as fixed-width numpy scalars
        if self.type == RPNTokenType.INTEGER:
            object.__setattr__(self, "value", np.int32(self.value))

        elif self.type == RPNTokenType.FLOAT:
            object.__setattr__(self, "value", np.float32(self.value))

    def is_numeral(self) -> bool:
        """Check if this token is an integer or float literal."""
        return self.type in (RPNTokenType.INTEGER, RPNTokenType.FLOAT)

    def __repr__(self) -> str:
        if self.type == RPNTokenType.OPERATOR:
            return f"RPNToken({self.type.name}, {self.value.name}, pos={self.position})"

        if self.is_numeral():
            return f"RPNToken({self.type.name}, {self.value}, pos={self.position})"

        return f"RPNToken({self.type.name}, {self.value!r}, pos={self.position})"
