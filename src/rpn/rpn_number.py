"""RPN number hierarchy - immutable fixed-width numeric results."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


class RPNNumber(ABC):
    """
    Abstract base class for RPN evaluation results.

    A result is either a 32-bit integer or a 32-bit float.  Arithmetic on two integers stays in the integer
    domain; as soon as a float is involved both operands are widened to float.
    """

    @abstractmethod
    def type_name(self) -> str:
        """Return the type name shown alongside verbose results."""

    @abstractmethod
    def as_float32(self) -> np.float32:
        """Return the value widened (if necessary) to a 32-bit float."""


@dataclass(frozen=True)
class RPNInteger(RPNNumber):
    """32-bit signed integer result."""
    value: np.int32

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", np.int32(self.value))

    def type_name(self) -> str:
        return "integer"

    def as_float32(self) -> np.float32:
        return np.float32(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RPNFloat(RPNNumber):
    """32-bit floating point result."""
    value: np.float32

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", np.float32(self.value))

    def type_name(self) -> str:
        return "float"

    def as_float32(self) -> np.float32:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
