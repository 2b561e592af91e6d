"""Exception classes for the RPN calculator with detailed context."""

from typing import List, Optional, Tuple

from rpn.rpn_token import RPNOperator, RPNToken


class RPNError(Exception):
    """
    Base exception for RPN errors with detailed context information.

    Subclasses name their variant in `variant` and return their payload from `_payload()`; `debug_repr()`
    combines the two into a compact dump such as `UnbalancedEquation(2)`.
    """

    variant: Optional[str] = None

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
            position: Character position in the input line where the error was found
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example
        self.position = position

        super().__init__(self._format_detailed_message())

    def _details(self) -> List[Tuple[str, Optional[str]]]:
        """Labelled details in the order they are shown."""
        return [
            ("Position", None if self.position is None else str(self.position)),
            ("Received", self.received),
            ("Expected", self.expected),
            ("Context", self.context),
            ("Suggestion", self.suggestion),
            ("Example", self.example),
        ]

    def _format_detailed_message(self) -> str:
        lines = [f"Error: {self.message}"]
        lines.extend(f"{label}: {value}" for label, value in self._details() if value)
        return "\n".join(lines)

    def _payload(self) -> Optional[str]:
        return None

    def debug_repr(self) -> str:
        """Return a compact dump of the error variant and its payload."""
        name = self.variant or type(self).__name__
        payload = self._payload()
        if payload is None:
            return name

        return f"{name}({payload})"


class RPNParseError(RPNError):
    """Parsing errors with detailed context."""


class RPNEvalError(RPNError):
    """Evaluation errors with detailed context."""


class RPNUnrecognizedTokenError(RPNParseError):
    """An unrecognized token was rejected by a parser configured to fail fast."""

    variant = "UnrecognizedToken"

    def __init__(self, token: RPNToken):
        self.token = token
        super().__init__(
            message=f"Unrecognized token: {token.value}",
            position=token.position,
            received=f"Text: {token.value}",
            expected="Integer, float, or one of the operators + - * /",
            example="Correct: 3 -2 -\\nIncorrect: 3-2 or 3 2-",
            suggestion="Separate every number and operator with whitespace",
            context="The parser is rejecting unrecognized input instead of deferring it to evaluation"
        )

    def _payload(self) -> Optional[str]:
        return repr(self.token)


class RPNOperatorMissingOperandError(RPNParseError):
    """An operator was reached with fewer than two operands on the stack."""

    variant = "OperatorMissingOperand"

    def __init__(self, operator: RPNOperator, position: Optional[int] = None):
        self.operator = operator
        super().__init__(
            message=f"Operator '{operator.value}' is missing an operand",
            position=position,
            received=f"Operator: {operator.value}",
            expected="Two operands before every operator",
            example="Correct: 1 2 +\\nIncorrect: 1 +",
            suggestion="Add the missing operand before the operator",
            context="Operators in reverse polish notation follow both of their operands"
        )

    def _payload(self) -> Optional[str]:
        return self.operator.name


class RPNUnbalancedEquationError(RPNParseError):
    """More than one value was left once every token had been consumed."""

    variant = "UnbalancedEquation"

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(
            message="Unbalanced equation",
            received=f"{remaining} values left after the last operator",
            expected="Exactly one value",
            example="Correct: 1 2 +\\nIncorrect: 1 2",
            suggestion="Add operators to combine the remaining values, or remove extra operands",
            context="N operands need exactly N-1 binary operators"
        )

    def _payload(self) -> Optional[str]:
        return str(self.remaining)


class RPNNoExpressionError(RPNParseError):
    """The input contained no tokens at all."""

    variant = "NoExpression"

    def __init__(self) -> None:
        super().__init__(
            message="Empty expression",
            expected="At least one number",
            example="1 2 + or 42",
            suggestion="Provide a complete expression to evaluate",
            context="Expression cannot be empty or contain only whitespace"
        )


class RPNUnexpectedLiteralError(RPNEvalError):
    """A literal in the expression tree did not hold a number."""

    variant = "UnexpectedLiteral"

    def __init__(self, token: RPNToken):
        self.token = token
        super().__init__(
            message=f"Unexpected literal: {token.value}",
            position=token.position,
            received=f"Token: {token!r}",
            expected="Integer or float literal",
            example="Correct: 3 -2 -\\nIncorrect: 3 2- or 3 two -",
            suggestion="Check the input for misspelled numbers or operators not separated by whitespace"
        )

    def _payload(self) -> Optional[str]:
        return repr(self.token)
