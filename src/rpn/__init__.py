"""RPN (Reverse Polish Notation) calculator package."""

# Main API
from rpn.rpn import RPN

# Exceptions (for error handling)
from rpn.rpn_error import (
    RPNError, RPNParseError, RPNEvalError,
    RPNUnrecognizedTokenError, RPNOperatorMissingOperandError, RPNUnbalancedEquationError, RPNNoExpressionError,
    RPNUnexpectedLiteralError
)

# Value types
from rpn.rpn_number import RPNNumber, RPNInteger, RPNFloat

# Lower-level components (for advanced usage)
from rpn.rpn_token import RPNToken, RPNTokenType, RPNOperator
from rpn.rpn_ast import RPNExpression, RPNLiteral, RPNBinaryOp
from rpn.rpn_tokenizer import RPNTokenizer
from rpn.rpn_parser import RPNParser
from rpn.rpn_evaluator import RPNEvaluator
from rpn.rpn_operators import RPNOperators


__version__ = "0.1.0"


__all__ = [
    # Main API
    "RPN",

    # Exceptions
    "RPNError", "RPNParseError", "RPNEvalError",
    "RPNUnrecognizedTokenError", "RPNOperatorMissingOperandError", "RPNUnbalancedEquationError",
    "RPNNoExpressionError", "RPNUnexpectedLiteralError",

    # Value types
    "RPNNumber", "RPNInteger", "RPNFloat",

    # Lower-level components
    "RPNToken", "RPNTokenType", "RPNOperator", "RPNExpression", "RPNLiteral", "RPNBinaryOp",
    "RPNTokenizer", "RPNParser", "RPNEvaluator", "RPNOperators"
]
