"""Main RPN (Reverse Polish Notation) calculator class."""

from typing import Tuple

from rpn.rpn_ast import RPNExpression
from rpn.rpn_evaluator import RPNEvaluator
from rpn.rpn_number import RPNNumber
from rpn.rpn_parser import RPNParser
from rpn.rpn_tokenizer import RPNTokenizer


class RPN:
    """
    Reverse polish notation calculator.

    Each call runs one line through the tokenizer, parser and evaluator.  No state is kept between calls,
    so a single instance can be shared freely.
    """

    def __init__(self, reject_unrecognized: bool = False):
        """
        Initialize the calculator.

        Args:
            reject_unrecognized: Fail at parse time on unrecognized input, rather than deferring the
                failure to evaluation
        """
        self.reject_unrecognized = reject_unrecognized

    def parse(self, expression: str) -> RPNExpression:
        """
        Tokenize and parse an RPN expression without evaluating it.

        Args:
            expression: RPN expression string to parse

        Returns:
            The root of the expression tree

        Raises:
            RPNParseError: If the token stream does not form exactly one expression
        """
        tokenizer = RPNTokenizer()
        tokens = tokenizer.tokenize(expression)

        parser = RPNParser(tokens, expression, reject_unrecognized=self.reject_unrecognized)
        return parser.parse()

    def interpret(self, expression: str) -> RPNNumber:
        """
        Evaluate an RPN expression.

        Args:
            expression: RPN expression string to evaluate

        Returns:
            The result as an integer or float number

        Raises:
            RPNParseError: If the token stream does not form exactly one expression
            RPNEvalError: If the expression tree holds a non-numeric literal
        """
        _parsed_expr, result = self.parse_and_interpret(expression)
        return result

    def parse_and_interpret(self, expression: str) -> Tuple[RPNExpression, RPNNumber]:
        """
        Parse an RPN expression and evaluate the resulting tree.

        Returns:
            Tuple of (expression tree, result)

        Raises:
            RPNParseError: If the token stream does not form exactly one expression
            RPNEvalError: If the expression tree holds a non-numeric literal
        """
        parsed_expr = self.parse(expression)

        evaluator = RPNEvaluator()
        return parsed_expr, evaluator.evaluate(parsed_expr)

    def interpret_and_format(self, expression: str) -> str:
        """
        Evaluate an RPN expression and return the formatted result.

        Args:
            expression: RPN expression string to evaluate

        Returns:
            Integers without a decimal point, floats in numpy's default float32 rendering

        Raises:
            RPNParseError: If the token stream does not form exactly one expression
            RPNEvalError: If the expression tree holds a non-numeric literal
        """
        return str(self.interpret(expression))
