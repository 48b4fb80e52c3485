"""Evaluate byte expressions: tokenize -> postfix -> stack reduction.

Three-stage pipeline:
  1. **Lex** (``lexer.py``): text -> infix ``[Token]``
  2. **Reorder** (``parser.py``): infix -> postfix ``[Token]``
  3. **Reduce** (this module): walk the postfix list with an operand
     stack; constants are pushed, operators hand the stack to the
     configured operation which pops its operands and returns a byte.

A well-formed expression leaves exactly one value on the stack.
"""

import numbers
from types import MappingProxyType

from .errors import EvalError
from .lexer import Lexer
from .parser import PostfixParser


class Interpreter:
    """Byte expression evaluator over caller-supplied configuration.

    Args:
        literal_token_map: {text: Token} for operators and braces.
        oper_priority_map: {Token: int}, higher binds tighter.
        oper_args_count_map: {Token: int} operand count per operator.
        operation: ``(stack, op) -> int`` semantics callable
            (see ``operations.py``).

    The maps are copied and frozen; one instance can serve any number
    of ``evaluate`` calls, each with its own token lists and stack.
    """

    def __init__(self, literal_token_map, oper_priority_map,
                 oper_args_count_map, operation):
        self.oper_args_count_map = MappingProxyType(dict(oper_args_count_map))
        self.operation = operation
        self.lexer = Lexer(literal_token_map)
        self.parser = PostfixParser(oper_priority_map)

    def evaluate(self, expr):
        """Evaluate *expr* to a byte (0..255).

        Raises:
            LexError, ParseError, EvalError.
        """
        eval_stack = []
        for token in self.to_postfix(expr):
            if self.arity(token) is not None:
                eval_stack.append(self.eval_op(eval_stack, token))
            elif token.is_const:
                eval_stack.append(token.value)
            else:
                raise EvalError(f"Unexpected token {token} in expression",
                                token=token)

        if len(eval_stack) != 1:
            raise EvalError("Cannot evaluate expression")
        return eval_stack.pop()

    def to_postfix(self, expr):
        """Run the lex and reorder stages only."""
        return self.parser.parse(self.lexer.tokenize(expr))

    def eval_op(self, stack, op):
        """Apply *op* to the operand *stack*; returns the result byte."""
        n = self.arity(op)
        if n is None:
            raise EvalError(f"{op} has no configured operand count", token=op)
        if len(stack) < n:
            raise EvalError(f"Too few operands for {op}", token=op)
        value = self.operation(stack, op)
        if not isinstance(value, numbers.Integral) or not 0 <= value <= 0xFF:
            raise EvalError(f"{op} produced non-byte result {value!r}",
                            token=op)
        return int(value)

    def arity(self, op):
        """Configured operand count of *op*, or None."""
        return self.oper_args_count_map.get(op)
