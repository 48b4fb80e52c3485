"""byte-interpreter: Evaluate bitwise expressions over byte operands.

Supports:
  - Hex byte literals 00-ff
  - & (AND), | (OR), ^ (XOR), ~ (NOT) and ( ) grouping
  - Configurable literal, priority and operand-count tables
  - Pluggable operator semantics (bitwise by default, or boolean)

Usage as library:
    from byte_interpreter import evaluate
    evaluate('~3f|ab &( c5^10 )')        # -> 0xc1

Usage from command line:
    byte-interpreter -f hex
    python -m byte_interpreter -e 'ab|c5&05'
"""

from .config import make_interpreter
from .errors import InterpreterError, LexError, ParseError, EvalError
from .interpreter import Interpreter
from .lexer import Lexer
from .parser import PostfixParser
from .tokens import (Token, AND_OP, OR_OP, XOR_OP, NOT_OP,
                     LEFT_BRACE, RIGHT_BRACE, const_val)

__version__ = '0.1.0'

_default = None


def evaluate(expr):
    """Evaluate *expr* with the default tables and bitwise semantics.

    Raises:
        LexError, ParseError, EvalError.
    """
    global _default
    if _default is None:
        _default = make_interpreter()
    return _default.evaluate(expr)
