"""Default operator tables.

    literal   token    priority   operands
    -------   ------   --------   --------
      |       OR          1          2
      ^       XOR         1          2
      &       AND         2          2
      ~       NOT         3          1
      ( )     braces      -          -
"""

from types import MappingProxyType

from .interpreter import Interpreter
from .operations import bitwise_operation, boolean_operation
from .tokens import (AND_OP, OR_OP, XOR_OP, NOT_OP,
                     LEFT_BRACE, RIGHT_BRACE)

LITERAL_TOKEN_MAP = MappingProxyType({
    '&': AND_OP,
    '|': OR_OP,
    '^': XOR_OP,
    '~': NOT_OP,
    '(': LEFT_BRACE,
    ')': RIGHT_BRACE,
})

OPER_PRIORITY_MAP = MappingProxyType({
    OR_OP: 1,
    XOR_OP: 1,
    AND_OP: 2,
    NOT_OP: 3,
})

ARGS_COUNT_MAP = MappingProxyType({
    OR_OP: 2,
    XOR_OP: 2,
    AND_OP: 2,
    NOT_OP: 1,
})

SEMANTICS = MappingProxyType({
    'bitwise': bitwise_operation,
    'boolean': boolean_operation,
})

DEFAULT_SEMANTICS = 'bitwise'


def make_interpreter(semantics=DEFAULT_SEMANTICS):
    """Interpreter over the default tables with named semantics."""
    try:
        operation = SEMANTICS[semantics]
    except KeyError:
        raise ValueError(
            f"Unknown semantics {semantics!r}, "
            f"expected one of: {', '.join(SEMANTICS)}") from None
    return Interpreter(LITERAL_TOKEN_MAP, OPER_PRIORITY_MAP,
                       ARGS_COUNT_MAP, operation)
