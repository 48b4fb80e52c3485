"""Per-operator semantics, pluggable into :class:`Interpreter`.

An operation is any callable ``(stack, op) -> int``: it pops its own
operands from the shared stack (right-hand operand on top) and returns
the result byte.  The interpreter pushes that result back.

Two rule sets are built in, both as numpy ``uint8`` ufunc tables:

  bitwise   full-byte complement / and / or / xor   (~0f == f0)
  boolean   nonzero is true, result is 0 or 1      (~0f == 00)
"""

import numpy as np

from .errors import EvalError
from .tokens import AND_OP, OR_OP, XOR_OP, NOT_OP


def make_operation(ufuncs):
    """Build an operation from a {Token: numpy ufunc} table.

    Each ufunc's ``nin`` is the number of operands it pops.
    """
    table = dict(ufuncs)

    def operation(stack, op):
        fn = table.get(op)
        if fn is None:
            raise EvalError(f"Unhandled operation {op}", token=op)
        n = fn.nin
        if len(stack) < n:
            raise EvalError(f"Too few operands for {op}", token=op)
        args = [np.uint8(v) for v in stack[len(stack) - n:]]
        del stack[len(stack) - n:]
        return int(fn(*args))

    return operation


bitwise_operation = make_operation({
    NOT_OP: np.invert,
    AND_OP: np.bitwise_and,
    OR_OP: np.bitwise_or,
    XOR_OP: np.bitwise_xor,
})

boolean_operation = make_operation({
    NOT_OP: np.logical_not,
    AND_OP: np.logical_and,
    OR_OP: np.logical_or,
    XOR_OP: np.logical_xor,
})
