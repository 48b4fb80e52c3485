"""Error types for byte-interpreter.

Each pipeline stage raises its own subclass so callers can tell a
malformed literal from a malformed structure or a bad reduction.
"""


class InterpreterError(Exception):
    """Base error for byte-interpreter."""
    pass


class LexError(InterpreterError):
    """Segment is neither a registered literal nor a byte-sized hex value."""

    def __init__(self, msg, segment=None, position=None):
        self.segment = segment
        self.position = position
        super().__init__(msg)


class ParseError(InterpreterError):
    """Infix sequence can't be reordered (unmatched closing brace)."""
    pass


class EvalError(InterpreterError):
    """Postfix sequence doesn't reduce to exactly one byte."""

    def __init__(self, msg, token=None):
        self.token = token
        super().__init__(msg)
