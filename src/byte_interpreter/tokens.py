"""Token model: the closed set of lexical symbols.

Operators:  AND_OP  OR_OP  XOR_OP  NOT_OP
Operands:   const_val(0x00 .. 0xff)
Grouping:   LEFT_BRACE  RIGHT_BRACE

Tokens compare and hash by value, so they can key the configuration
tables (literal map, priority map, arity map).
"""

AND = 'and'
OR = 'or'
XOR = 'xor'
NOT = 'not'
CONST = 'const'
LBRACE = 'lbrace'
RBRACE = 'rbrace'

KINDS = (AND, OR, XOR, NOT, CONST, LBRACE, RBRACE)

_NAMES = {
    AND: 'AndOp', OR: 'OrOp', XOR: 'XorOp', NOT: 'NotOp',
    LBRACE: 'LeftBrace', RBRACE: 'RightBrace',
}

_DISPLAY = {
    AND: 'AND', OR: 'OR', XOR: 'XOR', NOT: 'NOT',
    LBRACE: '(', RBRACE: ')',
}


class Token:
    """Immutable lexical symbol; *value* is set only for constants."""
    __slots__ = ('kind', 'value')

    def __init__(self, kind, value=None):
        if kind not in KINDS:
            raise ValueError(f"Unknown token kind {kind!r}")
        if kind == CONST:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Constant must be an int, got {value!r}")
            if not 0 <= value <= 0xFF:
                raise ValueError(f"Constant must fit in a byte, got {value}")
        elif value is not None:
            raise ValueError(f"Token {kind!r} takes no value")
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __delattr__(self, name):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.kind == CONST:
            return f"ConstVal(0x{self.value:02x})"
        return _NAMES[self.kind]

    def __str__(self):
        if self.kind == CONST:
            return f"{self.value:x}"
        return _DISPLAY[self.kind]

    @property
    def is_const(self):
        return self.kind == CONST

    @property
    def is_brace(self):
        return self.kind in (LBRACE, RBRACE)


AND_OP = Token(AND)
OR_OP = Token(OR)
XOR_OP = Token(XOR)
NOT_OP = Token(NOT)
LEFT_BRACE = Token(LBRACE)
RIGHT_BRACE = Token(RBRACE)


def const_val(value):
    """Operand token for a byte value (0..255)."""
    return Token(CONST, value)
