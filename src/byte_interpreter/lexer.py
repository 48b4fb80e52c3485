"""Tokenizer: expression text -> infix token list.

Two phases:
  1. **Split**: hex digits ``0-9a-f`` are grouped greedily into runs;
     every other non-space character is a segment of its own.
  2. **Classify**: a segment is looked up in the literal map, and
     failing that parsed as a base-16 byte.

    >>> Lexer.split("~3f|ab &( c5^10 ) ")
    ['~', '3f', '|', 'ab', '&', '(', 'c5', '^', '10', ')']
"""

import re
from types import MappingProxyType

from .errors import LexError
from .tokens import const_val

_RUN_CHARS = frozenset('0123456789abcdef')
_HEX_RE = re.compile(r'[0-9a-fA-F]+')


class Lexer:
    """Split and classify expression text against a literal->Token map."""

    def __init__(self, literal_token_map):
        self.literal_token_map = MappingProxyType(dict(literal_token_map))
        self._token_literals = MappingProxyType(
            {tok: lit for lit, tok in self.literal_token_map.items()})

    def tokenize(self, expr):
        """Convert *expr* to a list of Tokens.

        Raises:
            LexError: on the first segment that is not a registered
                literal or a hex value in 00..ff.
        """
        return [self.token_from(seg, pos) for pos, seg in _segments(expr)]

    @staticmethod
    def split(expr):
        """Segment *expr* without classifying (whitespace dropped)."""
        return [seg for _, seg in _segments(expr)]

    def token_from(self, segment, position=None):
        """Classify one segment: literal map first, then hex byte."""
        token = self.literal_token_map.get(segment)
        if token is not None:
            return token
        if _HEX_RE.fullmatch(segment):
            value = int(segment, 16)
            if value <= 0xFF:
                return const_val(value)
        where = f" at position {position}" if position is not None else ''
        raise LexError(f"Incorrect token '{segment}'{where}",
                       segment=segment, position=position)

    def render(self, tokens):
        """Serialize *tokens* back to text that :meth:`tokenize` accepts.

        Constants render as two lowercase hex digits; tokens are space
        separated so adjacent constants never merge into one run.
        """
        parts = []
        for tok in tokens:
            if tok.is_const:
                parts.append(f"{tok.value:02x}")
                continue
            literal = self._token_literals.get(tok)
            if literal is None:
                raise LexError(f"No literal registered for {tok}")
            parts.append(literal)
        return ' '.join(parts)


def _segments(expr):
    """Yield (start_offset, segment) pairs."""
    start = None
    for i, ch in enumerate(expr):
        if ch in _RUN_CHARS:
            if start is None:
                start = i
            continue
        if start is not None:
            yield start, expr[start:i]
            start = None
        if not ch.isspace():
            yield i, ch
    if start is not None:
        yield start, expr[start:]
