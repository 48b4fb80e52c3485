"""Infix -> postfix reordering (shunting-yard).

Operators are held on an auxiliary stack and released to the output
once an operator of lower priority arrives.  Equal priority also
releases, which gives left-to-right grouping::

    ~3f | ab & ( 4d | 05 )   ->   3f ~ ab 4d 05 | & |

Only structure is checked here: operand counts are left to the
interpreter.  An unmatched ``(`` is passed through to the output and
rejected there as an unexpected token.
"""

from types import MappingProxyType

from .errors import ParseError
from .tokens import LBRACE, RBRACE


class PostfixParser:
    """Reorder infix tokens using an operator->priority map."""

    def __init__(self, oper_priority_map):
        self.oper_priority_map = MappingProxyType(dict(oper_priority_map))

    def parse(self, tokens_infix):
        """Return the postfix form of *tokens_infix*.

        Raises:
            ParseError: on a closing brace with no open brace before it,
                or an operator that has no configured priority.
        """
        tokens_postfix = []
        temp_stack = []

        for token in tokens_infix:
            if token.kind == LBRACE:
                temp_stack.append(token)

            elif token.kind == RBRACE:
                while True:
                    if not temp_stack:
                        raise ParseError("Extra closing brace")
                    top = temp_stack.pop()
                    if top.kind == LBRACE:
                        break
                    tokens_postfix.append(top)

            elif token.is_const:
                tokens_postfix.append(token)

            else:
                prior_of_cur = self.priority(token)
                if prior_of_cur is None:
                    raise ParseError(f"No priority configured for {token}")
                while temp_stack:
                    prior_of_top = self.priority(temp_stack[-1])
                    if prior_of_top is None or prior_of_top < prior_of_cur:
                        break
                    tokens_postfix.append(temp_stack.pop())
                temp_stack.append(token)

        while temp_stack:
            tokens_postfix.append(temp_stack.pop())
        return tokens_postfix

    def priority(self, token):
        """Configured priority of *token*, or None (braces, constants)."""
        return self.oper_priority_map.get(token)
