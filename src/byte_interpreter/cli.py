"""byte-interpreter CLI: evaluate byte expressions line by line.

Usage:
    byte-interpreter                       Read expressions from stdin
    byte-interpreter -f hex                Print results as hex
    byte-interpreter -s boolean            Nonzero-is-true semantics
    byte-interpreter -e 'ab|c5&05'         Evaluate arguments, skip stdin

Protocol:
    One expression per line; an empty line (or EOF) ends the session.
    Each result is printed as ``> value``, each error as ``! message``.
"""

import argparse
import sys

from .config import SEMANTICS, DEFAULT_SEMANTICS, make_interpreter
from .errors import InterpreterError


def _fmt_value(value, fmt):
    """Format a result byte as decimal or two-digit hex."""
    if fmt == 'hex':
        return f"{value:02x}"
    return str(value)


def _fmt_postfix(tokens):
    return ' '.join(str(tok) for tok in tokens)


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='byte-interpreter',
        description='Evaluate bitwise expressions over hex byte operands.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  byte-interpreter                   Interactive, decimal results
  byte-interpreter -f hex            Results as two hex digits
  byte-interpreter -s boolean        Operands are true when nonzero
  byte-interpreter -v                Also show each postfix form
  byte-interpreter -e '~3f|ab&(c5^10)' -e 'ab|c5&05'""")

    parser.add_argument('-e', '--expr', action='append', default=None,
                        metavar='EXPR',
                        help='Evaluate EXPR instead of reading stdin (repeatable)')
    parser.add_argument('-f', '--format', choices=['dec', 'hex'], default='dec',
                        help='Result notation (default: dec)')
    parser.add_argument('-s', '--semantics', choices=sorted(SEMANTICS),
                        default=DEFAULT_SEMANTICS,
                        help=f'Operator semantics (default: {DEFAULT_SEMANTICS})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show postfix form and tracebacks')

    args = parser.parse_args(argv)

    try:
        return run(args)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"\nUnexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


def _read_lines(stream):
    """Yield input lines until an empty line or EOF."""
    for line in stream:
        line = line.rstrip('\r\n')
        if not line:
            return
        yield line


def run(args) -> int:
    """Evaluate each expression and print its result."""
    interpreter = make_interpreter(args.semantics)

    if args.expr is not None:
        lines = args.expr
    else:
        lines = _read_lines(sys.stdin)

    for line in lines:
        expr = line.strip()
        try:
            if args.verbose:
                print(f"  postfix: {_fmt_postfix(interpreter.to_postfix(expr))}")
            value = interpreter.evaluate(expr)
        except InterpreterError as e:
            print(f"! {e}")
            continue
        print(f"> {_fmt_value(value, args.format)}")

    return 0
