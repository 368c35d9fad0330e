#!/usr/bin/env python3
"""
entropass CLI
=============
Command-line interface for secret generation and entropy estimation.

Usage:
    entropass generate -a -A -0 -L 16
    entropass generate -m words-basic -E 64 -M 40
    entropass estimate -m words-bip39 -L 5
    entropass classes
"""

import argparse
import logging
import math
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from entropass import __version__, MODES

# =============================================================================
# Constants
# =============================================================================

# Flag dest -> character class name (chars mode)
CLASS_FLAGS = [
    ('lower', 'lower'),
    ('upper', 'upper'),
    ('digit', 'digit'),
    ('all_symbols', 'symbol'),
]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.stderr = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, markup=False, **kwargs)

    def info(self, msg: str):
        if not self.quiet:
            self.stderr.print(msg, markup=False, soft_wrap=True)

    def secret(self, value: str):
        # Plain stdout, never styled or wrapped
        print(value)

    def error(self, msg: str):
        self.stderr.print(f"Error: {msg}", style="bold red", markup=False, soft_wrap=True)

    def warn(self, msg: str, critical: bool = False):
        if not self.quiet:
            style = "bold red" if critical else "yellow"
            self.stderr.print(msg, style=style, markup=False, soft_wrap=True)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(title=title)
        for h in headers:
            table.add_column(str(h))
        for row in rows:
            table.add_row(*(Text(str(c)) for c in row))
        self.console.print(table)


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def non_negative_int(value: str) -> int:
    """argparse type for integers >= 0."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {n}")
    return n


def finite_float(value: str) -> float:
    """argparse type for finite floats (rejects inf and nan)."""
    try:
        x = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not math.isfinite(x):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {value!r}")
    return x


def selected_classes(args) -> list:
    """Character class names switched on by the chars-mode flags."""
    return [name for dest, name in CLASS_FLAGS if getattr(args, dest, False)]


def required_charsets(args, classes: list) -> dict:
    """
    Resolve --require into a mapping of label -> characters.

    'all' means every class selected for chars mode, custom symbols
    included.
    """
    from entropass import get_charset

    if not args.require:
        return None

    names = [n.strip() for n in args.require.split(',') if n.strip()]
    charsets = {}
    for name in names:
        if name == 'all':
            if args.mode != 'chars':
                raise ValueError("--require all is only valid in chars mode")
            for c in classes:
                charsets[c] = get_charset([c])
            if args.symbols and not args.all_symbols:
                charsets['custom'] = args.symbols
        else:
            charsets[name] = get_charset([name])
    return charsets


def build_selection(args, kit):
    """Build (symbols, sep, validator) from the selection options."""
    classes = selected_classes(args)

    if args.mode == 'chars':
        extra = None if args.all_symbols else args.symbols
        symbols = kit.symbols_for('chars', classes=classes, symbols=extra)
        sep = args.sep if args.sep is not None else ""
    else:
        symbols = kit.symbols_for(args.mode, wordlist=args.wordlist)
        sep = args.sep if args.sep is not None else " "

    validator = kit.validator_for(
        max_bytes=args.max_bytes,
        require_classes=required_charsets(args, classes),
    )
    return symbols, sep, validator


def warn_strength(plan, kit, out: Output):
    """Warn about settings an attacker could brute force."""
    cfg = kit.config
    if plan.strength == 'critical':
        out.warn(
            f"CRITICAL WARNING: This setting is too weak "
            f"({plan.estimate:.2f} bits < {cfg.critical_bits:g} bits). "
            f"May be cracked by personal attackers.",
            critical=True,
        )
    elif plan.strength == 'weak':
        out.warn(
            f"WARNING: This setting is weak "
            f"({plan.estimate:.2f} bits < {cfg.warn_bits:g} bits)."
        )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate secrets."""
    from entropass import Entropass

    kit = Entropass()
    symbols, sep, validator = build_selection(args, kit)

    plan = kit.plan(
        symbols,
        length=args.length,
        entropy=args.entropy,
        sep=sep,
        validator=validator,
        default_length=kit.default_length(args.mode),
    )
    warn_strength(plan, kit, out)

    for secret in kit.generate(plan, count=args.count):
        out.secret(secret)

    if args.verbose:
        out.info(f"{plan.length} symbols of {len(symbols)}, ~{plan.estimate:.2f} bits")

    return 0


def cmd_estimate(args, out: Output):
    """Estimate entropy without generating."""
    from entropass import Entropass

    kit = Entropass()
    symbols, sep, validator = build_selection(args, kit)

    plan = kit.plan(
        symbols,
        length=args.length,
        entropy=args.entropy,
        sep=sep,
        validator=validator,
        default_length=kit.default_length(args.mode),
    )

    rows = [
        ['Mode', args.mode],
        ['Symbols', len(symbols)],
        ['Length', plan.length],
        ['Base entropy', f"{symbols.base_entropy(plan.length):.2f} bits"],
        ['Estimated entropy', f"{plan.estimate:.2f} bits"],
    ]
    if plan.strength:
        rows.append(['Strength', plan.strength])

    out.table(['Setting', 'Value'], rows, title='Entropy Estimate')
    return 0


def cmd_classes(args, out: Output):
    """List character classes."""
    from entropass import list_classes

    rows = []
    for name, info in list_classes().items():
        rows.append([name, info['size'], info['description'], info['chars']])

    out.table(['Class', 'Size', 'Description', 'Characters'], rows,
              title='Character Classes')
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='entropass',
        description='entropass - Random Secret Generator with Entropy Estimation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -a -A -0 -L 16
  %(prog)s generate -a -0 -E 80 --require all
  %(prog)s generate -m words-basic -L 6 -M 40
  %(prog)s generate -m words-bip39 -E 64 -S -
  %(prog)s estimate -m words-basic -L 5 -M 24
  %(prog)s classes
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    # Shared symbol selection options
    select = argparse.ArgumentParser(add_help=False)
    select.add_argument('--mode', '-m', choices=MODES, default='chars', help='Generator mode')
    select.add_argument('--lower', '-a', action='store_true', help='Use lower cases (chars mode only)')
    select.add_argument('--upper', '-A', action='store_true', help='Use capital cases (chars mode only)')
    select.add_argument('--digit', '-0', action='store_true', help='Use digits (chars mode only)')
    select.add_argument('--all-symbols', '-!', dest='all_symbols', action='store_true',
                        help="Use all ASCII symbols except ' ' (chars mode only)")
    select.add_argument('--symbols', '-s', help='Use specified symbols (chars mode only)')
    select.add_argument('--wordlist', '-w', help='Word list file (words modes only)')
    select.add_argument('--sep', '-S', help='Separator (default: " " for words, "" for chars)')
    select.add_argument('--length', '-L', type=positive_int, help='Length of symbols sequence')
    select.add_argument('--entropy', '-E', type=finite_float, help='Entropy requirement in bits')
    select.add_argument('--max-bytes', '-M', dest='max_bytes', type=non_negative_int,
                        help='Maximum length in bytes')
    select.add_argument('--require', '-r',
                        help='Comma-separated classes that must appear, or "all"')
    select.add_argument('--verbose', '-v', action='store_true', help='Show details and debug logs')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], parents=[select],
                              help='Generate secrets')
    p.add_argument('-n', '--count', type=positive_int, default=1,
                   help='Number of secrets (default: 1)')

    # --- estimate ---
    subparsers.add_parser('estimate', aliases=['e'], parents=[select],
                          help='Estimate entropy of a setting')

    # --- classes ---
    subparsers.add_parser('classes', help='List character classes')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'e': 'estimate',
    }
    command = cmd_map.get(args.command, args.command)

    # Output handler
    out = Output(quiet=getattr(args, 'quiet', False))

    verbose = getattr(args, 'verbose', False)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)

    # Dispatch
    commands = {
        'generate': cmd_generate,
        'estimate': cmd_estimate,
        'classes': cmd_classes,
    }

    handler = commands.get(command)
    if handler:
        from entropass import EntropassError

        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (EntropassError, ValueError, OSError) as e:
            out.error(str(e))
            if verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
