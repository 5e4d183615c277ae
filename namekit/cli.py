#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for name generation and checking.

Usage:
    namekit generate -n 10
    namekit generate -n 5 --seed 42 --json
    namekit check "Balia"
    namekit repl
"""

import argparse
import json
import logging
import re
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.logging import RichHandler

from namekit import __version__
from namekit.settings import get_setting

logger = logging.getLogger("namekit")


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """
    Terminal output for the CLI.

    Names and JSON always reach stdout as plain text. Status lines and the
    violation table go through rich and are dropped in quiet mode. Errors
    go to stderr regardless.
    """

    def __init__(self, quiet: bool = False, console: Console = None,
                 err_console: Console = None):
        self.quiet = quiet
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def note(self, msg: str):
        if not self.quiet:
            self.console.print(escape(msg))

    def error(self, msg: str):
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(msg)}")

    def success(self, msg: str):
        if not self.quiet:
            self.console.print(f"[green]OK:[/green] {escape(msg)}")

    def names(self, names: list):
        for name in names:
            print(name.capitalize())

    def dump_json(self, data):
        print(json.dumps(data, indent=2))

    def violations(self, name: str, violations: list):
        """Table of rule breaks, one row per violation."""
        if self.quiet:
            return

        table = Table(box=box.SIMPLE, title=f"{escape(name)}: {len(violations)} problem(s)",
                      title_justify="left")
        table.add_column("Rule", style="yellow", no_wrap=True)
        table.add_column("Position", justify="right")
        table.add_column("Fragment", style="bold")
        table.add_column("Description")
        for v in violations:
            table.add_row(v.rule.value, str(v.position), escape(v.fragment), escape(v.description))
        self.console.print(table)


def validate_name(name: str) -> tuple:
    """Validate a name given on the command line."""
    if not name or not name.strip():
        return False, "Name cannot be empty"

    name = name.strip()

    if not re.match(r'^[a-zA-Z]+$', name):
        return False, "Name must contain only letters"

    return True, name


def positive_int(value: str) -> int:
    """argparse type for counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1, got {number}")
    return number


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich at the configured level."""
    level_name = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    level = getattr(logging, level_name, logging.WARNING)
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=verbose)
    handler.setFormatter(logging.Formatter(get_setting('logging.format', '%(message)s')))

    root = logging.getLogger("namekit")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    from namekit.generators import NameBuilder, make_rng

    rng = make_rng(args.seed) if args.seed is not None else None
    builder = NameBuilder(rng=rng)
    logger.debug(f"Generating {args.count} name(s), seed={builder.rng.initial_seed}")

    results = [builder.build() for _ in range(args.count)]

    if args.json:
        out.dump_json([r.to_dict() for r in results])
        return 0

    out.names([r.name for r in results])
    return 0


def cmd_check(args, out: Output):
    """Check a name against the orthographic rules."""
    from namekit.generators import find_violations

    ok, value = validate_name(args.name)
    if not ok:
        out.error(value)
        return 1

    violations = find_violations(value)

    if args.json:
        out.dump_json({
            'name': value,
            'well_formed': not violations,
            'violations': [v.to_dict() for v in violations],
        })
        return 0 if not violations else 1

    if not violations:
        out.success(f"{value} is well-formed")
        return 0

    out.violations(value, violations)
    return 1


def cmd_repl(args, out: Output):
    """Start the interactive session."""
    from namekit.generators import make_rng
    from namekit.repl import run_repl

    rng = make_rng(args.seed) if args.seed is not None else None
    return run_repl(rng=rng)


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='Pronounceable name generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  namekit generate -n 10              Generate 10 names
  namekit generate --seed 42 --json   Reproducible names as JSON
  namekit check Balia                 Check a name against the rules
  namekit repl                        Press ENTER for another name
        """
    )
    parser.add_argument('--version', action='version', version=f'namekit {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging of every construction step')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', title='commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=positive_int,
                   default=get_setting('cli.default_count', 1),
                   help='Number of names (default: %(default)s)')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON with metadata')

    # --- check ---
    p = subparsers.add_parser('check', aliases=['c'], help='Check a name against the rules')
    p.add_argument('name', help='Name to check')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- repl ---
    p = subparsers.add_parser('repl', aliases=['r'], help='Interactive session')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'c': 'check',
        'r': 'repl',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'check': cmd_check,
        'repl': cmd_repl,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.note("\nCancelled.")
            return 130
        except MemoryError:
            out.error("couldn't allocate memory for the name")
            return 1
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
