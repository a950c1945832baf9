"""CLI for passcraft — generate and score passwords."""

import argparse
import logging
import sys

from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from .config import MAX_LENGTH, MIN_LENGTH, load_config
from .generator import InvalidPolicy, generate_password
from .score import score_password

logger = logging.getLogger(__name__)

console = Console()

# label -> rich style, matching the colours of the old desktop meter
LABEL_STYLES = {
    "Very Weak": "red",
    "Weak": "orange1",
    "Medium": "dark_orange3",
    "Strong": "green3",
    "Very Strong": "dark_green",
}


def _length(value):
    n = int(value)
    if not MIN_LENGTH <= n <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}")
    return n


def _positive(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def _styled(result):
    style = LABEL_STYLES.get(result.label, "white")
    return f"[{style}]{result.label}[/{style}] ({result.score}/100)"


def cmd_generate(args):
    if args.no_upper and args.no_numbers and args.no_symbols and not args.allow_lowercase_only:
        logger.warning("refusing lowercase-only generation without --allow-lowercase-only")
        print("[yellow]Select at least one character type: uppercase, numbers or symbols.[/yellow]")
        return 2
    for i in range(args.copies):
        try:
            pw = generate_password(
                args.length,
                use_uppercase=not args.no_upper,
                use_numbers=not args.no_numbers,
                use_symbols=not args.no_symbols,
            )
        except InvalidPolicy as e:
            print(f"[red]Invalid policy: {e}[/red]")
            return 2
        line = f"[bold green]Password #{i+1}:[/bold green] {pw}"
        if args.score:
            line += f"  {_styled(score_password(pw))}"
        # one physical line per password so it copies cleanly
        console.print(line, soft_wrap=True, highlight=False)
    return 0


def cmd_score(args):
    result = score_password(args.password)
    style = LABEL_STYLES.get(result.label, "white")
    table = Table.grid(padding=(0, 1))
    table.add_row("Strength:", f"[{style}]{result.label}[/{style}]")
    table.add_row(
        f"{result.score:>3}/100",
        ProgressBar(total=100, completed=result.score, complete_style=style, finished_style=style),
    )
    print(Panel(table, title="Password strength"))
    return 0


def build_parser(cfg=None):
    cfg = cfg or load_config()
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=_length, default=cfg["length"], help="Password length")
    gen.add_argument("--no-upper", action="store_true", default=not cfg["use_uppercase"], help="Disable uppercase")
    gen.add_argument("--no-numbers", action="store_true", default=not cfg["use_numbers"], help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", default=not cfg["use_symbols"], help="Disable symbols")
    gen.add_argument("--allow-lowercase-only", action="store_true",
                     help="Permit generation with every optional class disabled")
    gen.add_argument("--copies", type=_positive, default=cfg["copies"], help="How many passwords to generate")
    gen.add_argument("--score", action="store_true", help="Show the strength of each password")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)
    return parser


def setup_logging(verbose):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
