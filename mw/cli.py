import argparse
import sys
from rich.console import Console
from rich.traceback import install

from . import __pkg_version__
from .browser import detect_platform, open_project_page, select_command
from .constants import PROJECT_URL, SUPPORTED_PLATFORMS


install(show_locals=True)
console = Console()


def configure_show_parser(show_parser: argparse.ArgumentParser) -> None:
    show_parser.add_argument(
        "--platform",
        type=str,
        default=None,
        help="Platform identifier to inspect instead of the current one (e.g. 'windows', 'darwin', 'linux').",
    )
    show_parser.add_argument(
        "--output",
        type=str,
        choices=["rich", "plain"],
        default="rich",
        help="Output mode: 'rich' for a formatted summary (default), 'plain' for the bare command line.",
    )


def execute_show_command(args: argparse.Namespace) -> None:
    """Execute the 'mw show' command."""
    platform = args.platform or detect_platform()
    command = select_command(platform)

    if command is None:
        console.print(f"[bold red]Error:[/] No URL handler for platform '{platform}'.")
        console.print(f"[dim]Supported platforms: {', '.join(SUPPORTED_PLATFORMS)}[/]")
        sys.exit(1)

    if args.output == "plain":
        console.print(" ".join(command.argv), markup=False, highlight=False)
    else:
        console.print(f"[bold]Platform:[/] {platform}")
        console.print(f"[bold]URL:[/] {PROJECT_URL}")
        console.print(f"[bold]Command:[/] [cyan]{' '.join(command.argv)}[/]")
    sys.exit(0)


def execute_open_command(args: argparse.Namespace) -> None:
    """Execute the 'mw open' command."""
    if open_project_page():
        console.print(f"[bold green]Opened[/] {PROJECT_URL}")
        sys.exit(0)

    console.print(f"[bold red]Error:[/] Could not open {PROJECT_URL} on platform '{detect_platform()}'.")
    sys.exit(1)


def main() -> None:
    """Main function for the mw CLI."""
    try:
        _main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/]")
        sys.exit(130)


def _main() -> None:
    parser = argparse.ArgumentParser(
        prog="mw",
        description=f"Open {PROJECT_URL} with the system's default URL handler.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__pkg_version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_parser = subparsers.add_parser("show", help="Show the command used to open the project page")
    configure_show_parser(show_parser)

    _ = subparsers.add_parser("open", help="Open the project page in the default browser")

    args = parser.parse_args()

    if args.command == "show":
        execute_show_command(args)
    elif args.command == "open":
        execute_open_command(args)
    else:
        parser.print_help()
        sys.exit(1)
