"""
Main CLI application
"""
import sys
import click
import typer
from pathlib import Path
from typing import Optional, List, Sequence

from typer.main import get_command

from ... import __version__
from ...core.constants import PROG_NAME, DEFAULT_LOG_LEVEL, DEFAULT_CONFIG_PATH
from ...core.logging import setup_logging, get_stdout_console, get_stderr_console
from .common import CLIState
from .session import register_session_commands
from .listing import register_listing_commands

stdout_console = get_stdout_console()
stderr_console = get_stderr_console()

USAGE = f"""CyberArk SSH wrapper — simplify SSH through CyberArk PSMP

Usage:
  {PROG_NAME} <server|alias>               SSH to a server using its mapped vault
  {PROG_NAME} <server|alias> [ssh args]    SSH with extra arguments forwarded to ssh
  {PROG_NAME} scp <src> <dst>              SCP through CyberArk (use :<server>:path)
  {PROG_NAME} list                         List configured servers, aliases, and vaults
  {PROG_NAME} show <server|alias>          Show the SSH command that would be run
  {PROG_NAME} init                         Write example config to {DEFAULT_CONFIG_PATH}
  {PROG_NAME} help                         Show this help

Connection string format:
  ssh user@vault@target@cyberark_host
  ssh user@account#domain@target@cyberark_host

Config file: {DEFAULT_CONFIG_PATH}
"""

# Global options that consume the following argument
VALUE_OPTIONS = {"--config", "-c", "--user", "--port", "--log-level", "-l", "--log-file"}

# Commands whose trailing arguments are forwarded to ssh
PASSTHROUGH_COMMANDS = {"ssh", "show"}

# Create main app
app = typer.Typer(
    name=PROG_NAME,
    add_completion=False,
    help="SSH/SCP through a CyberArk PSMP proxy",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register commands directly on the main app
register_session_commands(app)
register_listing_commands(app)


def _version_callback(value: bool) -> None:
    if value:
        stdout_console.print(f"{PROG_NAME} {__version__}", markup=False)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help=f"Configuration file path (default: $CYBERARK_SSH_CONFIG or {DEFAULT_CONFIG_PATH})",
    ),
    user: Optional[str] = typer.Option(
        None,
        "--user",
        help="Override the configured CyberArk user",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        help="Override the configured PSMP port",
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    CyberArk SSH - SSH and SCP through a CyberArk PSMP proxy

    Connection strings look like user@vault@target@psmp or
    user@account#domain@target@psmp.
    """
    # Setup logging
    setup_logging(level=log_level, log_file=log_file)

    ctx.obj = CLIState(
        config_path=config_file,
        overrides={"user": user, "port": port},
    )


@app.command(name="help")
def help_run():
    """Show usage"""
    stdout_console.print(USAGE, markup=False)


def _command_names() -> List[str]:
    return [
        info.name
        for info in app.registered_commands
        if info.name is not None
    ]


def rewrite_default_invocation(args: Sequence[str]) -> List[str]:
    """
    Turn `cyberark-ssh [options] <server> [ssh args]` into the ssh command.

    Leading global options are kept in place; the first remaining token is
    treated as a server unless it is a known command or an option. For
    ssh/show an end-of-options marker follows the server so the ssh args
    reach ssh untouched.
    """
    args = list(args)
    index = 0
    while index < len(args) and args[index].startswith("-"):
        if args[index] in VALUE_OPTIONS:
            index += 1
        index += 1

    if index >= len(args):
        return args

    first = args[index]
    if first not in _command_names():
        args = args[:index] + ["ssh"] + args[index:]
    elif first not in PASSTHROUGH_COMMANDS:
        return args

    server_index = index + 1
    if server_index >= len(args) or args[server_index].startswith("-"):
        return args
    return args[:server_index + 1] + ["--"] + args[server_index + 1:]


def run(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point supporting the `cyberark-ssh <server>` shorthand"""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        stderr_console.print(USAGE, markup=False)
        sys.exit(1)

    command = get_command(app)
    try:
        code = command.main(
            args=rewrite_default_invocation(argv),
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except click.exceptions.UsageError as e:
        e.show()
        sys.exit(1)
    except click.exceptions.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.exceptions.Abort:
        stderr_console.print("Aborted!", markup=False)
        sys.exit(1)

    sys.exit(code if isinstance(code, int) else 0)


if __name__ == "__main__":
    run()
