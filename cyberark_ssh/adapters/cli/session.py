"""
ssh / scp / show commands
"""
import typer
from typing import List, Optional

from rich.markup import escape

from ...core.constants import PROG_NAME
from ...core.exceptions import CyberArkSSHError, UsageError
from ...core.logging import get_stderr_console
from ...domain.command import assemble_ssh, assemble_scp, format_command
from ..launcher import launch
from .common import load_cli_config, fail

stderr_console = get_stderr_console()

PASSTHROUGH_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}

SCP_USAGE = f"""usage: {PROG_NAME} scp <src> <dst>
  remote paths use :<server|alias>:<path> format
  example: {PROG_NAME} scp file.txt :mgr1:/tmp/file.txt"""


def register_session_commands(app: typer.Typer) -> None:
    """Register ssh, show and scp commands on the main app"""
    app.command(name="ssh", context_settings=PASSTHROUGH_SETTINGS)(ssh_run)
    app.command(name="show", context_settings=PASSTHROUGH_SETTINGS)(show_run)
    app.command(name="scp", context_settings=PASSTHROUGH_SETTINGS)(scp_run)


def _announce(argv: List[str]) -> None:
    stderr_console.print(f"→ {format_command(argv)}", markup=False)


def _execute(argv: List[str]) -> None:
    """Launch argv and exit with the program's status"""
    try:
        code = launch(argv)
    except CyberArkSSHError as e:
        fail(str(e))
    raise typer.Exit(code)


def _session(ctx: typer.Context, server: str, ssh_args: Optional[List[str]], dry_run: bool) -> None:
    try:
        config = load_cli_config(ctx)
        argv = assemble_ssh(config, server, ssh_args or [])
    except CyberArkSSHError as e:
        fail(str(e))

    _announce(argv)

    if dry_run:
        return
    _execute(argv)


def ssh_run(
    ctx: typer.Context,
    server: str = typer.Argument(..., help="Server name or alias"),
    ssh_args: Optional[List[str]] = typer.Argument(None, help="Extra arguments forwarded to ssh"),
):
    """
    SSH to a server through CyberArk PSMP

    Examples:
        cyberark-ssh mgr1
        cyberark-ssh ssh mgr1 -L 8080:localhost:80
    """
    _session(ctx, server, ssh_args, dry_run=False)


def show_run(
    ctx: typer.Context,
    server: str = typer.Argument(..., help="Server name or alias"),
    ssh_args: Optional[List[str]] = typer.Argument(None, help="Extra arguments forwarded to ssh"),
):
    """
    Show the SSH command that would be run

    Examples:
        cyberark-ssh show mgr1
    """
    _session(ctx, server, ssh_args, dry_run=True)


def scp_run(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(None, help="Source(s) and destination; remote paths use :<server|alias>:<path>"),
):
    """
    SCP through CyberArk PSMP

    Examples:
        cyberark-ssh scp file.txt :mgr1:/tmp/file.txt
        cyberark-ssh scp :mgr1:/var/log/app.log ./app.log
    """
    try:
        config = load_cli_config(ctx)
        argv = assemble_scp(config, paths or [])
    except UsageError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}")
        stderr_console.print(SCP_USAGE, markup=False)
        raise typer.Exit(1)
    except CyberArkSSHError as e:
        fail(str(e))

    _announce(argv)
    _execute(argv)
