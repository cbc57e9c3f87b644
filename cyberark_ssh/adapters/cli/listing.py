"""
list / init commands
"""
import typer

from rich.markup import escape
from rich.table import Table

from ...core.exceptions import CyberArkSSHError
from ...core.logging import get_stdout_console
from ...domain.models import Config
from ..config.example import write_example_config
from ..config.loader import resolve_config_path
from .common import get_state, load_cli_config, fail

stdout_console = get_stdout_console()

DEFAULT_MARK = " (default)"


def register_listing_commands(app: typer.Typer) -> None:
    """Register list and init commands on the main app"""
    app.command(name="list")(list_run)
    app.command(name="ls", hidden=True)(list_run)
    app.command(name="init")(init_run)


def _value_or_none(value: str) -> str:
    return value or "(none)"


def _with_default(value: str, default: str, empty: str = "-") -> str:
    """Explicit value, else annotated default, else placeholder"""
    if value:
        return value
    if default:
        return default + DEFAULT_MARK
    return empty


def alias_table(config: Config) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ALIAS", style="cyan", overflow="fold")
    table.add_column("EXPANDS TO", style="green", overflow="fold")
    for alias in sorted(config.aliases):
        table.add_row(escape(alias), escape(config.aliases[alias]))
    return table


def server_table(config: Config) -> Table:
    """Servers with their effective vault/account/domain"""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("SERVER", style="cyan", overflow="fold")
    table.add_column("VAULT", style="green", overflow="fold")
    table.add_column("ACCOUNT", style="yellow", overflow="fold")
    table.add_column("DOMAIN", style="magenta", overflow="fold")
    for server in sorted(config.servers):
        entry = config.servers[server]
        cells = (
            server,
            # an empty default vault still shows as "(default)"
            entry.vault or config.default_vault + DEFAULT_MARK,
            _with_default(entry.account, config.default_account),
            _with_default(entry.domain, config.default_domain),
        )
        table.add_row(*(escape(cell) for cell in cells))
    return table


def print_settings(config: Config) -> None:
    """Print the global settings block"""
    lines = [
        f"default vault:   {_value_or_none(config.default_vault)}",
        f"default account: {_value_or_none(config.default_account)}",
        f"default domain:  {_value_or_none(config.default_domain)}",
        f"cyberark host:   {config.cyberark_host}",
        f"port:            {config.effective_port}",
        f"user:            {config.user}",
    ]
    if config.ssh_args:
        lines.append(f"ssh_args:        {' '.join(config.ssh_args)}")
    stdout_console.print("\n".join(lines), markup=False)


def list_run(ctx: typer.Context):
    """
    List configured servers, aliases, and vaults

    Examples:
        cyberark-ssh list
    """
    try:
        config = load_cli_config(ctx)
    except CyberArkSSHError as e:
        fail(str(e))

    if config.aliases:
        stdout_console.print(alias_table(config))
        stdout_console.print()

    if config.servers:
        stdout_console.print(server_table(config))
    else:
        stdout_console.print(f"no servers configured — edit {config.source}", markup=False)

    stdout_console.print()
    print_settings(config)


def init_run(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
):
    """
    Write an example config file

    Examples:
        cyberark-ssh init
        cyberark-ssh --config ./pam.toml init
    """
    try:
        written = write_example_config(resolve_config_path(get_state(ctx).config_path), force=force)
    except CyberArkSSHError as e:
        fail(str(e))

    stdout_console.print(
        f"[green]✓[/green] Wrote example config to [cyan]{escape(str(written))}[/cyan] — edit it with your servers and vaults"
    )
