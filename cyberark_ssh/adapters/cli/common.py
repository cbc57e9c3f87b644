"""
Shared CLI state and helpers
"""
import typer
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, NoReturn

from rich.markup import escape

from ...core.logging import get_stderr_console
from ...domain.models import Config
from ..config.loader import load_config

stderr_console = get_stderr_console()


@dataclass
class CLIState:
    """Options collected by the main callback"""
    config_path: Optional[Path] = None
    overrides: Dict[str, Any] = field(default_factory=dict)


def get_state(ctx: typer.Context) -> CLIState:
    """Return the CLI state, creating an empty one if the callback did not run"""
    if not isinstance(ctx.obj, CLIState):
        ctx.obj = CLIState()
    return ctx.obj


def load_cli_config(ctx: typer.Context) -> Config:
    """Load configuration using the --config path and CLI overrides"""
    state = get_state(ctx)
    return load_config(state.config_path, cli_overrides=state.overrides)


def fail(message: str, code: int = 1) -> NoReturn:
    """Print an error once and exit"""
    stderr_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code)
