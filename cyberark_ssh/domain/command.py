"""
ssh / scp command assembly

Both commands share one layout:
    [program] + [port flag] + ssh_args + payload
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import (
    DEFAULT_SSH_PORT,
    SSH_PROGRAM,
    SCP_PROGRAM,
    SSH_PORT_FLAG,
    SCP_PORT_FLAG,
    REMOTE_PATH_PREFIX,
)
from ..core.exceptions import UsageError
from .aliases import resolve_alias
from .connection import build_connection_string
from .models import Config
from .resolver import resolve_entry


@dataclass(frozen=True)
class RemotePath:
    """Parsed :<server>:<path> argument"""
    original: str
    target: str
    path: str


def parse_remote_path(token: str) -> Optional[RemotePath]:
    """
    Parse an scp path argument.

    Rules:
    - ":server:path" or ":alias:path" → remote path
    - anything else → local path (None)

    Raises:
        UsageError: If a remote token lacks the second ':'
    """
    if not token.startswith(REMOTE_PATH_PREFIX):
        return None

    parts = token[len(REMOTE_PATH_PREFIX):].split(REMOTE_PATH_PREFIX, 1)
    if len(parts) != 2:
        raise UsageError(f"invalid remote path {token!r} — use :<server>:<path>")

    return RemotePath(original=token, target=parts[0], path=parts[1])


def connection_string_for(config: Config, name: str) -> str:
    """Expand alias, resolve entry and build the connection string for a server"""
    server = resolve_alias(config.aliases, name)
    entry = resolve_entry(config, server)
    return build_connection_string(config.user, entry, server, config.cyberark_host)


def _base_command(config: Config, program: str, port_flag: str) -> List[str]:
    argv = [program]
    if config.port and config.port != DEFAULT_SSH_PORT:
        argv.extend([port_flag, str(config.port)])
    argv.extend(config.ssh_args)
    return argv


def assemble_ssh(config: Config, server: str, passthrough: Sequence[str] = ()) -> List[str]:
    """
    Build the ssh argument vector for an interactive session.

    Args:
        config: Loaded configuration
        server: Server name or alias
        passthrough: Extra arguments forwarded to ssh

    Returns:
        Full argv, program name first

    Raises:
        NoVaultConfiguredError: If the server cannot be resolved
    """
    conn_str = connection_string_for(config, server)

    argv = _base_command(config, SSH_PROGRAM, SSH_PORT_FLAG)
    argv.extend(passthrough)
    argv.append(conn_str)
    return argv


def assemble_scp(config: Config, paths: Sequence[str]) -> List[str]:
    """
    Build the scp argument vector.

    Remote paths use the form :<server|alias>:<path> and are rewritten to
    <connection string>:<path>; local paths pass through untouched.

    Raises:
        UsageError: On fewer than two paths or a malformed remote path
        NoVaultConfiguredError: If a remote server cannot be resolved
    """
    if len(paths) < 2:
        raise UsageError("scp requires source and destination")

    argv = _base_command(config, SCP_PROGRAM, SCP_PORT_FLAG)

    for token in paths:
        remote = parse_remote_path(token)
        if remote is None:
            argv.append(token)
            continue
        conn_str = connection_string_for(config, remote.target)
        argv.append(f"{conn_str}:{remote.path}")

    return argv


def format_command(argv: Sequence[str]) -> str:
    """Space-joined command line, as shown before execution"""
    return " ".join(argv)
