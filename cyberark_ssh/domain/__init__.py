"""
Resolution domain: configuration model, alias expansion, entry resolution,
connection strings and command assembly
"""
from .models import Config, ServerEntry, ResolvedEntry
from .aliases import resolve_alias
from .resolver import resolve_entry, first_non_empty
from .connection import build_connection_string, middle_segment
from .command import (
    RemotePath,
    parse_remote_path,
    connection_string_for,
    assemble_ssh,
    assemble_scp,
    format_command,
)

__all__ = [
    "Config",
    "ServerEntry",
    "ResolvedEntry",
    "resolve_alias",
    "resolve_entry",
    "first_non_empty",
    "build_connection_string",
    "middle_segment",
    "RemotePath",
    "parse_remote_path",
    "connection_string_for",
    "assemble_ssh",
    "assemble_scp",
    "format_command",
]
