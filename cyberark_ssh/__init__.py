"""
cyberark-ssh - SSH/SCP wrapper for CyberArk PSMP

Resolves a server name or alias to the PSMP connection string
(user@vault@target@psmp or user@account#domain@target@psmp) and runs ssh or
scp with it:
- Aliases expand short names to full hostnames
- Per-server vault / target account / domain, layered over global defaults
- scp remote paths written as :<server|alias>:<path>
"""

__version__ = "0.1.0"

# Export domain models and operations
from .domain import (
    Config,
    ServerEntry,
    ResolvedEntry,
    resolve_alias,
    resolve_entry,
    build_connection_string,
    assemble_ssh,
    assemble_scp,
)

# Export configuration loading
from .adapters.config.loader import load_config

__all__ = [
    # Version
    "__version__",
    # Models
    "Config",
    "ServerEntry",
    "ResolvedEntry",
    # Resolution
    "resolve_alias",
    "resolve_entry",
    "build_connection_string",
    # Commands
    "assemble_ssh",
    "assemble_scp",
    # Configuration
    "load_config",
]
