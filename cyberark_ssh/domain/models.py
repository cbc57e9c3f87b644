"""
Configuration domain models
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List

from ..core.constants import DEFAULT_SSH_PORT
from ..core.exceptions import ConfigInvalidError


@dataclass
class ServerEntry:
    """Per-server CyberArk connection details"""
    vault: str = ""
    account: str = ""  # target/privileged account (e.g. root, admin)
    domain: str = ""   # optional domain for the target account

    @classmethod
    def parse(cls, name: str, raw: Any) -> "ServerEntry":
        """
        Parse a server entry from its configuration form.

        A bare string is the vault name; a table may carry vault, account
        and domain.

        Args:
            name: Server identifier (used in error messages)
            raw: Raw value from the configuration file

        Returns:
            ServerEntry instance

        Raises:
            ConfigInvalidError: If the value is neither a string nor a table
        """
        if isinstance(raw, str):
            return cls(vault=raw)

        if isinstance(raw, dict):
            values = {}
            for key in ("vault", "account", "domain"):
                value = raw.get(key, "")
                if not isinstance(value, str):
                    raise ConfigInvalidError(f"server {name!r}: {key!r} must be a string")
                values[key] = value
            return cls(**values)

        raise ConfigInvalidError(
            f"server {name!r}: expected a vault name or a table with vault/account/domain"
        )


@dataclass(frozen=True)
class ResolvedEntry:
    """Server entry with all defaults filled in"""
    vault: str = ""
    account: str = ""
    domain: str = ""


@dataclass
class Config:
    """CyberArk SSH wrapper configuration"""
    user: str
    cyberark_host: str
    port: int = DEFAULT_SSH_PORT
    default_vault: str = ""
    default_account: str = ""
    default_domain: str = ""
    servers: Dict[str, ServerEntry] = field(default_factory=dict)
    aliases: Dict[str, str] = field(default_factory=dict)
    ssh_args: List[str] = field(default_factory=list)
    source: Optional[Path] = None

    @property
    def effective_port(self) -> int:
        """Port with 0 treated as the SSH default"""
        return self.port or DEFAULT_SSH_PORT

    def validate(self) -> None:
        """Validate configuration"""
        if not self.user:
            raise ConfigInvalidError("config: 'user' is required")
        if not self.cyberark_host:
            raise ConfigInvalidError("config: 'cyberark_host' is required")
        if not (0 <= self.port <= 65535):
            raise ConfigInvalidError(f"config: invalid port: {self.port}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> "Config":
        """
        Create from a parsed configuration dictionary.

        Raises:
            ConfigInvalidError: If a field has the wrong type or a required
                field is missing
        """
        scalars = {}
        for key in ("user", "cyberark_host", "default_vault", "default_account", "default_domain"):
            value = data.get(key, "")
            if not isinstance(value, str):
                raise ConfigInvalidError(f"config: {key!r} must be a string")
            scalars[key] = value

        port = data.get("port", DEFAULT_SSH_PORT)
        if isinstance(port, bool) or not isinstance(port, int):
            raise ConfigInvalidError("config: 'port' must be an integer")

        ssh_args = data.get("ssh_args", [])
        if not isinstance(ssh_args, list) or not all(isinstance(a, str) for a in ssh_args):
            raise ConfigInvalidError("config: 'ssh_args' must be a list of strings")

        aliases = data.get("aliases", {})
        if not isinstance(aliases, dict) or not all(isinstance(v, str) for v in aliases.values()):
            raise ConfigInvalidError("config: 'aliases' must map names to server names")

        servers_raw = data.get("servers", {})
        if not isinstance(servers_raw, dict):
            raise ConfigInvalidError("config: 'servers' must be a table")
        servers = {
            name: ServerEntry.parse(name, raw)
            for name, raw in servers_raw.items()
        }

        config = cls(
            port=port,
            servers=servers,
            aliases=dict(aliases),
            ssh_args=list(ssh_args),
            source=source,
            **scalars,
        )
        config.validate()
        return config
