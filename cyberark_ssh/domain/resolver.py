"""
Server entry resolution

Layers an explicit server entry over the global defaults:
explicit value, else default, else empty.
"""
from ..core.logging import get_logger
from ..core.exceptions import NoVaultConfiguredError
from .models import Config, ServerEntry, ResolvedEntry

logger = get_logger(__name__)


def first_non_empty(specific: str, fallback: str) -> str:
    """Return specific if set, otherwise fallback"""
    return specific or fallback


def resolve_entry(config: Config, server: str) -> ResolvedEntry:
    """
    Resolve the effective vault/account/domain for a server.

    Args:
        config: Loaded configuration
        server: Canonical server name (aliases already expanded)

    Returns:
        ResolvedEntry with defaults filled in

    Raises:
        NoVaultConfiguredError: If the server is unmapped and there is no
            default vault, or no vault can be determined at all
    """
    entry = config.servers.get(server)

    if entry is None:
        if not config.default_vault:
            raise NoVaultConfiguredError(
                f"server {server!r} not found in config and no default_vault set"
            )
        logger.info("server %r not in config, using defaults", server)
        entry = ServerEntry()

    resolved = ResolvedEntry(
        vault=first_non_empty(entry.vault, config.default_vault),
        account=first_non_empty(entry.account, config.default_account),
        domain=first_non_empty(entry.domain, config.default_domain),
    )

    # vault stays mandatory even when an account is set
    if not resolved.vault:
        raise NoVaultConfiguredError(
            f"no vault configured for server {server!r} and no default_vault set"
        )

    return resolved
