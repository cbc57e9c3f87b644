"""
CyberArk PSMP connection string builder

Formats supported by CyberArk PSMP:
    user@vault@target@PSMPhost                 (basic)
    user@account@target@PSMPhost               (with target account)
    user@account#domain@target@PSMPhost        (with domain)
"""
from ..core.constants import SEGMENT_SEPARATOR, DOMAIN_SEPARATOR
from .models import ResolvedEntry


def middle_segment(entry: ResolvedEntry) -> str:
    """Target account (with optional domain) if set, otherwise the vault"""
    if entry.account:
        if entry.domain:
            return f"{entry.account}{DOMAIN_SEPARATOR}{entry.domain}"
        return entry.account
    return entry.vault


def build_connection_string(user: str, entry: ResolvedEntry, server: str, proxy_host: str) -> str:
    """
    Build the PSMP connection string.

    No escaping is done: identifiers must not contain '@' or '#'.
    """
    return SEGMENT_SEPARATOR.join((user, middle_segment(entry), server, proxy_host))
