"""
Alias expansion
"""
from typing import Mapping


def resolve_alias(aliases: Mapping[str, str], name: str) -> str:
    """
    Expand a short alias to its full server name.

    Expansion is a single lookup; an alias pointing at another alias is not
    followed. Unknown names are returned unchanged.

    Examples:
        resolve_alias({"mgr1": "vsr-t-k8sc1mgr1"}, "mgr1") -> "vsr-t-k8sc1mgr1"
        resolve_alias({"mgr1": "vsr-t-k8sc1mgr1"}, "db01") -> "db01"
    """
    return aliases.get(name, name)
