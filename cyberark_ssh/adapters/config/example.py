"""
Example configuration file writer
"""
import os
from pathlib import Path

from ...core.constants import CONFIG_FILE_MODE
from ...core.exceptions import ConfigError


EXAMPLE_CONFIG = """\
# CyberArk SSH wrapper configuration
# =====================================
#
# user:            your CyberArk user ID
# cyberark_host:   the CyberArk PSM/PSMP proxy host
# port:            SSH port for the PSMP host (default: 22)
# default_vault:   vault/safe used when a server has no explicit mapping
# default_account: default target/privileged account (e.g. root, admin)
# default_domain:  default domain for target accounts
# ssh_args:        extra arguments passed to every ssh/scp invocation
# [aliases]:       short names that expand to full hostnames
# [servers]:       mapping of target server -> CyberArk vault/account details
#
# Connection string format:
#   ssh [-p port] user@account#domain@target@cyberark_host
#   ssh [-p port] user@vault@target@cyberark_host
#
# Servers can be specified as a simple string (vault name) or a table:
#   simple:  server_name = "vault_name"
#   full:    server_name = { vault = "vault_name", account = "root", domain = "mydomain.com" }

user = "jdoe"
cyberark_host = "psmp.example.com"
# port = 22

default_vault = "linux_test"
# default_account = "root"
# default_domain = ""

# Common SSH args for CyberArk PSMP (host keys can rotate)
ssh_args = [
    "-o", "StrictHostKeyChecking=no",
    "-o", "UserKnownHostsFile=/dev/null",
]

# Short aliases for long hostnames
[aliases]
mgr1 = "vsr-t-k8sc1mgr1"
mgr2 = "vsr-t-k8sc1mgr2"
# db = "vsr-p-db01"

# Server-to-vault mappings
[servers]
# Simple form (just vault name)
vsr-t-k8sc1mgr1 = "linux_test"
vsr-t-k8sc1mgr2 = "linux_test"

# Full form (vault + target account + domain)
# vsr-p-app01 = { vault = "prod_vault", account = "root", domain = "prod.corp.com" }
"""


def write_example_config(path: Path, force: bool = False) -> Path:
    """
    Write the commented example configuration.

    Args:
        path: Destination path
        force: Overwrite an existing file

    Returns:
        The written path

    Raises:
        ConfigError: If the file exists (and force is not set) or cannot be written
    """
    path = path.expanduser()
    if path.exists() and not force:
        raise ConfigError(
            f"config already exists at {path} — remove it first if you want to regenerate"
        )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(EXAMPLE_CONFIG, encoding='utf-8')
        os.chmod(path, CONFIG_FILE_MODE)
    except OSError as e:
        raise ConfigError(f"cannot write config: {e}") from e

    return path
