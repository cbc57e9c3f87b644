"""
Project constants definitions
"""

# ============================================================
# Program
# ============================================================

PROG_NAME = "cyberark-ssh"

# ============================================================
# Configuration File
# ============================================================

DEFAULT_CONFIG_PATH = "~/.cyberark-ssh.toml"
CONFIG_FILE_MODE = 0o600
ENV_PREFIX = "CYBERARK_SSH_"
CONFIG_PATH_ENV = ENV_PREFIX + "CONFIG"

# ============================================================
# Default Values
# ============================================================

DEFAULT_SSH_PORT = 22
DEFAULT_LOG_LEVEL = "INFO"

# ============================================================
# External Programs
# ============================================================

SSH_PROGRAM = "ssh"
SCP_PROGRAM = "scp"
SSH_PORT_FLAG = "-p"
SCP_PORT_FLAG = "-P"

# ============================================================
# Connection String
# ============================================================

SEGMENT_SEPARATOR = "@"
DOMAIN_SEPARATOR = "#"
REMOTE_PATH_PREFIX = ":"
