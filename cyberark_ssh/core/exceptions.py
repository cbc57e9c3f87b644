"""
Unified exception definitions
"""


class CyberArkSSHError(Exception):
    """Base exception class"""
    pass


class ConfigError(CyberArkSSHError):
    """Configuration error"""
    pass


class ConfigMissingError(ConfigError):
    """Configuration file does not exist"""
    pass


class ConfigInvalidError(ConfigError):
    """Configuration file cannot be parsed or lacks a required field"""
    pass


class ResolutionError(CyberArkSSHError):
    """Server cannot be resolved to a connection string"""
    pass


class NoVaultConfiguredError(ResolutionError):
    """No explicit mapping and no usable default vault"""
    pass


class UsageError(CyberArkSSHError):
    """Malformed command line"""
    pass


class LauncherError(CyberArkSSHError):
    """External program error"""
    pass


class LauncherNotFoundError(LauncherError):
    """External program is not on PATH"""
    pass


class LauncherFailureError(LauncherError):
    """External program could not be started"""
    pass
