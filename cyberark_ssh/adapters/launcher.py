"""
External program launcher

On POSIX the current process is replaced by the program so it owns the
terminal. Windows has no exec, so the program is spawned with inherited
stdin/stdout/stderr and its exit code is returned.
"""
import os
import shutil
import subprocess
from typing import Optional, Sequence

from ..core.logging import get_logger
from ..core.exceptions import LauncherNotFoundError, LauncherFailureError

logger = get_logger(__name__)


def find_program(name: str) -> str:
    """
    Locate a program on PATH.

    Raises:
        LauncherNotFoundError: If the program is not found
    """
    path = shutil.which(name)
    if path is None:
        raise LauncherNotFoundError(f"{name} not found in PATH")
    return path


def launch(argv: Sequence[str], exec_mode: Optional[bool] = None) -> int:
    """
    Run argv[0] with the full argument vector.

    Args:
        argv: Argument vector, program name first
        exec_mode: Replace the current process (default: True except on Windows)

    Returns:
        Exit code of the program (spawn mode only; exec mode never returns)

    Raises:
        LauncherNotFoundError: If the program is not on PATH
        LauncherFailureError: If the program cannot be started
    """
    program = argv[0]
    path = find_program(program)

    if exec_mode is None:
        exec_mode = os.name != "nt"

    if exec_mode:
        logger.debug("exec %s", path)
        try:
            os.execv(path, list(argv))
        except OSError as e:
            raise LauncherFailureError(f"exec {program}: {e}") from e

    logger.debug("spawn %s", path)
    try:
        result = subprocess.run([path, *argv[1:]])
    except OSError as e:
        raise LauncherFailureError(f"{program}: {e}") from e
    return result.returncode
