"""Utility functions and helpers for the k3sargo application."""
import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger("k3sargo.utils")


def run_command(
    cmd: List[str],
    *,
    check: bool = True,
    capture_output: bool = False,
    input: Optional[str] = None,
) -> subprocess.CompletedProcess:
    """Run an external command and return the completed process.

    Args:
        cmd: Command and arguments
        check: Raise CalledProcessError on a non-zero exit
        capture_output: Capture stdout/stderr instead of inheriting them
        input: Text fed to the command's stdin

    Returns:
        The CompletedProcess of the command

    Raises:
        subprocess.CalledProcessError: If check is set and the command fails
    """
    cmd_str = ' '.join(cmd)
    logger.debug(f"💻 Running: {cmd_str}")
    try:
        result = subprocess.run(
            cmd,
            check=check,
            text=True,
            input=input,
            stdout=subprocess.PIPE if capture_output else None,
            stderr=subprocess.PIPE if capture_output else None,
        )
        if capture_output:
            logger.debug(f"🟢 Output:\n{result.stdout}")
        return result
    except subprocess.CalledProcessError as e:
        msg = f"❌ Command failed: {cmd_str} (exit code: {e.returncode})"
        if capture_output:
            msg += f"\nStdout:\n{e.stdout}\nStderr:\n{e.stderr}"
        logger.error(msg)
        raise


def succeeds(cmd: List[str]) -> bool:
    """Return True when the command exits zero, with its output silenced.

    A missing binary counts as failure, like a shell exit status of 127.
    """
    try:
        return run_command(cmd, check=False, capture_output=True).returncode == 0
    except OSError as e:
        logger.debug(f"Cannot run {cmd[0]}: {e}")
        return False
