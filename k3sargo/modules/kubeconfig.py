"""Client credentials for the invoking user."""
import getpass
import logging
import os
import shutil
import time
from pathlib import Path
from typing import Optional, Union

from k3sargo.config import Config
from k3sargo.utils import run_command

logger = logging.getLogger("k3sargo.kubeconfig")

PathLike = Union[str, Path]


def current_user() -> str:
    return os.environ.get("USER") or getpass.getuser()


def needs_backup(path: PathLike, marker: str = None) -> bool:
    """An existing kubeconfig that doesn't mention the marker belongs to someone else."""
    marker = marker or Config.KUBECONFIG_MARKER
    path = Path(path)
    if not path.exists():
        return False
    try:
        return marker not in path.read_text(errors="replace")
    except OSError as e:
        logger.warning(f"⚠️  Cannot read {path}: {e}")
        return True


def backup_kubeconfig(path: PathLike, now: Optional[int] = None) -> Optional[Path]:
    """Copy the kubeconfig aside as ``<path>.backup.<epoch>``.

    Failures are logged and ignored.

    Returns:
        The backup path, or None if the copy failed
    """
    path = Path(path)
    stamp = int(now if now is not None else time.time())
    backup = path.with_name(f"{path.name}.backup.{stamp}")
    try:
        shutil.copy(path, backup)
    except OSError as e:
        logger.warning(f"⚠️  Could not back up {path}: {e}")
        return None
    logger.info(f"💾 Backed up existing kubeconfig to {backup}")
    return backup


def configure_kubeconfig(
    source: PathLike = None,
    target: PathLike = None,
    user: str = None,
) -> Path:
    """Install the k3s kubeconfig as the user's kubeconfig.

    Args:
        source: kubeconfig generated by k3s
        target: user kubeconfig to write
        user: owner of the written file

    Returns:
        Path of the written kubeconfig
    """
    source = Path(source or Config.K3S_KUBECONFIG)
    target = Path(os.path.expanduser(str(target or Config.KUBECONFIG_PATH)))
    user = user or current_user()

    logger.info(f"🔧 Configuring kubectl access in {target}")
    target.parent.mkdir(parents=True, exist_ok=True)

    if needs_backup(target):
        backup_kubeconfig(target)

    run_command(["sudo", "cp", str(source), str(target)])
    run_command(["sudo", "chown", f"{user}:{user}", str(target)])
    return target
