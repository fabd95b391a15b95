"""Debian package prerequisites."""
import logging
from typing import Iterable, List

from k3sargo.utils import run_command, succeeds

logger = logging.getLogger("k3sargo.packages")


def is_package_installed(pkg: str) -> bool:
    return succeeds(["dpkg", "-s", pkg])


def apt_install(pkg: str) -> bool:
    """Install a package with apt unless dpkg already knows it.

    Returns:
        bool: True if an installation was performed
    """
    if is_package_installed(pkg):
        logger.info(f"✅ {pkg} already installed")
        return False

    logger.info(f"📦 Installing {pkg}")
    run_command(["sudo", "apt-get", "update", "-y"])
    run_command(["sudo", "apt-get", "install", "-y", pkg])
    return True


def ensure_packages(packages: Iterable[str]) -> List[str]:
    """Make sure every package is present. Returns the ones that were installed."""
    return [pkg for pkg in packages if apt_install(pkg)]
