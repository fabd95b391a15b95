"""k3s single-node runtime: install, liveness and node readiness."""
import logging

import requests

from k3sargo.config import Config
from k3sargo.utils import run_command, succeeds

logger = logging.getLogger("k3sargo.k3s")


class K3sInstallError(RuntimeError):
    """Raised when the k3s installer script cannot be fetched."""


def is_k3s_active() -> bool:
    return succeeds(["systemctl", "is-active", "--quiet", "k3s"])


def fetch_installer(url: str = None) -> str:
    """Download the upstream k3s installer script.

    Raises:
        K3sInstallError: If the script cannot be downloaded
    """
    url = url or Config.K3S_INSTALL_URL
    logger.debug(f"⬇️  Fetching k3s installer from {url}")
    try:
        response = requests.get(url, timeout=Config.HTTP_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        raise K3sInstallError(f"Failed to download k3s installer from {url}: {e}") from e
    return response.text


def install_k3s(url: str = None) -> None:
    """Run the upstream installer script through sh."""
    script = fetch_installer(url)
    logger.info("📦 Installing k3s...")
    run_command(["sh", "-"], input=script)
    logger.info("✅ k3s installed")


def ensure_k3s(url: str = None) -> bool:
    """Install k3s unless the service is already running.

    Returns:
        bool: True if the installer was run
    """
    if is_k3s_active():
        logger.info("✅ k3s is already running")
        return False
    install_k3s(url)
    return True


def wait_for_node_ready(timeout: int = None) -> bool:
    """Wait for every node to report Ready, then list the nodes.

    A timeout here is not fatal; listing the nodes afterwards is.

    Returns:
        bool: True if the nodes became Ready within the timeout
    """
    timeout = timeout if timeout is not None else Config.NODE_READY_TIMEOUT
    logger.info("⏳ Waiting for node to be Ready...")
    result = run_command(
        ["kubectl", "wait", "node", "--all", "--for=condition=Ready", f"--timeout={timeout}s"],
        check=False,
    )
    ready = result.returncode == 0
    if not ready:
        logger.warning(f"⚠️  Node not Ready after {timeout}s, continuing anyway")

    run_command(["kubectl", "get", "nodes", "-o", "wide"])
    return ready
