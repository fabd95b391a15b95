"""Installing cluster-wide controllers from upstream manifest bundles."""
import logging

from k3sargo.utils import run_command, succeeds
from .models import Component

logger = logging.getLogger("k3sargo.controllers")


def ensure_namespace(namespace: str) -> bool:
    """Create the namespace unless it already exists.

    Returns:
        bool: True if the namespace was created
    """
    if succeeds(["kubectl", "get", "ns", namespace]):
        return False
    run_command(["kubectl", "create", "namespace", namespace])
    return True


def apply_remote_manifest(namespace: str, url: str) -> None:
    logger.info(f"📄 Applying {url} to namespace {namespace}")
    run_command(["kubectl", "apply", "-n", namespace, "-f", url])


def wait_for_rollout(namespace: str, deployment: str, timeout: int) -> None:
    """Block until the deployment is available. A timeout is fatal."""
    run_command([
        "kubectl", "-n", namespace, "rollout", "status",
        f"deploy/{deployment}", f"--timeout={timeout}s"
    ])


def install_component(component: Component) -> None:
    """Install a controller and wait for all of its deployments.

    Raises:
        subprocess.CalledProcessError: If any step fails or a deployment
            is not available within the component timeout
    """
    logger.info(f"🚀 Installing {component.name}...")
    ensure_namespace(component.namespace)
    apply_remote_manifest(component.namespace, component.manifest_url)

    logger.info(f"⏳ Waiting for {component.name} deployments to be Available...")
    for deployment in component.deployments:
        wait_for_rollout(component.namespace, deployment, component.timeout)
    logger.info(f"✅ {component.name} is available.")
