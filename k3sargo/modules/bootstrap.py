"""The end-to-end bootstrap: k3s, Argo CD, Argo Rollouts and one Application."""
import logging
import time

from k3sargo.config import Config
from .application import apply_application
from .argocd import get_admin_password, get_application_status, install_argocd
from .k3s import ensure_k3s, wait_for_node_ready
from .kubeconfig import configure_kubeconfig
from .models import BootstrapParams
from .packages import ensure_packages
from .rollouts import install_rollouts

logger = logging.getLogger("k3sargo.bootstrap")

PASSWORD_PLACEHOLDER = "<could-not-read-yet>"

NEXT_STEPS = """\
Done!

Next steps:
1) Argo CD UI:
   kubectl port-forward svc/argocd-server -n {namespace} 8080:443
   # Open https://localhost:8080 (ignore warning)
   # Username: admin | Password: printed above

2) App access (active service):
   kubectl port-forward svc/{app}-service 8081:80
   # http://localhost:8081 should show "Version 1 - Blue"

3) Preview (after switching to Rollouts):
   kubectl port-forward svc/{app}-preview 8082:80

If you change the repo URL/path, re-run this script with new values or edit the Application in Argo CD.
"""


def next_steps(params: BootstrapParams) -> str:
    return NEXT_STEPS.format(namespace=Config.ARGOCD_NAMESPACE, app=params.app_name)


def report(params: BootstrapParams, settle: int = None) -> None:
    """Give the first sync a moment, then print status, password and next steps.

    Nothing in here can fail the bootstrap.
    """
    settle = settle if settle is not None else Config.SYNC_SETTLE_SECONDS
    logger.info(f"⏳ Waiting {settle}s for initial sync...")
    time.sleep(settle)

    status = get_application_status(params.app_name)
    if status:
        logger.info(
            f"📡 {status['app']}: sync={status['sync_status']} "
            f"health={status['health_status']} revision={status['revision']}"
        )

    password = get_admin_password()
    print("Argo CD admin password:")
    print(password or PASSWORD_PLACEHOLDER)
    print()
    print(next_steps(params))


def run(params: BootstrapParams = None, settle: int = None) -> None:
    """Run every bootstrap step in order.

    Raises:
        subprocess.CalledProcessError: If a fatal step fails
        K3sInstallError: If the k3s installer cannot be downloaded
    """
    params = params or BootstrapParams()
    logger.info(f"🔧 Using repo: {params.repo_url} rev: {params.revision} path: {params.path}")

    logger.info("📋 Ensuring prerequisites")
    ensure_packages(Config.PREREQUISITE_PACKAGES)

    logger.info("📋 Installing k3s if missing")
    ensure_k3s()

    configure_kubeconfig()
    wait_for_node_ready()

    install_argocd()
    install_rollouts()

    apply_application(params)

    report(params, settle)
    logger.info("🎉 Bootstrap complete.")
