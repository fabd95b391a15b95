"""The Argo CD Application that hands the repository over to GitOps."""
import logging
from typing import Any, Dict

import yaml

from k3sargo.config import Config
from k3sargo.utils import run_command
from .models import BootstrapParams

logger = logging.getLogger("k3sargo.application")

DESTINATION_SERVER = "https://kubernetes.default.svc"
DESTINATION_NAMESPACE = "default"


def build_application(params: BootstrapParams, namespace: str = None) -> Dict[str, Any]:
    """Build the Application resource.

    The source fields are copied from params without any transformation.
    """
    namespace = namespace or Config.ARGOCD_NAMESPACE
    return {
        "apiVersion": "argoproj.io/v1alpha1",
        "kind": "Application",
        "metadata": {
            "name": params.app_name,
            "namespace": namespace,
        },
        "spec": {
            "project": "default",
            "source": {
                "repoURL": params.repo_url,
                "targetRevision": params.revision,
                "path": params.path,
            },
            "destination": {
                "server": DESTINATION_SERVER,
                "namespace": DESTINATION_NAMESPACE,
            },
            "syncPolicy": {
                "automated": {
                    "prune": True,
                    "selfHeal": True,
                },
                "syncOptions": ["CreateNamespace=true"],
            },
        },
    }


def render_application(params: BootstrapParams, namespace: str = None) -> str:
    return yaml.safe_dump(
        build_application(params, namespace),
        default_flow_style=False,
        sort_keys=False,
    )


def apply_application(params: BootstrapParams, namespace: str = None) -> None:
    """Submit the Application through kubectl."""
    namespace = namespace or Config.ARGOCD_NAMESPACE
    logger.info(f"🔄 Creating Argo CD Application {params.app_name} for {params.repo_url}")
    run_command(
        ["kubectl", "apply", "-n", namespace, "-f", "-"],
        input=render_application(params, namespace),
    )
    logger.info("✅ Application configured.")
