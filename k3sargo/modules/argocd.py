"""Argo CD: installation and read-only queries against a running instance."""
import base64
import binascii
import logging
from typing import Any, Dict, Optional

from kubernetes import client
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from k3sargo.config import Config
from k3sargo.utils.kube import load_kubeconfig
from .controllers import install_component
from .models import Component

logger = logging.getLogger("k3sargo.argocd")

ARGOCD = Component(
    name="Argo CD",
    namespace=Config.ARGOCD_NAMESPACE,
    manifest_url=Config.ARGOCD_MANIFEST_URL,
    deployments=(
        "argocd-repo-server",
        "argocd-server",
        "argocd-application-controller",
    ),
    timeout=Config.ROLLOUT_TIMEOUT,
)

ADMIN_SECRET = "argocd-initial-admin-secret"

# Failures that make a read-only query come back empty instead of aborting
QUERY_ERRORS = (ApiException, ConfigException, FileNotFoundError, HTTPError)


def install_argocd(component: Component = ARGOCD) -> None:
    install_component(component)


def get_application_status(app_name: str, namespace: str = None) -> Optional[Dict[str, Any]]:
    """Read sync and health status of an Argo CD Application.

    Returns:
        Status dict, or None if the Application could not be read
    """
    namespace = namespace or Config.ARGOCD_NAMESPACE
    try:
        load_kubeconfig()
        api = client.CustomObjectsApi()
        app = api.get_namespaced_custom_object(
            group="argoproj.io",
            version="v1alpha1",
            namespace=namespace,
            plural="applications",
            name=app_name
        )
    except QUERY_ERRORS as e:
        logger.warning(f"⚠️  Could not read application {app_name}: {e}")
        return None

    status = app.get("status", {})
    return {
        "app": app_name,
        "sync_status": status.get("sync", {}).get("status", "unknown"),
        "health_status": status.get("health", {}).get("status", "unknown"),
        "revision": status.get("sync", {}).get("revision", "unknown")
    }


def get_admin_password(namespace: str = None) -> Optional[str]:
    """Decode the auto-generated admin password, or None if not readable yet."""
    namespace = namespace or Config.ARGOCD_NAMESPACE
    try:
        load_kubeconfig()
        secret = client.CoreV1Api().read_namespaced_secret(ADMIN_SECRET, namespace)
    except QUERY_ERRORS as e:
        logger.debug(f"Admin secret not readable: {e}")
        return None

    encoded = (secret.data or {}).get("password")
    if not encoded:
        return None
    try:
        return base64.b64decode(encoded).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.debug(f"Admin password is not valid base64: {e}")
        return None
