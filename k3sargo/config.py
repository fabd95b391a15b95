"""Configuration management for the k3sargo application."""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    """Application configuration with sensible defaults."""

    # Upstream installers
    K3S_INSTALL_URL: str = os.getenv("K3S_INSTALL_URL", "https://get.k3s.io")
    ARGOCD_MANIFEST_URL: str = os.getenv(
        "ARGOCD_MANIFEST_URL",
        "https://raw.githubusercontent.com/argoproj/argo-cd/stable/manifests/install.yaml",
    )
    ROLLOUTS_MANIFEST_URL: str = os.getenv(
        "ROLLOUTS_MANIFEST_URL",
        "https://github.com/argoproj/argo-rollouts/releases/latest/download/install.yaml",
    )

    # Prerequisites installed through apt
    PREREQUISITE_PACKAGES: Tuple[str, ...] = tuple(
        os.getenv("PREREQUISITE_PACKAGES", "curl git").split()
    )

    # Kubeconfig locations
    K3S_KUBECONFIG: str = os.getenv("K3S_KUBECONFIG", "/etc/rancher/k3s/k3s.yaml")
    KUBECONFIG_PATH: str = os.getenv(
        "KUBECONFIG_PATH", str(Path.home() / ".kube" / "config")
    )
    KUBECONFIG_MARKER: str = os.getenv("KUBECONFIG_MARKER", "k3s")

    # Namespaces and names
    ARGOCD_NAMESPACE: str = os.getenv("ARGOCD_NAMESPACE", "argocd")
    ROLLOUTS_NAMESPACE: str = os.getenv("ROLLOUTS_NAMESPACE", "argo-rollouts")
    APP_NAME: str = os.getenv("APP_NAME", "my-app")

    # Timeouts (in seconds)
    NODE_READY_TIMEOUT: int = int(os.getenv("NODE_READY_TIMEOUT", "180"))
    ROLLOUT_TIMEOUT: int = int(os.getenv("ROLLOUT_TIMEOUT", "300"))
    SYNC_SETTLE_SECONDS: int = int(os.getenv("SYNC_SETTLE_SECONDS", "15"))
    HTTP_TIMEOUT: int = int(os.getenv("HTTP_TIMEOUT", "60"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
