import os
from pathlib import Path

from kubernetes import config

from k3sargo.config import Config


def load_kubeconfig(path: str = None) -> str:
    """
    Load the kubeconfig from a given path, the KUBECONFIG env var or the
    user kubeconfig written during bootstrap.
    Returns the actual path used to load the kubeconfig.
    """
    path = path or os.environ.get("KUBECONFIG") or Config.KUBECONFIG_PATH
    resolved = Path(os.path.expanduser(path)).resolve()
    if not resolved.exists():
        raise FileNotFoundError(f"❌ Kubeconfig not found: {resolved}")
    config.load_kube_config(config_file=str(resolved))
    return str(resolved)
