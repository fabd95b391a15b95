"""
Data models for the bootstrap procedure.
"""
from dataclasses import dataclass, field
from typing import Tuple

from k3sargo.config import Config

DEFAULT_REPO_URL = "https://github.com/adhikarS/blue-green.git"
DEFAULT_REVISION = "main"
DEFAULT_PATH = "manifests"


@dataclass
class BootstrapParams:
    """Where the Application points. Values are used verbatim."""
    repo_url: str = DEFAULT_REPO_URL
    revision: str = DEFAULT_REVISION
    path: str = DEFAULT_PATH
    app_name: str = field(default_factory=lambda: Config.APP_NAME)


@dataclass
class Component:
    """A cluster-wide controller installed from an upstream manifest bundle."""
    name: str
    namespace: str
    manifest_url: str
    deployments: Tuple[str, ...]
    timeout: int = 300
