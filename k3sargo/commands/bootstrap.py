import logging
import subprocess
from typing import Optional

import typer

from k3sargo.modules import bootstrap as procedure
from k3sargo.modules.k3s import K3sInstallError
from k3sargo.modules.models import (
    DEFAULT_PATH, DEFAULT_REPO_URL, DEFAULT_REVISION, BootstrapParams
)

logger = logging.getLogger("k3sargo.commands.bootstrap")


def run_bootstrap(
    repo_url: str = typer.Argument(DEFAULT_REPO_URL, help="Git repository the Application tracks"),
    revision: str = typer.Argument(DEFAULT_REVISION, help="Branch, tag or commit to sync"),
    path: str = typer.Argument(DEFAULT_PATH, help="Manifest directory inside the repository"),
    settle: Optional[int] = typer.Option(None, min=0, help="Seconds to wait for the initial sync before reporting"),
):
    """Set up k3s, Argo CD and Argo Rollouts, then register the Application."""
    params = BootstrapParams(repo_url=repo_url, revision=revision, path=path)
    try:
        procedure.run(params, settle=settle)
    except (subprocess.CalledProcessError, K3sInstallError, OSError) as e:
        logger.error(f"❌ Bootstrap failed: {e}")
        raise typer.Exit(code=1)
