import typer

from k3sargo.config import Config
from k3sargo.modules.argocd import get_admin_password


def show_password(
    namespace: str = typer.Option(Config.ARGOCD_NAMESPACE, help="Argo CD namespace"),
):
    """Print the auto-generated Argo CD admin password."""
    secret = get_admin_password(namespace)
    if secret is None:
        print("❌ Admin password is not available yet")
        raise typer.Exit(code=1)
    print(secret)
