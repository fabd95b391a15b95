import typer

from k3sargo.config import Config
from k3sargo.modules.argocd import get_application_status


def show_status(
    app_name: str = typer.Option(Config.APP_NAME, "--app", help="Application name"),
    namespace: str = typer.Option(Config.ARGOCD_NAMESPACE, help="Argo CD namespace"),
):
    """Show sync and health status of the Application."""
    result = get_application_status(app_name, namespace)
    if result is None:
        print(f"❌ Application {app_name} not found in {namespace}")
        raise typer.Exit(code=1)
    print(f"📡 Status for application: {app_name}")
    for key in ("sync_status", "health_status", "revision"):
        print(f"  {key}: {result[key]}")
