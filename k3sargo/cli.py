import typer

from k3sargo.commands import bootstrap, password, status
from k3sargo.logging import configure_logging

app = typer.Typer(help="Bootstrap a single-node k3s cluster with Argo CD and Argo Rollouts.")

app.command("bootstrap")(bootstrap.run_bootstrap)
app.command("status")(status.show_status)
app.command("password")(password.show_password)

# Global options callback
@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """k3sargo - single-node GitOps bootstrap."""
    logger = configure_logging(debug)
    if debug:
        logger.debug("Debug mode enabled")

if __name__ == "__main__":
    app()
