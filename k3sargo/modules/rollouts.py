"""Argo Rollouts progressive-delivery controller."""
from k3sargo.config import Config
from .controllers import install_component
from .models import Component

ROLLOUTS = Component(
    name="Argo Rollouts",
    namespace=Config.ROLLOUTS_NAMESPACE,
    manifest_url=Config.ROLLOUTS_MANIFEST_URL,
    deployments=("argo-rollouts",),
    timeout=Config.ROLLOUT_TIMEOUT,
)


def install_rollouts(component: Component = ROLLOUTS) -> None:
    install_component(component)
