"""Single-node k3s bootstrap with Argo CD and Argo Rollouts."""
__version__ = "0.1.0"
