import subprocess
from unittest import mock

import pytest

from k3sargo.modules import controllers
from k3sargo.modules.argocd import ARGOCD
from k3sargo.modules.models import Component
from k3sargo.modules.rollouts import ROLLOUTS


def test_existing_namespace_is_not_recreated():
    with mock.patch.object(controllers, "succeeds", return_value=True), \
            mock.patch.object(controllers, "run_command") as run_command:
        assert controllers.ensure_namespace("argocd") is False
    run_command.assert_not_called()


def test_missing_namespace_is_created():
    with mock.patch.object(controllers, "succeeds", return_value=False), \
            mock.patch.object(controllers, "run_command") as run_command:
        assert controllers.ensure_namespace("argocd") is True
    run_command.assert_called_once_with(["kubectl", "create", "namespace", "argocd"])


def test_argocd_install_waits_for_three_deployments():
    with mock.patch.object(controllers, "succeeds", return_value=True), \
            mock.patch.object(controllers, "run_command") as run_command:
        controllers.install_component(ARGOCD)

    assert run_command.call_args_list == [
        mock.call(["kubectl", "apply", "-n", "argocd", "-f",
                   "https://raw.githubusercontent.com/argoproj/argo-cd/stable/manifests/install.yaml"]),
        mock.call(["kubectl", "-n", "argocd", "rollout", "status",
                   "deploy/argocd-repo-server", "--timeout=300s"]),
        mock.call(["kubectl", "-n", "argocd", "rollout", "status",
                   "deploy/argocd-server", "--timeout=300s"]),
        mock.call(["kubectl", "-n", "argocd", "rollout", "status",
                   "deploy/argocd-application-controller", "--timeout=300s"]),
    ]


def test_rollouts_component():
    assert ROLLOUTS.namespace == "argo-rollouts"
    assert ROLLOUTS.deployments == ("argo-rollouts",)
    assert ROLLOUTS.manifest_url.endswith("/releases/latest/download/install.yaml")


def test_rollout_timeout_stops_the_install():
    component = Component(
        name="demo", namespace="demo", manifest_url="https://example.com/x.yaml",
        deployments=("first", "second"), timeout=10,
    )
    error = subprocess.CalledProcessError(1, ["kubectl", "rollout", "status"])
    with mock.patch.object(controllers, "succeeds", return_value=True), \
            mock.patch.object(controllers, "run_command", side_effect=[None, error]) as run_command:
        with pytest.raises(subprocess.CalledProcessError):
            controllers.install_component(component)

    # apply + first wait; the second deployment is never waited on
    assert run_command.call_count == 2
