import subprocess
from unittest import mock

from typer.testing import CliRunner

from k3sargo.cli import app
from k3sargo.commands import bootstrap as bootstrap_cmd
from k3sargo.commands import password as password_cmd
from k3sargo.commands import status as status_cmd
from k3sargo.modules.models import BootstrapParams

runner = CliRunner()


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "bootstrap" in result.stdout
    assert "status" in result.stdout
    assert "password" in result.stdout


def test_bootstrap_without_arguments_uses_defaults():
    with mock.patch.object(bootstrap_cmd.procedure, "run") as run:
        result = runner.invoke(app, ["bootstrap"])
    assert result.exit_code == 0
    run.assert_called_once_with(BootstrapParams(), settle=None)


def test_bootstrap_positional_arguments():
    with mock.patch.object(bootstrap_cmd.procedure, "run") as run:
        result = runner.invoke(app, [
            "bootstrap", "https://example.com/apps.git", "v1.2", "deploy/prod", "--settle", "0"
        ])
    assert result.exit_code == 0
    params = run.call_args[0][0]
    assert params.repo_url == "https://example.com/apps.git"
    assert params.revision == "v1.2"
    assert params.path == "deploy/prod"
    assert run.call_args[1] == {"settle": 0}


def test_bootstrap_failure_exits_non_zero():
    error = subprocess.CalledProcessError(1, ["kubectl", "rollout", "status"])
    with mock.patch.object(bootstrap_cmd.procedure, "run", side_effect=error):
        result = runner.invoke(app, ["bootstrap"])
    assert result.exit_code == 1


def test_status_command():
    status = {"app": "my-app", "sync_status": "OutOfSync", "health_status": "Progressing", "revision": "abc"}
    with mock.patch.object(status_cmd, "get_application_status", return_value=status) as get:
        result = runner.invoke(app, ["status", "--app", "my-app"])
    assert result.exit_code == 0
    assert "sync_status: OutOfSync" in result.stdout
    get.assert_called_once_with("my-app", "argocd")


def test_password_command_not_ready():
    with mock.patch.object(password_cmd, "get_admin_password", return_value=None):
        result = runner.invoke(app, ["password"])
    assert result.exit_code == 1


def test_missing_binary_exits_non_zero():
    error = FileNotFoundError(2, "No such file or directory", "kubectl")
    with mock.patch.object(bootstrap_cmd.procedure, "run", side_effect=error):
        result = runner.invoke(app, ["bootstrap"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, FileNotFoundError)


def test_negative_settle_is_rejected():
    with mock.patch.object(bootstrap_cmd.procedure, "run") as run:
        result = runner.invoke(app, ["bootstrap", "--settle", "-1"])
    assert result.exit_code == 2
    run.assert_not_called()
