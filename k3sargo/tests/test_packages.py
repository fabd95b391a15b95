from unittest import mock

from k3sargo.modules import packages


def fake_apt(installed):
    """Route dpkg/apt-get calls to an in-memory set of installed packages."""
    calls = []

    def succeeds(cmd):
        return cmd[:2] == ["dpkg", "-s"] and cmd[2] in installed

    def run_command(cmd, **kwargs):
        calls.append(cmd)
        if cmd[:3] == ["sudo", "apt-get", "install"]:
            installed.add(cmd[-1])

    return calls, succeeds, run_command


def test_apt_install_skips_installed_package():
    calls, succeeds, run_command = fake_apt({"curl"})
    with mock.patch.object(packages, "succeeds", succeeds), \
            mock.patch.object(packages, "run_command", run_command):
        assert packages.apt_install("curl") is False
    assert calls == []


def test_apt_install_updates_then_installs():
    calls, succeeds, run_command = fake_apt(set())
    with mock.patch.object(packages, "succeeds", succeeds), \
            mock.patch.object(packages, "run_command", run_command):
        assert packages.apt_install("git") is True
    assert calls == [
        ["sudo", "apt-get", "update", "-y"],
        ["sudo", "apt-get", "install", "-y", "git"],
    ]


def test_ensure_packages_is_idempotent():
    installed = {"curl"}
    calls, succeeds, run_command = fake_apt(installed)
    with mock.patch.object(packages, "succeeds", succeeds), \
            mock.patch.object(packages, "run_command", run_command):
        first = packages.ensure_packages(["curl", "git"])
        calls_after_first = len(calls)
        second = packages.ensure_packages(["curl", "git"])

    assert first == ["git"]
    assert second == []
    assert len(calls) == calls_after_first
    assert installed == {"curl", "git"}
