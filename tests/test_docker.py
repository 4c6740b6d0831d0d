import io
import subprocess
from unittest import mock

import pytest

from harborprobe.docker import DockerClient, DockerError


def _fake_popen(output="", returncode=0):
    proc = mock.MagicMock()
    proc.stdout = io.StringIO(output)
    proc.wait.return_value = returncode
    proc.__enter__.return_value = proc
    proc.__exit__.return_value = False
    return mock.MagicMock(return_value=proc)


def test_status_runs_docker_info():
    completed = subprocess.CompletedProcess(["docker", "info"], 0)
    with mock.patch.object(subprocess, "run", return_value=completed) as run:
        assert DockerClient().status() is None
    assert run.call_args.args[0] == ["docker", "info"]


def test_status_failure_raises():
    completed = subprocess.CompletedProcess(["docker", "info"], 1)
    with mock.patch.object(subprocess, "run", return_value=completed):
        with pytest.raises(DockerError):
            DockerClient().status()


def test_missing_executable_raises():
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError("docker")):
        with pytest.raises(DockerError):
            DockerClient().status()


def test_pull_streams_output(capsys):
    popen = _fake_popen("layer one\nlayer two\n")
    with mock.patch.object(subprocess, "Popen", popen):
        DockerClient().pull("nginx:1")
    assert popen.call_args.args[0] == ["docker", "pull", "nginx:1"]
    assert capsys.readouterr().out.splitlines() == [
        "docker out | layer one",
        "docker out | layer two",
    ]


def test_pull_failure_raises():
    with mock.patch.object(subprocess, "Popen", _fake_popen(returncode=1)):
        with pytest.raises(DockerError):
            DockerClient().pull("nginx:1")


def test_popen_start_failure_raises():
    with mock.patch.object(subprocess, "Popen", side_effect=OSError("nope")):
        with pytest.raises(DockerError):
            DockerClient().push("reg.example.com/demo/nginx:1")


@pytest.mark.parametrize("image", ["", "   "])
def test_blank_image_rejected_without_running(image):
    popen = _fake_popen()
    with mock.patch.object(subprocess, "Popen", popen):
        with pytest.raises(ValueError):
            DockerClient().pull(image)
        with pytest.raises(ValueError):
            DockerClient().push(image)
    assert popen.call_count == 0


def test_tag_arguments():
    popen = _fake_popen()
    with mock.patch.object(subprocess, "Popen", popen):
        assert DockerClient().tag("nginx:1", "reg.example.com/demo/nginx:1") is None
    assert popen.call_args.args[0] == ["docker", "tag", "nginx:1", "reg.example.com/demo/nginx:1"]


@pytest.mark.parametrize("source,target", [("", "b"), ("a", " ")])
def test_tag_blank_rejected(source, target):
    with pytest.raises(ValueError):
        DockerClient().tag(source, target)


def test_login_arguments():
    popen = _fake_popen()
    password = "password"
    with mock.patch.object(subprocess, "Popen", popen):
        assert DockerClient().login("alice", password, "reg.example.com") is None
    assert popen.call_args.args[0] == [
        "docker", "login", "-u", "alice", "-p", password, "reg.example.com",
    ]


def test_login_blank_credentials_rejected():
    with pytest.raises(ValueError):
        DockerClient().login("alice", " ", "reg.example.com")


def test_custom_executable_used(capsys):
    popen = _fake_popen("ok\n")
    with mock.patch.object(subprocess, "Popen", popen):
        DockerClient(executable="podman").push("img:1")
    assert popen.call_args.args[0][0] == "podman"
    assert capsys.readouterr().out == "podman out | ok\n"