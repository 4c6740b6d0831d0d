import pytest
import responses

from harborprobe.api_client import APIClient, APIClientConfig, APIError
from harborprobe.models import SystemInfo
from harborprobe.system import SystemUtil

ROOT = "https://harbor.example.com"
HOST = "harbor.example.com"
INFO = ROOT + "/api/v2.0/systeminfo"


@pytest.fixture
def client(tmp_path):
    ca = tmp_path / "ca.pem"
    ca.write_text("ca")
    password = "password"
    with APIClient(APIClientConfig(username="admin", password=password, ca_file=str(ca))) as api:
        yield api


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_constructor_requires_root_and_client(client):
    with pytest.raises(ValueError):
        SystemUtil("", HOST, client)
    with pytest.raises(ValueError):
        SystemUtil(ROOT, HOST, None)


def test_matching_registry_url(client, mock):
    mock.add(responses.GET, INFO, json={"auth_mode": "db_auth", "registry_url": HOST})
    info = SystemUtil(ROOT, HOST, client).get_system_info()
    assert info == SystemInfo(auth_mode="db_auth", registry_url=HOST)
    assert mock.calls[0].request.url == INFO


def test_mismatching_registry_url(client, mock):
    mock.add(responses.GET, INFO, json={"registry_url": "other.example.com"})
    with pytest.raises(ValueError) as info:
        SystemUtil(ROOT, HOST, client).get_system_info()
    assert "other.example.com" in str(info.value)
    assert HOST in str(info.value)


def test_api_error_propagates(client, mock):
    mock.add(responses.GET, INFO, status=401)
    with pytest.raises(APIError) as info:
        SystemUtil(ROOT, HOST, client).get_system_info()
    assert info.value.status_code == 401