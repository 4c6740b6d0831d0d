# harborprobe

harborprobe helps you check a running Harbor registry from your own test
suites. It wraps the Harbor v2.0 REST API and the `docker` command line. With
it you can create and remove projects, users and memberships, list
repositories and tags, trigger a vulnerability scan and wait for it, and pull,
tag and push images.

## Installation

```
pip install harborprobe
```

To run the package's own tests:

```
pip install "harborprobe[test]"
pytest
```

## Talking to the API

`harborprobe.api_client.APIClient` sends JSON requests with basic
authentication. It trusts the CA bundle named in the configuration, and it
reads that file when it is created, so a missing file fails at once. When
`proxy` is set, it is used for both http and https.

```python
from harborprobe.api_client import APIClient, APIClientConfig

password = "password"
config = APIClientConfig(
    username="admin",
    password=password,
    ca_file="/path/to/ca.crt",
)

with APIClient(config) as client:
    body = client.get("https://harbor.example.com/api/v2.0/systeminfo")
```

- `get(url)` returns the response body as bytes. Only status 200 is accepted.
- `post(url, data)` accepts 200, 201 and 202.
- `delete(url)` accepts 200 only.
- `switch_account(username, password)` changes the credentials. If either
  value is blank, the call changes nothing.
- `close()` releases the connection pool. The client is also a context manager.

A blank URL raises `ValueError`. An unexpected status raises `APIError`. Its
`status_code` holds the HTTP status. For `post` and `delete`, the message also
carries the response body when there is one.

## Projects, users, system info and images

Each helper takes the registry's root URI and an `APIClient`. Each raises
`ValueError` if the root URI is blank or the client is `None`.

```python
from harborprobe.project import ProjectUtil
from harborprobe.user import UserUtil
from harborprobe.system import SystemUtil
from harborprobe.image import ImageUtil

root = "https://harbor.example.com"

users = UserUtil(root, client)
password = "password"
users.create_user("alice", password)   # e-mail alice@example.com, real name "alicepks"

projects = ProjectUtil(root, client)
projects.create_project("demo", False)  # True makes the project public
projects.assign_role("demo", "alice")   # adds alice with role id 2 (developer)

info = SystemUtil(root, "harbor.example.com", client).get_system_info()

images = ImageUtil(root, client)
for repo in images.get_repos("demo"):
    print(repo.id, repo.name)
for tag in images.get_tags("demo/busybox"):
    print(tag.name, tag.digest)
images.scan_artifact("demo", "busybox", "sha256:...")
```

- `ProjectUtil`: `get_projects(name)`, `get_project_id(project_name)`,
  `create_project`, `delete_project`, `assign_role`, `revoke_role` and
  `get_project_member(pid, member)`.
- `UserUtil`: `create_user`, `delete_user`, `get_users(name)` and
  `get_user_id(username)`. The domain used for generated e-mail addresses is
  the `email_domain` attribute, which defaults to `example.com`.
- `SystemUtil.get_system_info()` returns a `SystemInfo`. It raises
  `ValueError` if the reported registry URL is not the expected hostname.
- `ImageUtil`: `delete_repo`, `scan_artifact`, `get_repos` and `get_tags`.

`get_project_id` and `get_user_id` return `None` when there is no exact name
match or the lookup fails. Operations that need an ID raise `LookupError` in
that case. `get_project_member` and `revoke_role` also raise `LookupError`
when the member is not found. Blank required names raise `ValueError`.

`scan_artifact` starts the scan, then polls the artifact every `poll_interval`
seconds (default 1). It returns once the native vulnerability report
(`MIME_TYPE_NATIVE_REPORT`) has status `Success`. After `scan_timeout`
seconds (default 300) it raises `TimeoutError`. You can change both attributes
on an instance.

## Docker

`harborprobe.docker.DockerClient` runs the `docker` executable. You can choose
another one with `DockerClient(executable=...)`.

- `status()` runs `docker info` quietly.
- `pull`, `tag`, `push` and `login` print each line of the command's standard
  output, prefixed with `docker out | `.

Blank arguments raise `ValueError`. A command that cannot be started, or that
exits with a non-zero status, raises `DockerError`.

```python
from harborprobe.docker import DockerClient

docker = DockerClient()
docker.status()
password = "password"
docker.login("alice", password, "harbor.example.com")
docker.pull("busybox:latest")
docker.tag("busybox:latest", "harbor.example.com/demo/busybox:latest")
docker.push("harbor.example.com/demo/busybox:latest")
```

## Models

`harborprobe.models` holds dataclasses for the JSON the API sends and
receives.

- Request bodies have `to_dict()`: `Project`, `Metadata`, `Member`,
  `MemberUser`, `User`, `Endpoint` and `ReplicationPolicy`.
- Response objects are built with `from_dict()`: `ExistingProject`,
  `ExistingMember`, `ExistingUser`, `Repository`, `Tag`, `ScanOverview` and
  `SystemInfo`.

## What it does not do

harborprobe is a library only. It has no command line, it does not run test
suites itself, and it has no settings file or environment-based
configuration. It also has no single call that combines the docker steps into
a "push an image to the registry" or "pull it back" workflow; you call
`login`, `pull`, `tag` and `push` yourself. The `cert_file` and `key_file`
settings in `APIClientConfig` are stored but not used for client-certificate
authentication.