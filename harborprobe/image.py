"""Repository, tag and artifact scanning operations against the registry API."""

from __future__ import annotations

import json
import time
from typing import List, Optional

from harborprobe.api_client import APIClient
from harborprobe.models import Repository, Tag
from harborprobe.project import ProjectUtil

MIME_TYPE_NATIVE_REPORT = "application/vnd.security.vulnerability.report; version=1.1"

_SCAN_POLL_INTERVAL = 1.0
_SCAN_TIMEOUT = 300.0


class ImageUtil:
    """Helpers for repositories, tags and vulnerability scans.

    ``poll_interval`` and ``scan_timeout`` (seconds) govern how scans are
    awaited; they may be adjusted on an instance.
    """

    poll_interval: float = _SCAN_POLL_INTERVAL
    scan_timeout: float = _SCAN_TIMEOUT

    def __init__(self, root_uri: str, client: Optional[APIClient]) -> None:
        if not root_uri.strip() or client is None:
            raise ValueError("root URI and API client are required")
        self.root_uri = root_uri
        self.client = client

    def _artifact_url(self, project_name: str, repo_name: str, digest: str) -> str:
        return (
            f"{self.root_uri}/api/v2.0/projects/{project_name}"
            f"/repositories/{repo_name}/artifacts/{digest}"
        )

    def delete_repo(self, project_name: str, repo_name: str) -> None:
        """Delete the repository ``repo_name`` from the project."""
        if not repo_name.strip():
            raise ValueError("empty repo name for deleting")
        self.client.delete(
            f"{self.root_uri}/api/v2.0/projects/{project_name}/repositories/{repo_name}"
        )

    def scan_artifact(self, project_name: str, repo_name: str, digest: str) -> None:
        """Start a scan of the artifact and wait until its native report succeeds."""
        if not repo_name.strip():
            raise ValueError("empty repo name for scanning")
        if not digest.strip():
            raise ValueError("empty image digest for scanning")

        artifact_url = self._artifact_url(project_name, repo_name, digest)
        self.client.post(f"{artifact_url}/scan", None)

        status_url = f"{artifact_url}?with_scan_overview=true&with_accessory=true"
        deadline = time.monotonic() + self.scan_timeout
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            time.sleep(min(self.poll_interval, remaining))
            if time.monotonic() > deadline:
                break
            tag = Tag.from_dict(json.loads(self.client.get(status_url)) or {})
            summary = (tag.scan_overview or {}).get(MIME_TYPE_NATIVE_REPORT)
            if summary is not None and summary.status == "Success":
                return
        raise TimeoutError(f"Scan timeout after {self.scan_timeout:g} seconds")

    def get_repos(self, project_name: str) -> List[Repository]:
        """List the repositories of the named project."""
        if not project_name.strip():
            raise ValueError("empty project name for getting repos")
        pid = ProjectUtil(self.root_uri, self.client).get_project_id(project_name)
        if pid is None:
            raise LookupError(f"Failed to get project ID with name {project_name}")
        data = self.client.get(f"{self.root_uri}/api/v2.0/repositories?project_id={pid}")
        return [Repository.from_dict(item) for item in json.loads(data) or []]

    def get_tags(self, repo_name: str) -> List[Tag]:
        """List the tags of a repository."""
        if not repo_name.strip():
            raise ValueError("empty repository name for getting tags")
        data = self.client.get(f"{self.root_uri}/api/v2.0/repositories/{repo_name}/tags")
        return [Tag.from_dict(item) for item in json.loads(data) or []]