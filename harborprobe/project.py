"""Project, membership and role operations against the registry API."""

from __future__ import annotations

import json
from typing import Any, List, Optional

import requests

from harborprobe.api_client import APIClient, APIError
from harborprobe.models import (
    ExistingMember,
    ExistingProject,
    Member,
    MemberUser,
    Metadata,
    Project,
)

_PROJECTS_PATH = "/api/v2.0/projects"
_DEVELOPER_ROLE_ID = 2


def _decode_list(data: bytes) -> List[Any]:
    return json.loads(data) or []


def _encode(payload: Any) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


class ProjectUtil:
    """Helpers for projects and their members."""

    def __init__(self, root_uri: str, client: Optional[APIClient]) -> None:
        if not root_uri.strip() or client is None:
            raise ValueError("root URI and API client are required")
        self.root_uri = root_uri
        self.client = client

    def get_projects(self, name: str = "") -> List[ExistingProject]:
        """List projects, or only those matching ``name`` when it is given."""
        url = self.root_uri + _PROJECTS_PATH
        if name.strip():
            url = f"{url}?name={name}"
        return [ExistingProject.from_dict(item) for item in _decode_list(self.client.get(url))]

    def get_project_id(self, project_name: str) -> Optional[int]:
        """Return the ID of the project named exactly ``project_name``, or None."""
        try:
            projects = self.get_projects(project_name)
        except (APIError, requests.RequestException, ValueError, TypeError, AttributeError):
            return None
        return next((p.id for p in projects if p.name == project_name), None)

    def create_project(self, project_name: str, access_level: bool) -> None:
        """Create a project; ``access_level`` marks it public."""
        if not project_name.strip():
            raise ValueError("empty project name for creating")
        project = Project(
            name=project_name,
            metadata=Metadata(access_level="true" if access_level else "false"),
        )
        self.client.post(self.root_uri + _PROJECTS_PATH, _encode(project.to_dict()))

    def delete_project(self, project_name: str) -> None:
        if not project_name.strip():
            raise ValueError("empty project name for deleting")
        pid = self.get_project_id(project_name)
        if pid is None:
            raise LookupError("Failed to get project ID")
        self.client.delete(f"{self.root_uri}{_PROJECTS_PATH}/{pid}")

    def assign_role(self, project_name: str, username: str) -> None:
        """Add ``username`` to the project as a developer."""
        if not project_name.strip() or not username.strip():
            raise ValueError("project name and username are required for assigning role")
        pid = self.get_project_id(project_name)
        if pid is None:
            raise LookupError(f"Failed to get project ID with name {project_name}")
        member = Member(role_id=_DEVELOPER_ROLE_ID, member=MemberUser(username=username))
        self.client.post(
            f"{self.root_uri}{_PROJECTS_PATH}/{pid}/members", _encode(member.to_dict())
        )

    def revoke_role(self, project_name: str, username: str) -> None:
        """Remove ``username`` from the project's members."""
        if not project_name.strip():
            raise ValueError("project name is required for revoking role")
        if not username.strip():
            raise ValueError("user ID is required for revoking role")
        pid = self.get_project_id(project_name)
        if pid is None:
            raise LookupError(f"Failed to get project ID with name {project_name}")
        member = self.get_project_member(pid, username)
        self.client.delete(f"{self.root_uri}{_PROJECTS_PATH}/{pid}/members/{member.mid}")

    def get_project_member(self, pid: int, member: str) -> ExistingMember:
        """Find the member of project ``pid`` whose entity name is ``member``."""
        if pid == 0:
            raise ValueError("invalid project ID")
        if not member.strip():
            raise ValueError("empty member name")
        data = self.client.get(f"{self.root_uri}{_PROJECTS_PATH}/{pid}/members")
        for item in _decode_list(data):
            found = ExistingMember.from_dict(item)
            if found.name == member:
                return found
        raise LookupError(f"no member found by the name '{member}'")