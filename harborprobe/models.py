"""Data shapes exchanged with the registry's v2.0 REST API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass
class Endpoint:
    """A replication target endpoint."""

    endpoint: str = ""
    name: str = ""
    username: str = ""
    password: str = ""
    type: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "name": self.name,
            "username": self.username,
            "password": self.password,
            "type": self.type,
        }


@dataclass
class Repository:
    """A repository listed under a project."""

    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Repository":
        return cls(id=data.get("id", 0), name=data.get("name", ""))


@dataclass
class ScanOverview:
    """Summary of a vulnerability scan for one report type."""

    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScanOverview":
        return cls(status=data.get("scan_status", ""))


@dataclass
class Tag:
    """A tag or artifact, optionally with its scan overview."""

    digest: str = ""
    name: str = ""
    signature: Optional[Dict[str, Any]] = None
    scan_overview: Optional[Dict[str, ScanOverview]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tag":
        overview = data.get("scan_overview")
        signature = data.get("signature")
        return cls(
            digest=data.get("digest", ""),
            name=data.get("name", ""),
            signature=dict(signature) if signature is not None else None,
            scan_overview=(
                {key: ScanOverview.from_dict(value) for key, value in overview.items()}
                if overview is not None
                else None
            ),
        )


@dataclass
class MemberUser:
    """The user part of a project membership request."""

    username: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"username": self.username}


@dataclass
class Member:
    """A request to add a user to a project with a role."""

    role_id: int = 0
    member: Optional[MemberUser] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role_id": self.role_id,
            "member_user": self.member.to_dict() if self.member is not None else None,
        }


@dataclass
class ExistingMember:
    """A project member as returned by the API."""

    mid: int = 0
    name: str = ""
    role_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExistingMember":
        return cls(
            mid=data.get("id", 0),
            name=data.get("entity_name", ""),
            role_id=data.get("role_id", 0),
        )


@dataclass
class Metadata:
    """Project metadata; ``access_level`` is the textual public flag."""

    access_level: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"public": self.access_level}


@dataclass
class Project:
    """A request to create a project."""

    name: str = ""
    metadata: Optional[Metadata] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"project_name": self.name}
        if self.metadata is not None:
            result["metadata"] = self.metadata.to_dict()
        return result


@dataclass
class ExistingProject:
    """A project as returned by the API."""

    name: str = ""
    id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExistingProject":
        return cls(name=data.get("name", ""), id=data.get("project_id", 0))


@dataclass
class ReplicationPolicy:
    """A replication policy bound to a project."""

    project_id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"project_id": self.project_id}


@dataclass
class ExistingReplicationPolicy:
    """A replication policy as returned by the API."""


@dataclass
class SystemInfo:
    """The subset of system information used by the checks."""

    auth_mode: str = ""
    registry_url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SystemInfo":
        return cls(
            auth_mode=data.get("auth_mode", ""),
            registry_url=data.get("registry_url", ""),
        )


@dataclass
class User:
    """A request to create a user."""

    username: str = ""
    real_name: str = ""
    password: str = ""
    email: str = ""
    comment: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "realname": self.real_name,
            "password": self.password,
            "email": self.email,
            "comment": self.comment,
        }


@dataclass
class ExistingUser(User):
    """A user as returned by the API."""

    id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["user_id"] = self.id
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExistingUser":
        return cls(
            username=data.get("username", ""),
            real_name=data.get("realname", ""),
            password=data.get("password", ""),
            email=data.get("email", ""),
            comment=data.get("comment", ""),
            id=data.get("user_id", 0),
        )