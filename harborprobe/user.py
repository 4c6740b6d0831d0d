"""User account operations against the registry API."""

from __future__ import annotations

import json
from typing import List, Optional

import requests

from harborprobe.api_client import APIClient, APIError
from harborprobe.models import ExistingUser, User

_USERS_PATH = "/api/v2.0/users"
EMAIL_DOMAIN = "example.com"


class UserUtil:
    """Helpers for creating, finding and deleting users."""

    email_domain: str = EMAIL_DOMAIN

    def __init__(self, root_uri: str, client: Optional[APIClient]) -> None:
        if not root_uri.strip() or client is None:
            raise ValueError("root URI and API client are required")
        self.root_uri = root_uri
        self.client = client

    def create_user(self, username: str, password: str) -> None:
        """Create a test user whose e-mail and real name derive from ``username``."""
        if not username.strip() or not password.strip():
            raise ValueError("username and password required for creating user")
        user = User(
            username=username,
            password=password,
            email=username + "@" + self.email_domain,
            real_name=username + "pks",
            comment="testing",
        )
        body = json.dumps(user.to_dict(), separators=(",", ":")).encode("utf-8")
        self.client.post(self.root_uri + _USERS_PATH, body)

    def delete_user(self, username: str) -> None:
        """Delete the user named exactly ``username``."""
        uid = self.get_user_id(username)
        if uid is None:
            raise LookupError(f"Failed to get user with name {username}")
        self.client.delete(f"{self.root_uri}{_USERS_PATH}/{uid}")

    def get_users(self, name: str = "") -> List[ExistingUser]:
        """List users, or only those matching ``name`` when it is given."""
        url = self.root_uri + _USERS_PATH
        if name.strip():
            url = f"{url}?username={name}"
        items = json.loads(self.client.get(url)) or []
        return [ExistingUser.from_dict(item) for item in items]

    def get_user_id(self, username: str) -> Optional[int]:
        """Return the ID of the user named exactly ``username``, or None."""
        if not username.strip():
            return None
        try:
            users = self.get_users(username)
        except (APIError, requests.RequestException, ValueError, TypeError, AttributeError):
            return None
        return next((u.id for u in users if u.username == username), None)