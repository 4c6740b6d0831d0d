"""System information checks against the registry API."""

from __future__ import annotations

import json
from typing import Optional

from harborprobe.api_client import APIClient
from harborprobe.models import SystemInfo


class SystemUtil:
    """Reads system information and checks it against the expected host."""

    def __init__(self, root_uri: str, hostname: str, client: Optional[APIClient]) -> None:
        if not root_uri.strip() or client is None:
            raise ValueError("root URI and API client are required")
        self.root_uri = root_uri
        self.hostname = hostname
        self.client = client

    def get_system_info(self) -> SystemInfo:
        """Fetch system info; raise ValueError if the registry URL is not the hostname."""
        data = self.client.get(self.root_uri + "/api/v2.0/systeminfo")
        info = SystemInfo.from_dict(json.loads(data) or {})
        if info.registry_url != self.hostname:
            raise ValueError(
                f"Invalid registry url in system info: expect {self.hostname} "
                f"got {info.registry_url} "
            )
        return info