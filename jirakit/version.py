"""Release versions of Jira projects."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from jirakit.transport import Client, JiraError


def _is_empty(value: Any) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, int) and not isinstance(value, bool) and value == 0


@dataclass
class Version:
    """A single release version of a project."""

    self_url: str = ""
    id: str = ""
    name: str = ""
    description: str = ""
    archived: bool | None = None
    released: bool | None = None
    release_date: str = ""
    user_release_date: str = ""
    project_id: int = 0
    start_date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Version:
        return cls(
            self_url=data.get("self", ""),
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            archived=data.get("archived"),
            released=data.get("released"),
            release_date=data.get("releaseDate", ""),
            user_release_date=data.get("userReleaseDate", ""),
            project_id=int(data.get("projectId", 0)),
            start_date=data.get("startDate", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out fields that are unset."""
        fields = {
            "self": self.self_url,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "archived": self.archived,
            "released": self.released,
            "releaseDate": self.release_date,
            "userReleaseDate": self.user_release_date,
            "projectId": self.project_id,
            "startDate": self.start_date,
        }
        return {key: value for key, value in fields.items() if not _is_empty(value)}


class VersionService:
    """Access to project versions."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get(self, version_id: int) -> Version:
        """Return the version with the given id."""
        response = self.client.request("GET", f"/rest/api/2/version/{version_id}")
        return _version_from(response)

    def create(self, version: Version) -> Version:
        """Create ``version`` and return it as Jira stored it."""
        response = self.client.request("POST", "/rest/api/2/version", version.to_dict())
        return _version_from(response)

    def update(self, version: Version) -> Version:
        """Update the version identified by ``version.id``; return a copy of it."""
        self.client.request("PUT", f"rest/api/2/version/{version.id}", version.to_dict())
        return dataclasses.replace(version)


def _version_from(response: Any) -> Version:
    data = response.json()
    if not isinstance(data, dict):
        raise JiraError("could not decode the version in the response", response)
    return Version.from_dict(data)