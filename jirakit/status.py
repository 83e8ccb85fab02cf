"""Workflow statuses of a Jira instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from jirakit.statuscategory import StatusCategory
from jirakit.transport import Client, JiraError


@dataclass
class Status:
    """A status an issue can be in, such as "Open" or "Closed"."""

    self_url: str = ""
    description: str = ""
    icon_url: str = ""
    name: str = ""
    id: str = ""
    status_category: StatusCategory = field(default_factory=StatusCategory)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Status:
        return cls(
            self_url=data.get("self", ""),
            description=data.get("description", ""),
            icon_url=data.get("iconUrl", ""),
            name=data.get("name", ""),
            id=data.get("id", ""),
            status_category=StatusCategory.from_dict(data.get("statusCategory") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self_url,
            "description": self.description,
            "iconUrl": self.icon_url,
            "name": self.name,
            "id": self.id,
            "statusCategory": self.status_category.to_dict(),
        }


class StatusService:
    """Access to the statuses of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_all_statuses(self) -> list[Status]:
        """Return every status associated with a workflow."""
        response = self.client.request("GET", "rest/api/2/status")
        data = response.json()
        if not isinstance(data, list):
            raise JiraError("expected a list of statuses", response)
        return [Status.from_dict(item) for item in data]