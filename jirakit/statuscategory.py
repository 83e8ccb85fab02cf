"""Status categories of a Jira instance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from jirakit.transport import Client, JiraError


class StatusCategoryKey(str, Enum):
    """Keys of the default Jira status categories."""

    COMPLETE = "done"
    IN_PROGRESS = "indeterminate"
    TO_DO = "new"
    UNDEFINED = "undefined"


@dataclass
class StatusCategory:
    """The category a status belongs to."""

    self_url: str = ""
    id: int = 0
    name: str = ""
    key: str = ""
    color_name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatusCategory:
        return cls(
            self_url=data.get("self", ""),
            id=int(data.get("id", 0)),
            name=data.get("name", ""),
            key=data.get("key", ""),
            color_name=data.get("colorName", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self_url,
            "id": self.id,
            "name": self.name,
            "key": self.key,
            "colorName": self.color_name,
        }


class StatusCategoryService:
    """Access to the status categories of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_list(self) -> list[StatusCategory]:
        """Return all status categories."""
        response = self.client.request("GET", "rest/api/2/statuscategory")
        data = response.json()
        if not isinstance(data, list):
            raise JiraError("expected a list of status categories", response)
        return [StatusCategory.from_dict(item) for item in data]