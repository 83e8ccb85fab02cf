"""Sprints of the Jira Agile API."""

from __future__ import annotations

from typing import Any, Mapping

from jirakit.transport import Client, JiraError, Response


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class SprintService:
    """Access to sprints and their issues. Issues are returned as decoded JSON."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def move_issues_to_sprint(self, sprint_id: int, issue_ids: list[str]) -> Response:
        """Move issues to an open or active sprint (at most 50 per call)."""
        return self.client.request(
            "POST",
            f"rest/agile/1.0/sprint/{sprint_id}/issue",
            {"issues": list(issue_ids)},
        )

    def get_issues_for_sprint(self, sprint_id: int) -> list[dict[str, Any]]:
        """Return the issues in a sprint that the user may view, ordered by rank."""
        response = self.client.request("GET", f"rest/agile/1.0/sprint/{sprint_id}/issue")
        data = response.json()
        if not isinstance(data, dict):
            raise JiraError("expected an object holding the sprint's issues", response)
        issues = data.get("issues") or []
        if not isinstance(issues, list):
            raise JiraError("expected a list of issues", response)
        return issues

    def get_issue(
        self, issue_id: str, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return the full issue for an id or key; ``options`` go into the query."""
        params = None
        if options:
            params = {key: _query_value(value) for key, value in options.items()}
        response = self.client.request(
            "GET", f"rest/agile/1.0/issue/{issue_id}", params=params
        )
        data = response.json()
        if not isinstance(data, dict):
            raise JiraError("could not decode the issue", response)
        return data