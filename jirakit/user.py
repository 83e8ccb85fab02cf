"""Users of a Jira instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from jirakit.transport import Client, JiraError, Response

SearchParams = list[tuple[str, str]]
SearchTweak = Callable[[SearchParams], SearchParams]


@dataclass
class User:
    """A Jira user. The password is only ever kept locally, never serialized."""

    self_url: str = ""
    account_id: str = ""
    account_type: str = ""
    name: str = ""
    key: str = ""
    password: str = field(default="", repr=False)
    email_address: str = ""
    avatar_urls: dict[str, str] = field(default_factory=dict)
    display_name: str = ""
    active: bool = False
    time_zone: str = ""
    locale: str = ""
    application_keys: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return cls(
            self_url=data.get("self", ""),
            account_id=data.get("accountId", ""),
            account_type=data.get("accountType", ""),
            name=data.get("name", ""),
            key=data.get("key", ""),
            email_address=data.get("emailAddress", ""),
            avatar_urls=dict(data.get("avatarUrls") or {}),
            display_name=data.get("displayName", ""),
            active=bool(data.get("active", False)),
            time_zone=data.get("timeZone", ""),
            locale=data.get("locale", ""),
            application_keys=list(data.get("applicationKeys") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out unset fields and the password."""
        fields = {
            "self": self.self_url,
            "accountId": self.account_id,
            "accountType": self.account_type,
            "name": self.name,
            "key": self.key,
            "emailAddress": self.email_address,
            "avatarUrls": dict(self.avatar_urls),
            "displayName": self.display_name,
            "active": self.active,
            "timeZone": self.time_zone,
            "locale": self.locale,
            "applicationKeys": list(self.application_keys),
        }
        return {key: value for key, value in fields.items() if value}


@dataclass
class UserGroup:
    """A group a user belongs to."""

    self_url: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserGroup:
        return cls(self_url=data.get("self", ""), name=data.get("name", ""))


def _adding(name: str, value: str) -> SearchTweak:
    def tweak(params: SearchParams) -> SearchParams:
        return [*params, (name, value)]

    return tweak


def _flag(value: bool) -> str:
    return "true" if value else "false"


def with_max_results(max_results: int) -> SearchTweak:
    """Limit the number of users returned."""
    return _adding("maxResults", str(int(max_results)))


def with_start_at(start_at: int) -> SearchTweak:
    """Start the result page at ``start_at``."""
    return _adding("startAt", str(int(start_at)))


def with_active(active: bool) -> SearchTweak:
    """Include (or exclude) active users."""
    return _adding("includeActive", _flag(active))


def with_inactive(inactive: bool) -> SearchTweak:
    """Include (or exclude) inactive users."""
    return _adding("includeInactive", _flag(inactive))


def with_username(username: str) -> SearchTweak:
    """Search by user name."""
    return _adding("username", username)


def with_account_id(account_id: str) -> SearchTweak:
    """Search by account id."""
    return _adding("accountId", account_id)


def with_property(prop: str) -> SearchTweak:
    """Search by a user property, given by its key path."""
    return _adding("property", prop)


def _decode(response: Response, message: str) -> Any:
    try:
        return response.json()
    except JiraError as exc:
        raise JiraError(message, response) from exc


def _user_from(response: Response, message: str = "could not decode the user") -> User:
    data = _decode(response, message)
    if not isinstance(data, dict):
        raise JiraError(message, response)
    return User.from_dict(data)


class UserService:
    """Access to the users of a Jira instance."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get(self, account_id: str) -> User:
        """Return the user with the given account id."""
        response = self.client.request("GET", f"/rest/api/2/user?accountId={account_id}")
        return _user_from(response)

    def get_by_account_id(self, account_id: str) -> User:
        """Return the user with the given account id."""
        return self.get(account_id)

    def create(self, user: User) -> User:
        """Create ``user`` and return it as Jira reported it."""
        response = self.client.request("POST", "/rest/api/2/user", user.to_dict())
        return _user_from(response, "could not unmarshall the data into struct")

    def delete(self, account_id: str) -> Response:
        """Delete the user with the given account id."""
        return self.client.request("DELETE", f"/rest/api/2/user?accountId={account_id}")

    def get_groups(self, account_id: str) -> list[UserGroup]:
        """Return the groups the user belongs to."""
        response = self.client.request(
            "GET", f"/rest/api/2/user/groups?accountId={account_id}"
        )
        data = _decode(response, "could not decode the user groups")
        if not isinstance(data, list):
            raise JiraError("expected a list of user groups", response)
        return [UserGroup.from_dict(item) for item in data]

    def get_self(self) -> User:
        """Return the currently logged-in user."""
        response = self.client.request("GET", "rest/api/2/myself")
        return _user_from(response)

    def find(self, query: str, *args: SearchTweak) -> list[User]:
        """Search users by e-mail or display name, refined by the given tweaks."""
        params: SearchParams = [("query", query)]
        for tweak in args:
            params = tweak(params)
        query_string = "&".join(f"{name}={value}" for name, value in params)
        response = self.client.request("GET", f"/rest/api/2/user/search?{query_string}")
        data = _decode(response, "could not decode the users")
        if not isinstance(data, list):
            raise JiraError("expected a list of users", response)
        return [User.from_dict(item) for item in data]