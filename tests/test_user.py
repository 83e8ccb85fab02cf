import json

import pytest
import responses

from jirakit.transport import Client, JiraError
from jirakit.user import (
    User,
    UserGroup,
    UserService,
    with_account_id,
    with_active,
    with_inactive,
    with_max_results,
    with_property,
    with_start_at,
    with_username,
)

BASE = "https://jira.example.com"
ACCOUNT = "000000000000000000000000"

FRED = {
    "self": "http://www.example.com/jira/rest/api/2/user?username=fred",
    "key": "fred",
    "name": "fred",
    "emailAddress": "fred@example.com",
    "avatarUrls": {
        "48x48": "http://www.example.com/jira/secure/useravatar?size=large&ownerId=fred",
        "16x16": "http://www.example.com/jira/secure/useravatar?size=xsmall&ownerId=fred",
    },
    "displayName": "Fred F. User",
    "active": True,
    "timeZone": "Australia/Sydney",
    "groups": {"size": 1, "items": [{"name": "jira-user"}]},
    "expand": "groups,applicationRoles",
}


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return UserService(Client(BASE))


def test_get_success(mock, service):
    mock.add(responses.GET, f"{BASE}/rest/api/2/user", json=FRED)
    user = service.get(ACCOUNT)
    assert mock.calls[0].request.url == f"{BASE}/rest/api/2/user?accountId={ACCOUNT}"
    assert user.name == "fred"
    assert user.email_address == "fred@example.com"
    assert user.avatar_urls["16x16"].endswith("size=xsmall&ownerId=fred")


def test_get_by_account_id_success(mock, service):
    body = dict(FRED, accountId=ACCOUNT)
    mock.add(responses.GET, f"{BASE}/rest/api/2/user", json=body)
    user = service.get_by_account_id(ACCOUNT)
    assert mock.calls[0].request.url == f"{BASE}/rest/api/2/user?accountId={ACCOUNT}"
    assert user.account_id == ACCOUNT


def test_create(mock, service):
    mock.add(
        responses.POST,
        f"{BASE}/rest/api/2/user",
        status=201,
        json={
            "name": "charlie",
            "emailAddress": "charlie@example.com",
            "displayName": "Charlie of Atlassian",
            "applicationKeys": ["jira-core"],
        },
    )
    password = "password"
    new_user = User(
        name="charlie",
        password=password,
        email_address="charlie@example.com",
        display_name="Charlie of Atlassian",
        application_keys=["jira-core"],
    )
    created = service.create(new_user)
    request = mock.calls[0].request
    assert request.method == "POST"
    sent = json.loads(request.body)
    assert "password" not in sent
    assert sent["name"] == "charlie"
    assert created.display_name == "Charlie of Atlassian"
    assert created.application_keys == ["jira-core"]


def test_create_with_undecodable_answer(mock, service):
    mock.add(responses.POST, f"{BASE}/rest/api/2/user", status=201, body="not json")
    with pytest.raises(JiraError, match="could not unmarshall"):
        service.create(User(name="charlie"))


def test_delete(mock, service):
    mock.add(responses.DELETE, f"{BASE}/rest/api/2/user", status=204)
    response = service.delete(ACCOUNT)
    assert mock.calls[0].request.url == f"{BASE}/rest/api/2/user?accountId={ACCOUNT}"
    assert response.status_code == 204


def test_get_groups(mock, service):
    mock.add(
        responses.GET,
        f"{BASE}/rest/api/2/user/groups",
        status=201,
        json=[
            {
                "name": "jira-software-users",
                "self": f"http://www.example.com/jira/rest/api/2/user?accountId={ACCOUNT}",
            }
        ],
    )
    groups = service.get_groups(ACCOUNT)
    assert mock.calls[0].request.url == (
        f"{BASE}/rest/api/2/user/groups?accountId={ACCOUNT}"
    )
    assert groups == [
        UserGroup(
            self_url=f"http://www.example.com/jira/rest/api/2/user?accountId={ACCOUNT}",
            name="jira-software-users",
        )
    ]


def test_get_self(mock, service):
    mock.add(responses.GET, f"{BASE}/rest/api/2/myself", status=201, json=FRED)
    user = service.get_self()
    assert user.name == "fred"
    assert user.active is True
    assert user.display_name == "Fred F. User"


def test_find_success(mock, service):
    mock.add(responses.GET, f"{BASE}/rest/api/2/user/search", json=[FRED])
    users = service.find("fred@example.com")
    assert mock.calls[0].request.url == (
        f"{BASE}/rest/api/2/user/search?query=fred@example.com"
    )
    assert [u.name for u in users] == ["fred"]


def test_find_success_params(mock, service):
    mock.add(responses.GET, f"{BASE}/rest/api/2/user/search", json=[FRED])
    users = service.find("fred@example.com", with_start_at(100), with_max_results(1000))
    assert mock.calls[0].request.url == (
        f"{BASE}/rest/api/2/user/search?query=fred@example.com&startAt=100&maxResults=1000"
    )
    assert len(users) == 1


def test_find_with_every_tweak(mock, service):
    mock.add(responses.GET, f"{BASE}/rest/api/2/user/search", json=[])
    users = service.find(
        "fred",
        with_active(True),
        with_inactive(False),
        with_username("fred"),
        with_account_id(ACCOUNT),
        with_property("prop.key"),
    )
    assert users == []
    assert mock.calls[0].request.url == (
        f"{BASE}/rest/api/2/user/search?query=fred&includeActive=true"
        f"&includeInactive=false&username=fred&accountId={ACCOUNT}&property=prop.key"
    )


def test_get_not_found_raises(mock, service):
    mock.add(
        responses.GET,
        f"{BASE}/rest/api/2/user",
        status=404,
        json={"errorMessages": ["User does not exist"], "errors": {}},
    )
    with pytest.raises(JiraError) as info:
        service.get(ACCOUNT)
    assert info.value.error_messages == ["User does not exist"]


def test_user_dict_round_trip():
    user = User.from_dict(FRED)
    again = User.from_dict(user.to_dict())
    assert again == user
    assert "groups" not in user.to_dict()


def test_user_to_dict_leaves_out_empty_fields():
    password = "password"
    assert User(name="fred", password=password).to_dict() == {"name": "fred"}