# jirakit

A small, typed Python client for a handful of Jira REST endpoints:

- workflow **statuses** and **status categories** (`jirakit.status`, `jirakit.statuscategory`)
- project **versions**: get, create, update (`jirakit.version`)
- **users**: get, create, delete, groups, the current user, search (`jirakit.user`)
- agile **sprints**: move issues into a sprint, list a sprint's issues, fetch an issue (`jirakit.sprint`)

Statuses, status categories, versions, users and user groups come back as
dataclasses (`Status`, `StatusCategory`, `Version`, `User`, `UserGroup`).
Sprint issues come back as the decoded JSON objects (plain dicts).
Failed requests raise `JiraError`.

## Installation

```
pip install jirakit
```

The test suite uses pytest and responses; both are in the `test` extra
(`pip install "jirakit[test]"`).

## The client

Every service is built around `jirakit.transport.Client`. It joins endpoint
paths onto the base URL of your Jira instance (a trailing `/` is added to the
base URL if missing, and a leading `/` on the endpoint is dropped) and sends
them through a `requests.Session`, asking for `application/json`.
Authentication is whatever you configure on that session.

`Client.request(method, endpoint, payload=None, params=None)` sends `payload`
as a JSON body and `params` as query parameters, and returns a `Response`
with `status_code`, `headers`, `content`, `text` and `json()`.

```python
import requests

from jirakit.transport import Client, JiraError
from jirakit.status import StatusService
from jirakit.statuscategory import StatusCategoryService, StatusCategoryKey

session = requests.Session()
session.headers["Authorization"] = "Bearer token"

client = Client("https://jira.example.com/", session)

for status in StatusService(client).get_all_statuses():
    print(status.name, status.status_category.key)

categories = StatusCategoryService(client).get_list()
done = [c for c in categories if c.key == StatusCategoryKey.COMPLETE]
```

`StatusCategoryKey` holds the keys of the default categories:
`COMPLETE` (`"done"`), `IN_PROGRESS` (`"indeterminate"`), `TO_DO` (`"new"`)
and `UNDEFINED` (`"undefined"`).

## Versions

```python
from jirakit.version import Version, VersionService

versions = VersionService(client)

release = versions.create(
    Version(name="New Version 1", project_id=10000, released=True, archived=False)
)
fetched = versions.get(10002)

fetched.description = "An excellent updated version"
updated = versions.update(fetched)
```

`create` returns the version as Jira sent it back. `update` sends the version
to `rest/api/2/version/<id>` and returns a copy of the version that was sent,
not the object you passed in. `Version.to_dict()` leaves out fields that are
unset (empty strings, a zero `project_id`, `None` for `archived`/`released`).

## Users

```python
from jirakit.user import UserService, with_start_at, with_max_results

users = UserService(client)

me = users.get_self()
fred = users.get("000000000000000000000000")
groups = users.get_groups("000000000000000000000000")

matches = users.find("fred@example.com", with_start_at(100), with_max_results(1000))
```

`get_by_account_id` does the same as `get`. `delete` returns the `Response`
(Jira answers 204 No Content on success). `User.to_dict()` leaves out empty
fields and never includes `password`.

The search helpers `with_max_results`, `with_start_at`, `with_active`,
`with_inactive`, `with_username`, `with_account_id` and `with_property` each add
one query parameter, in the order they are given, after `query`. Values are
put into the query string as they are, without URL escaping.

## Sprints

```python
from jirakit.sprint import SprintService

sprints = SprintService(client)

sprints.move_issues_to_sprint(123, ["PROJ-1", "PROJ-2"])
issues = sprints.get_issues_for_sprint(123)
issue = sprints.get_issue("PROJ-1", {"fields": "summary"})
```

Issues can only be moved into open or active sprints, and at most 50 in one
call. `get_issue` puts its `options` mapping into the query string, writing
booleans as `true`/`false`.

## Errors

A transport failure, a status outside 2xx, or a body that cannot be decoded
raises `JiraError`. It carries the `Response` (when there is one) as
`response`, and the details Jira reported under `errorMessages` and `errors`
as `error_messages` and `errors`; these are also appended to the message.

```python
try:
    users.get("unknown")
except JiraError as exc:
    print(exc, exc.error_messages, exc.errors)
```

## What it does not do

jirakit covers only the endpoints above. It has no services for issues,
projects, boards, comments or workflows, no helpers for authentication
beyond the session you pass in, and no automatic paging through results. It
is a library only and installs no command.