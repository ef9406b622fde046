"""Unit tests for GhiClient core methods.

This module tests the operations of the GhiClient facade, mocking the
internal _get/_post helpers so no HTTP request is made.
"""

#Run the tests in this file with "python -m pytest components/ghi_client_impl/tests/test_core_methods.py -v"

import pytest
from unittest.mock import MagicMock
from ghi_client_impl.ghi_impl import GhiClient, get_client
from ghi_client_impl.ghi_credentials import EnvCredentialProvider, StaticCredentialProvider
from ghi_client_impl.ghi_errors import ConstructionError, ErrorKind, GhiError, ServiceError, TransportError
from ghi_client_impl.ghi_issue import GhiIssue
from issue_tracker_interface.issue import State

ISSUE = {
    "number": 1,
    "votes": 0,
    "body": "my sweet, sweet issue",
    "title": "new issue",
    "user": "schacon",
    "state": "open",
}

SECOND_ISSUE = {
    "number": 2,
    "votes": 0,
    "body": "the body of a second issue",
    "title": "another issue",
    "user": "schacon",
    "state": "open",
}

#Fixture for mock tests
@pytest.fixture
def ghi_client():
    """Returns a GhiClient with mocked internal API methods."""
    client = GhiClient(
        "stephencelis", "ghi", credentials=StaticCredentialProvider("stephencelis", "token")
    )

    # Mock the internal _get and _post methods to prevent real HTTP calls
    client._get = MagicMock()
    client._post = MagicMock()

    return client

#--------------------------- construction --------------------------

@pytest.mark.parametrize("owner, repository", [(None, None), ("u", None), (None, "r"), ("", "r"), ("u", "")])
def test_construction_requires_owner_and_repository(owner, repository):
    with pytest.raises(ConstructionError) as excinfo:
        GhiClient(owner, repository)

    assert excinfo.value.kind is ErrorKind.CONSTRUCTION


def test_error_kinds_are_readable_on_every_error_class():
    assert GhiError("bare").kind is None
    assert TransportError("t").kind is ErrorKind.TRANSPORT
    assert ServiceError("s").kind is ErrorKind.SERVICE


def test_construction_succeeds_with_owner_and_repository():
    client = GhiClient("u", "r")

    assert client.owner == "u"
    assert client.repository == "r"
    assert client.secure is False

#--------------------------- reads --------------------------

def test_search_open_by_default(ghi_client):
    ghi_client._get.return_value = {"issues": [ISSUE, SECOND_ISSUE]}

    issues = ghi_client.search("me")

    ghi_client._get.assert_called_once_with("search", State.OPEN, "me")
    assert isinstance(issues, list)
    assert all(isinstance(issue, GhiIssue) for issue in issues)


def test_search_closed(ghi_client):
    ghi_client._get.return_value = {"issues": []}

    assert ghi_client.search("me", State.CLOSED) == []
    ghi_client._get.assert_called_once_with("search", State.CLOSED, "me")


def test_list_open_by_default_builds_one_issue_per_entry(ghi_client):
    ghi_client._get.return_value = {"issues": [ISSUE, SECOND_ISSUE]}

    issues = ghi_client.list_issues()

    ghi_client._get.assert_called_once_with("list", State.OPEN)
    assert len(issues) == 2
    assert [issue.number for issue in issues] == [1, 2]
    assert issues[1].title == "another issue"


def test_list_forwards_any_state_verbatim(ghi_client):
    ghi_client._get.return_value = {"issues": []}

    ghi_client.list_issues("whatever")

    ghi_client._get.assert_called_once_with("list", "whatever")


def test_show(ghi_client):
    ghi_client._get.return_value = {"issue": ISSUE}

    issue = ghi_client.show(1)

    ghi_client._get.assert_called_once_with("show", 1)
    assert isinstance(issue, GhiIssue)
    assert issue.body == "my sweet, sweet issue"
    assert issue.state is State.OPEN


def test_show_twice_returns_equal_issues(ghi_client):
    ghi_client._get.side_effect = [{"issue": dict(ISSUE)}, {"issue": dict(ISSUE)}]

    assert ghi_client.show(1) == ghi_client.show(1)


def test_show_without_issue_field_raises_service_error(ghi_client):
    ghi_client._get.return_value = {"issues": []}

    with pytest.raises(ServiceError):
        ghi_client.show(1)

#--------------------------- writes --------------------------

def test_open(ghi_client):
    ghi_client._post.return_value = {"issue": ISSUE}

    issue = ghi_client.open("Title", "Body")

    ghi_client._post.assert_called_once_with("open", params={"title": "Title", "body": "Body"})
    assert isinstance(issue, GhiIssue)


def test_edit(ghi_client):
    ghi_client._post.return_value = {"issue": ISSUE}

    assert isinstance(ghi_client.edit(1, "Title", "Body"), GhiIssue)
    ghi_client._post.assert_called_once_with("edit", 1, params={"title": "Title", "body": "Body"})


def test_close(ghi_client):
    ghi_client._post.return_value = {"issue": dict(ISSUE, state="closed")}

    issue = ghi_client.close(1)

    ghi_client._post.assert_called_once_with("close", 1)
    assert issue.state is State.CLOSED


def test_reopen(ghi_client):
    ghi_client._post.return_value = {"issue": ISSUE}

    assert isinstance(ghi_client.reopen(1), GhiIssue)
    ghi_client._post.assert_called_once_with("reopen", 1)


def test_add_label(ghi_client):
    ghi_client._post.return_value = {"labels": ["testing", "test_label"]}

    labels = ghi_client.add_label("l", 1)

    ghi_client._post.assert_called_once_with("label/add", "l", 1)
    assert labels == ["testing", "test_label"]


def test_remove_label(ghi_client):
    ghi_client._post.return_value = {"labels": ["testing"]}

    assert ghi_client.remove_label("l", 1) == ["testing"]
    ghi_client._post.assert_called_once_with("label/remove", "l", 1)


def test_comment(ghi_client):
    ghi_client._post.return_value = {"comment": {"comment": "this is amazing", "status": "saved"}}

    comment = ghi_client.comment(1, "Comment&so")

    ghi_client._post.assert_called_once_with("comment", 1, params={"comment": "Comment&so"})
    assert comment == {"comment": "this is amazing", "status": "saved"}

#--------------------------- tests for get_client function --------------------------

@pytest.fixture
def no_git_config(monkeypatch):
    # Keep the developer's own git config out of the lookups
    monkeypatch.setattr("ghi_client_impl.ghi_impl.git_config", lambda key: "")
    monkeypatch.setattr("ghi_client_impl.ghi_credentials.git_config", lambda key: "")


def test_get_client_raises_when_settings_missing(monkeypatch, no_git_config):
    for var in ["GHI_OWNER", "GHI_REPOSITORY", "GITHUB_USER", "GITHUB_TOKEN"]:
        monkeypatch.delenv(var, raising=False)

    # Should raise EnvironmentError listing every missing variable
    with pytest.raises(EnvironmentError) as excinfo:
        get_client(interactive=False)

    for var in ["GHI_OWNER", "GHI_REPOSITORY", "GITHUB_USER", "GITHUB_TOKEN"]:
        assert var in str(excinfo.value)


def test_get_client_succeeds_when_env_vars_present(monkeypatch, no_git_config):
    monkeypatch.setenv("GHI_OWNER", "stephencelis")
    monkeypatch.setenv("GHI_REPOSITORY", "ghi")
    monkeypatch.setenv("GITHUB_USER", "stephencelis")
    monkeypatch.setenv("GITHUB_TOKEN", "token")

    client = get_client(secure=True)

    assert isinstance(client, GhiClient)
    assert (client.owner, client.repository, client.secure) == ("stephencelis", "ghi", True)


def test_get_client_prompts_for_missing_values(monkeypatch, no_git_config):
    for var in ["GHI_OWNER", "GHI_REPOSITORY", "GITHUB_USER", "GITHUB_TOKEN"]:
        monkeypatch.delenv(var, raising=False)
    answers = iter(["stephencelis", "ghi", "stephencelis"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    monkeypatch.setattr("ghi_client_impl.ghi_impl.getpass", lambda prompt: "token")

    client = get_client(interactive=True)

    assert client.owner == "stephencelis"
    assert client._credentials == StaticCredentialProvider("stephencelis", "token")

#--------------------------- tests for EnvCredentialProvider --------------------------

def test_env_credentials_are_read_on_every_call(monkeypatch, no_git_config):
    provider = EnvCredentialProvider()
    monkeypatch.setenv("GITHUB_TOKEN", "first")
    assert provider.get_token() == "first"

    # Rotating the token does not require a new provider
    monkeypatch.setenv("GITHUB_TOKEN", "second")
    assert provider.get_token() == "second"


def test_env_credentials_fall_back_to_git_config(monkeypatch):
    monkeypatch.delenv("GITHUB_USER", raising=False)
    monkeypatch.setattr(
        "ghi_client_impl.ghi_credentials.git_config",
        lambda key: "from-git" if key == "github.user" else "",
    )

    assert EnvCredentialProvider().get_login() == "from-git"


def test_env_credentials_raise_when_missing(monkeypatch, no_git_config):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(EnvironmentError):
        EnvCredentialProvider().get_token()
