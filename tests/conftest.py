import pytest
from unittest.mock import MagicMock

from todonotifier.config import get_settings
from todonotifier.models.todos import Credential


# --- Canned API responses ---

NOTION_TODO = {
    "object": "page",
    "id": "todo123",
    "properties": {
        "Name": {"id": "title", "type": "title", "title": [{"type": "text", "plain_text": "Write report"}]},
        "Done": {"id": "done", "type": "checkbox", "checkbox": False},
        "Due": {
            "id": "due",
            "type": "date",
            "date": {"start": "2024-01-15T09:30:00.000+09:00", "end": "2024-01-15T11:00:00.000+09:00"},
        },
    },
}

NOTION_TODO_ALL_DAY = {
    "object": "page",
    "id": "todo456",
    "properties": {
        "Name": {"title": [{"plain_text": "Pay rent"}]},
        "Done": {"checkbox": True},
        "Due": {"date": {"start": "2024-02-01", "end": None}},
    },
}

NOTION_TODO_NO_TITLE = {
    "object": "page",
    "id": "todo789",
    "properties": {
        "Name": {"title": []},
        "Done": {"checkbox": False},
    },
}

NOTION_QUERY = {
    "object": "list",
    "results": [NOTION_TODO, NOTION_TODO_ALL_DAY, NOTION_TODO_NO_TITLE],
    "next_cursor": None,
    "has_more": False,
}

CREDENTIAL = Credential(db_url="https://api.notion.com/v1/databases/db123/query", api_key="secret_abc")

requires_notion = pytest.mark.skipif(
    not get_settings().secrets_file.is_file(),
    reason="Secrets file not found, create .secrets with DB_URL and API_KEY",
)


@pytest.fixture
def secrets_file(tmp_path):
    path = tmp_path / ".secrets"
    path.write_text(f"DB_URL={CREDENTIAL.db_url}\nAPI_KEY={CREDENTIAL.api_key}\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_response():
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = NOTION_QUERY
    resp.text = ""
    return resp


@pytest.fixture
def mock_session(mocker, mock_response):
    """Fully mocked requests session for the Notion API."""
    session = MagicMock()
    session.post.return_value = mock_response
    mocker.patch("todonotifier.services.notion.get_session", return_value=session)
    return session
