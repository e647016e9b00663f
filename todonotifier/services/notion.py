import requests

from todonotifier.config import get_settings
from todonotifier.exceptions import AuthenticationError, IntegrationError, RateLimitError
from todonotifier.http_client import get_session
from todonotifier.logger import logger
from todonotifier.models.todos import Credential

SORT_BY_DUE = {"sorts": [{"property": "Due", "direction": "ascending"}]}


def _headers(credential: Credential) -> dict:
    return {
        "Authorization": f"Bearer {credential.api_key}",
        "Notion-Version": get_settings().notion_version,
        "Content-Type": "application/json",
    }


def _handle_response(resp: requests.Response) -> dict:
    if resp.status_code == 429:
        raise RateLimitError("Notion API rate limit exceeded. Try again later.")
    if resp.status_code in (401, 403):
        raise AuthenticationError("Notion API key is invalid or lacks access. Check API_KEY in the secrets file.")
    if resp.status_code >= 400:
        raise IntegrationError(f"Notion API error ({resp.status_code}): {resp.text[:200]}")
    try:
        return resp.json()
    except ValueError as e:
        raise IntegrationError(f"Notion API returned a non-JSON body: {resp.text[:200]}") from e


def query_database(credential: Credential) -> dict:
    """Fetch one page of todos from the database, sorted by ascending due date."""
    logger.debug(f"Request: POST {credential.db_url}")
    try:
        resp = get_session().post(
            credential.db_url,
            headers=_headers(credential),
            json=SORT_BY_DUE,
            timeout=get_settings().request_timeout,
        )
    except requests.RequestException as e:
        raise IntegrationError(f"Notion API request failed: {e}") from e
    logger.debug(f"Response status: {resp.status_code}")
    return _handle_response(resp)
