"""Reader for the ``.secrets`` file holding the Notion database URL and API key.

The file holds one ``KEY=VALUE`` pair per line, in any order::

    DB_URL=<database_url>
    API_KEY=<api_key>
"""

from collections.abc import Iterable
from pathlib import Path

from todonotifier.exceptions import ConfigError, EmptyValue, MalformedLine, MissingKey, PathNotFound, UnexpectedKey
from todonotifier.logger import logger
from todonotifier.models.todos import Credential

KEY_VAL_DELIM = "="
DB_URL_KEY = "DB_URL"
API_KEY_KEY = "API_KEY"


def read_secrets(path: str | Path) -> Credential:
    """Open the secrets file at ``path`` and parse it."""
    source_name = str(path)
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise PathNotFound(source_name) from e
    with f:
        try:
            return parse_secrets(f, source_name)
        except UnicodeDecodeError as e:
            raise ConfigError(f"'{source_name}' is not valid UTF-8", source_name) from e


def parse_secrets(lines: Iterable[str], source_name: str) -> Credential:
    """Parse ``KEY=VALUE`` lines into a Credential.

    Stops at the first bad line. Missing keys are only reported once every line
    has been read, DB_URL before API_KEY. A repeated key keeps its last value.
    """
    values: dict[str, str] = {}

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        key, delim, value = line.partition(KEY_VAL_DELIM)
        if not delim:
            raise MalformedLine(source_name, lineno)
        key = key.strip()
        if key not in (DB_URL_KEY, API_KEY_KEY):
            raise UnexpectedKey(key, source_name, lineno)
        value = value.strip()
        if not value:
            raise EmptyValue(source_name, lineno)
        values[key] = value

    for key in (DB_URL_KEY, API_KEY_KEY):
        if key not in values:
            raise MissingKey(key, source_name)

    logger.debug(f"Loaded secrets from {source_name}")
    return Credential(db_url=values[DB_URL_KEY], api_key=values[API_KEY_KEY])
