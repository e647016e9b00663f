"""Print the todos of a Notion database, ordered by due date.

The database URL and API key come from the secrets file (``.secrets`` in the
working directory unless ``SECRETS_FILE`` says otherwise)::

    DB_URL=<database_url>
    API_KEY=<api_key>
"""

import sys

from pydantic import ValidationError

from todonotifier.config import get_settings
from todonotifier.exceptions import (
    AuthenticationError,
    ConfigError,
    IntegrationError,
    RateLimitError,
    ResponseShapeError,
)
from todonotifier.logger import logger, set_level
from todonotifier.secrets import read_secrets
from todonotifier.services import notion
from todonotifier.services.report import process_todos

ERRORS_BANNER = "Errors encountered while processing todos:"


def run() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1
    set_level(logger, settings.log_level)

    try:
        credential = read_secrets(settings.secrets_file)
        body = notion.query_database(credential)
        outcome = process_todos(body)
    except (ConfigError, AuthenticationError, RateLimitError, ResponseShapeError, IntegrationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in outcome.lines:
        print(line)

    if outcome.errors:
        print(ERRORS_BANNER, file=sys.stderr)
        for error in outcome.errors:
            print(error, file=sys.stderr)

    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
