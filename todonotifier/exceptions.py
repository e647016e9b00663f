class AuthenticationError(Exception):
    """Raised when the API key is rejected by the remote API."""


class IntegrationError(Exception):
    """Raised when an external API call fails."""


class RateLimitError(Exception):
    """Raised when an external API rate limit is hit."""


class ResponseShapeError(IntegrationError):
    """Raised when a response body lacks the structure the report needs."""


# --- Secrets file ---


class ConfigError(Exception):
    """Base class for secrets file errors. Always fatal to the parse."""

    def __init__(self, message: str, source_name: str, line: int | None = None, key: str | None = None):
        self.source_name = source_name
        self.line = line
        self.key = key
        super().__init__(message)


class PathNotFound(ConfigError):
    def __init__(self, source_name: str):
        super().__init__(f"'{source_name}' path not found", source_name)


class UnexpectedKey(ConfigError):
    def __init__(self, key: str, source_name: str, line: int):
        super().__init__(f"unexpected key '{key}' at {source_name}:{line}", source_name, line=line, key=key)


class MalformedLine(ConfigError):
    def __init__(self, source_name: str, line: int):
        super().__init__(f"invalid line format at {source_name}:{line}", source_name, line=line)


class EmptyValue(ConfigError):
    def __init__(self, source_name: str, line: int):
        super().__init__(f"value is empty at {source_name}:{line}", source_name, line=line)


class MissingKey(ConfigError):
    def __init__(self, key: str, source_name: str):
        super().__init__(f"{key} value not found in {source_name}", source_name, key=key)


# --- Records ---


class RecordError(Exception):
    """Raised when a single todo cannot be rendered. Never fatal to the report."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"todo {index}: {reason}")
