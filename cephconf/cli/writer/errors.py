"""Custom exceptions for config file writing."""


class ConfigWriteError(Exception):
    """Raised when a config file could not be produced."""

    action = "produce"

    def __init__(self, filename: str, cause: BaseException):
        """Initialize config write error.

        Args:
            filename: Name of the config file being written
            cause: Underlying exception
        """
        super().__init__(f"Couldn't {self.action} {filename}: {cause}")
        self.filename = filename
        self.cause = cause


class OpenError(ConfigWriteError):
    """Raised when the config file cannot be created, truncated or opened."""

    action = "write"


class RenderError(ConfigWriteError):
    """Raised when the template cannot be rendered into the config file."""

    action = "render"
