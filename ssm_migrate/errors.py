"""
Errors raised while migrating parameters.

Every failure is fatal for the run; the CLI turns these into a message on
stderr and a non-zero exit code.
"""

from typing import Optional


class MigrationError(Exception):
    """Base class for migration failures."""

    operation = "migrate parameter"

    def __init__(self, name: Optional[str] = None, cause: Optional[BaseException] = None,
                 message: Optional[str] = None):
        self.name = name
        self.cause = cause
        if message is None:
            message = f"failed to {self.operation}"
            if name:
                message += f" {name}"
            if cause is not None:
                message += f": {cause}"
        super().__init__(message)


class ConfigLoadError(MigrationError):
    """Configuration, profile or credential resolution failed."""

    operation = "load configuration"


class SourceNotFound(MigrationError):
    operation = "get source parameter details, parameter not found:"


class SourceFetchError(MigrationError):
    operation = "get source parameter details for"


class DescriptionNotFound(MigrationError):
    operation = "get source parameter description, parameter not found:"


class DescriptionFetchError(MigrationError):
    operation = "get source parameter description for"


class DestinationWriteError(MigrationError):
    operation = "put destination parameter"
