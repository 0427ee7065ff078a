"""
Exception classes for the Gitea to GitHub issue migrator.
"""


class MigrationError(Exception):
    """Base exception for migration errors."""


class ConfigError(MigrationError):
    """Raised when required configuration is missing or invalid."""


class RateLimitExceededError(MigrationError):
    """Raised when issue creation stays rate limited after every allowed attempt."""

    def __init__(self, title, attempts):
        super().__init__(f"Issue '{title}' still rate limited after {attempts} attempts")
        self.title = title
        self.attempts = attempts
