"""
spdexer custom exceptions.

Every failure is fatal for the run; the CLI is the only place these are
turned into a message and an exit status.
"""


class SpdexerError(Exception):
    """Base exception for all spdexer errors."""


class ConfigurationError(SpdexerError):
    """Raised when the run is misconfigured, before any file is touched."""


class UnknownLicenseError(ConfigurationError):
    """Raised when a license identifier is not in the registry."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown license: {identifier!r}")


class TemplateRenderError(SpdexerError):
    """Raised when a license template cannot be rendered."""


class FilesystemError(SpdexerError):
    """Raised when enumerating, reading or writing a file fails.

    The run stops at the first failure. Files already rewritten stay
    rewritten; files not yet reached are left untouched.
    """

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"{path}: {reason}")
