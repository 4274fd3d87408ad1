"""Custom exceptions for modern-frontend."""


class FrontendError(Exception):
    """Base exception for modern-frontend errors."""

    pass


class FileSystemError(FrontendError):
    """Reading or writing a file failed."""

    pass


class LocalizedError(FrontendError):
    """A business rule was violated (malformed config, duplicate name, ...)."""

    pass


class SettingsError(LocalizedError):
    """The CLI settings file is missing or invalid."""

    pass
