"""Exceptions raised by the dashboard models and services."""


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class InvalidLanguageError(DashboardError, ValueError):
    """Raised when a language code is not one of the supported languages."""

    def __init__(self, code, supported):
        self.code = code
        self.supported = tuple(supported)
        super().__init__(f"Unsupported language code {code!r}; expected one of {self.supported}")


class UniversityNotFoundError(DashboardError, LookupError):
    """Raised when a university name does not match any record in the dataset."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"No university named {name!r}")


class MissingTranslationError(DashboardError, LookupError):
    """Raised when a localization entry lacks a required display string."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Missing translation {key!r}")
