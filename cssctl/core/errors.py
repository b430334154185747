"""Domain-specific errors for cssctl."""


class CssctlError(Exception):
    """Base error for cssctl."""


class ProfileValidationError(CssctlError):
    """Raised when an engine profile file does not conform to schema or semantics."""


class ProfileLoadError(CssctlError):
    """Raised when loading engine profile sources fails."""


class ProfileResolutionError(CssctlError):
    """Raised when a requested engine profile is not available."""


class StyleSheetLoadError(CssctlError):
    """Raised when a stylesheet file cannot be read."""


class PropertyValueError(CssctlError):
    """Raised when a property assignment argument is malformed."""
