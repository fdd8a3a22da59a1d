"""Exceptions raised while parsing and rendering type trees.

Terminal errors abort the current render call without rolling back output
that was already written to the sink.
"""


class TypewriterError(Exception):
    """Base class for all typewriter errors."""


class FragmentNotFoundError(TypewriterError, LookupError):
    """Raised when a fragment is not known or has no file for a language."""

    def __init__(self, language: str, name: str) -> None:
        super().__init__(f"Fragment '{name}' not found for language '{language}'")
        self.language = language
        self.name = name


class FragmentParseError(TypewriterError):
    """Raised when a fragment file exists but is not a valid template."""

    def __init__(self, language: str, name: str, reason: str) -> None:
        super().__init__(f"Fragment '{name}' for language '{language}' is malformed: {reason}")
        self.language = language
        self.name = name


class FragmentRenderError(TypewriterError):
    """Raised when executing a fragment against its context fails."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Fragment '{name}' failed to render: {reason}")
        self.name = name


class MissingTypeError(TypewriterError):
    """Raised when a field or package-level type has no type to render."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No type stored for '{name}'")
        self.name = name


class TagBooleanParseError(TypewriterError, ValueError):
    """Raised when the pointer flag of a ``tw`` tag is not a boolean."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid boolean in tag: {value!r}")
        self.value = value


class RawFragmentParseError(TypewriterError):
    """Raised when literal text passed to the raw helper is not a valid template."""


class SourceParseError(TypewriterError):
    """Raised when Go source cannot be parsed."""


class UnsupportedLanguageError(TypewriterError, ValueError):
    """Raised when no fragment set exists for the requested language."""
