"""calverlex Exceptions"""
from typing import Optional, Sequence


class CalVerLexError(Exception):
    """Base class for every error raised by calverlex."""


class ConfigurationError(CalVerLexError):
    """Raised when a required input is absent or malformed. Always fatal."""


class MissingInputError(ConfigurationError):
    """Exception raised when an input is provided neither as a CLI argument
    nor through one of its environment variables.

    Args:
        arg_name: CLI argument name.
        envvars: environment variables the value may be taken from.
        message: custom/pre-defined error message to be returned.

    Returns:
        message.
    """

    def __init__(
        self, arg_name: str, envvars: Sequence[str], message: Optional[str] = None
    ) -> None:
        envvars_str = ", ".join(envvars)
        self.message = (
            f"The value corresponding to the CLI argument '--{arg_name}'"
            " doesn't exist. "
            "Please provide a value for either the CLI argument or "
            f"one of the environment variables ({envvars_str})."
        )

        if message:
            self.message = message

        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"


class InvalidRepositoryError(ConfigurationError):
    """Exception raised when a repository identifier is not `owner/repo`.

    Args:
        repository: the identifier as given.
        message: custom/pre-defined error message to be returned.

    Returns:
        message.
    """

    def __init__(self, repository: str, message: Optional[str] = None) -> None:
        self.repository = repository
        self.message = (
            f"Invalid repository format: {repository}. Expected format: owner/repo"
        )

        if message:
            self.message = message

        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"


class InvalidYearFormatError(ConfigurationError):
    """Exception raised when the year format is neither "2" nor "4"."""

    def __init__(self, year_format: object) -> None:
        self.year_format = year_format
        self.message = (
            f"Invalid year format: {year_format!r}. Allowed values are '2' and '4'."
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"


class FormatError(CalVerLexError, ValueError):
    """Raised when a tag or suffix does not follow the DatePrefix + Suffix grammar."""


class VersionFormatError(FormatError):
    """Exception raised when a version string can't be split into
    a date prefix and a letter suffix.

    Args:
        version: the offending version string.
        message: custom/pre-defined error message to be returned.

    Returns:
        message.
    """

    def __init__(self, version: str, message: Optional[str] = None) -> None:
        self.version = version
        self.message = (
            f"Invalid version format: {version}. "
            "Expected format: YYWWDx (e.g., 25216a)"
        )

        if message:
            self.message = message

        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"


class InvalidSuffixCharacterError(FormatError):
    """Exception raised when a suffix contains something other than a-z.

    Args:
        character: the first offending character, or "" for an empty suffix.
        suffix: the suffix being decoded.
    """

    def __init__(self, character: str, suffix: str) -> None:
        self.character = character
        self.suffix = suffix
        if character:
            self.message = (
                f"Invalid suffix character: {character}. "
                "Only lowercase letters a-z are allowed."
            )
        else:
            self.message = "Invalid suffix: a suffix needs at least one letter."
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"


class SourceUnavailableError(CalVerLexError):
    """Exception raised when no tag source endpoint could be read.

    Args:
        source: a description of the source (usually the repository).
        attempts: one line per failed attempt.
        message: custom/pre-defined error message to be returned.

    Returns:
        message.
    """

    def __init__(
        self,
        source: str,
        attempts: Optional[Sequence[str]] = None,
        message: Optional[str] = None,
    ) -> None:
        self.source = source
        self.attempts = list(attempts or [])
        self.message = f"Could not fetch tags for '{source}'"
        if self.attempts:
            self.message += ": " + "; ".join(self.attempts)

        if message:
            self.message = message

        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"
