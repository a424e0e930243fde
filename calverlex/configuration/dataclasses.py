"""Pydantic dataclasses"""

from dataclasses import field

from pydantic import ConfigDict, field_validator
from pydantic.dataclasses import dataclass

from calverlex.tags.source import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    DEFAULT_ENDPOINTS,
)

# This turns on validation for value assignments after creation
pydantic_config = ConfigDict(validate_assignment=True, extra="forbid")


@dataclass(config=pydantic_config)
class GitHubConfig:
    """
    api_url: Base url of the GitHub REST API
    api_version: Value sent in the X-GitHub-Api-Version header
    endpoints: Url path templates listing tags, tried in order until one answers.
      Each needs the {owner} and {repo} placeholders.
    per_page: Page size requested from the API (GitHub allows at most 100)
    timeout: Seconds to wait for each response
    """

    api_url: str = DEFAULT_API_URL
    api_version: str = DEFAULT_API_VERSION
    endpoints: list[str] = field(default_factory=lambda: list(DEFAULT_ENDPOINTS))
    per_page: int = 100
    timeout: float = 30.0

    @field_validator("api_url", "api_version")
    @classmethod
    def validate_string_is_not_empty(cls, value: str) -> str:
        """Check if string  is not empty(has at least one char)

        Args:
            value (str): A string

        Raises:
            ValueError: If the value is zero characters long

        Returns:
            (str): The input value
        """
        if not value:
            raise ValueError(f"{value} is an empty string")
        return value

    @field_validator("endpoints")
    @classmethod
    def validate_endpoints(cls, value: list[str]) -> list[str]:
        """Check that there is at least one endpoint and each names the repository

        Args:
            value (list[str]): url path templates

        Raises:
            ValueError: If the list is empty or a template lacks {owner} or {repo}

        Returns:
            (list[str]): The input value
        """
        if not value:
            raise ValueError("at least one endpoint is needed")
        for endpoint in value:
            if "{owner}" not in endpoint or "{repo}" not in endpoint:
                raise ValueError(
                    f"{endpoint} needs both the {{owner}} and {{repo}} placeholders"
                )
        return value

    @field_validator("per_page")
    @classmethod
    def validate_per_page(cls, value: int) -> int:
        """Check the page size is one GitHub accepts"""
        if not 1 <= value <= 100:
            raise ValueError(f"{value} is not between 1 and 100")
        return value

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Check the timeout is positive"""
        if value <= 0:
            raise ValueError(f"{value} is not a positive number of seconds")
        return value


@dataclass(config=pydantic_config)
class TagConfig:
    """
    year_format: "2" for a two digit year in the date prefix, "4" for four digits
    """

    year_format: str = "2"

    @field_validator("year_format", mode="before")
    @classmethod
    def validate_year_format(cls, value: object) -> str:
        """Check the year format is "2" or "4"

        Args:
            value (object): A string or an int, yaml reads 2 as an int

        Raises:
            ValueError: If the value is anything else

        Returns:
            (str): The value as a string
        """
        if str(value) not in ("2", "4"):
            raise ValueError(f"{value} is not a valid year format, use 2 or 4")
        return str(value)
