"""Configuration singleton for the calverlex Package"""

from typing import Optional, Any
import os
import yaml
from calverlex.exceptions import ConfigurationError
from .dataclasses import GitHubConfig, TagConfig


class ConfigNonAllowedFieldError(ConfigurationError):
    """Raised when a user submitted config file contains non allowed fields"""

    def __init__(
        self, message: str, fields: list[str], allowed_fields: list[str]
    ) -> None:
        """
        Args:
            message (str):  A message describing the error
            fields (list[str]): The fields in the config
            allowed_fields (list[str]): The allowed fields in the config
        """
        self.message = message
        self.fields = fields
        self.allowed_fields = allowed_fields
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation"""
        return (
            f"{self.message}; "
            f"config contains fields: {self.fields}; "
            f"allowed fields: {self.allowed_fields}"
        )


class Configuration:
    """
    This class is used as a singleton by the rest of the package.
    It is instantiated only once at the bottom of this file, and that
     instance is imported by other modules
    """

    def __init__(self) -> None:
        self.config_path: Optional[str] = None
        self._github_config = GitHubConfig()
        self._tag_config = TagConfig()

    def load_config(self, config_path: str) -> None:
        """Loads a user created config file and overwrites any defaults  listed in the file

        Args:
            config_path (str): The path to the config file

        Raises:
            ConfigNonAllowedFieldError: If there are non allowed fields in the config file
        """
        allowed_config_fields = {"github", "tag"}
        config_path = os.path.expanduser(config_path)
        config_path = os.path.abspath(config_path)
        self.config_path = config_path

        with open(config_path, "r", encoding="utf-8") as file:
            config: dict[str, Any] = yaml.safe_load(file) or {}
        if not set(config.keys()).issubset(allowed_config_fields):
            raise ConfigNonAllowedFieldError(
                "Non allowed fields in top level of configuration file.",
                list(config.keys()),
                list(allowed_config_fields),
            )

        self._github_config = GitHubConfig(**(config.get("github") or {}))
        self._tag_config = TagConfig(**(config.get("tag") or {}))

    @property
    def github_api_url(self) -> str:
        """
        Returns:
            str: Base url of the GitHub REST API
        """
        return self._github_config.api_url

    @property
    def github_api_version(self) -> str:
        """
        Returns:
            str: Value of the X-GitHub-Api-Version header
        """
        return self._github_config.api_version

    @property
    def github_endpoints(self) -> list[str]:
        """
        Returns:
            list[str]: Url path templates listing tags, in the order they are tried
        """
        return self._github_config.endpoints

    @property
    def github_per_page(self) -> int:
        """
        Returns:
            int: Page size requested from the API
        """
        return self._github_config.per_page

    @property
    def github_timeout(self) -> float:
        """
        Returns:
            float: Seconds to wait for each response
        """
        return self._github_config.timeout

    @property
    def year_format(self) -> str:
        """
        Returns:
            str: "2" or "4", the number of year digits in the date prefix
        """
        return self._tag_config.year_format


# This instantiates the singleton for the rest of the package
CONFIG = Configuration()
