"""Testing for Configuration module"""

import pytest
from pydantic import ValidationError

from calverlex.configuration.dataclasses import GitHubConfig, TagConfig
from calverlex.configuration.configuration import (
    Configuration,
    ConfigNonAllowedFieldError,
)
from calverlex.exceptions import ConfigurationError


class TestDataclasses:
    """Testing for pydantic dataclasses"""

    def test_github_config(self) -> None:
        """Testing for GitHubConfig"""
        assert isinstance(GitHubConfig(), GitHubConfig)
        assert isinstance(
            GitHubConfig(
                api_url="https://github.example.com/api/v3",
                api_version="2022-11-28",
                endpoints=["/repos/{owner}/{repo}/tags"],
                per_page=10,
                timeout=5,
            ),
            GitHubConfig,
        )
        with pytest.raises(ValidationError):
            GitHubConfig(api_url="")
        with pytest.raises(ValidationError):
            GitHubConfig(endpoints=[])
        with pytest.raises(ValidationError):
            GitHubConfig(endpoints=["/repos/{owner}/tags"])
        with pytest.raises(ValidationError):
            GitHubConfig(per_page=0)
        with pytest.raises(ValidationError):
            GitHubConfig(per_page=101)
        with pytest.raises(ValidationError):
            GitHubConfig(timeout=0)

    def test_github_config_forbids_extra_fields(self) -> None:
        """Testing that unknown keys are rejected"""
        with pytest.raises((ValidationError, TypeError)):
            GitHubConfig(token="secret")  # type: ignore

    def test_tag_config(self) -> None:
        """Testing for TagConfig"""
        assert TagConfig().year_format == "2"
        assert TagConfig(year_format="4").year_format == "4"
        assert TagConfig(year_format=4).year_format == "4"
        with pytest.raises(ValidationError):
            TagConfig(year_format="3")

    def test_validate_assignment(self) -> None:
        """Testing that values are validated after creation"""
        config = TagConfig()
        config.year_format = "4"
        assert config.year_format == "4"
        with pytest.raises(ValidationError):
            config.year_format = "yy"


class TestConfiguration:
    """Testing Configuration class"""

    def test_init(self) -> None:
        """Testing for Configuration.__init__"""
        config = Configuration()
        assert config.config_path is None
        assert config.github_api_url == "https://api.github.com"
        assert config.github_api_version == "2022-11-28"
        assert config.github_endpoints == [
            "/repos/{owner}/{repo}/tags",
            "/repos/{owner}/{repo}/git/refs/tags",
        ]
        assert config.github_per_page == 100
        assert config.github_timeout == 30.0
        assert config.year_format == "2"

    def test_load_config(self, config: Configuration, helpers) -> None:
        """Testing for Configuration.load_config"""
        config_path = helpers.get_data_path("config.yml")
        config.load_config(config_path)
        assert config.config_path == config_path
        assert config.github_api_url == "https://github.example.com/api/v3"
        assert config.github_endpoints == ["/repos/{owner}/{repo}/git/refs/tags"]
        assert config.github_per_page == 50
        assert config.github_timeout == 10
        assert config.year_format == "4"

    def test_load_empty_config(self, config: Configuration, helpers) -> None:
        """Testing that an empty file keeps the defaults"""
        config.load_config(helpers.get_data_path("config_empty.yml"))
        assert config.github_api_url == "https://api.github.com"
        assert config.year_format == "2"

    def test_load_config_not_allowed_field(self, config: Configuration, helpers) -> None:
        """Testing for a top level key that doesn't exist"""
        with pytest.raises(ConfigNonAllowedFieldError) as exc_info:
            config.load_config(helpers.get_data_path("config_not_allowed_field.yml"))
        assert "tags" in str(exc_info.value)
        assert isinstance(exc_info.value, ConfigurationError)

    def test_load_config_invalid_value(self, config: Configuration, tmp_path) -> None:
        """Testing for a value the dataclasses reject"""
        config_path = tmp_path / "config.yml"
        config_path.write_text("tag:\n  year_format: 3\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            config.load_config(str(config_path))

    def test_year_format_read_only(self, config: Configuration) -> None:
        """Testing that the year format only comes from a config file"""
        with pytest.raises(AttributeError):
            config.year_format = "4"  # type: ignore
        assert config.year_format == "2"
