"""tag commands"""
# pylint: disable=unused-argument
# pylint: disable=logging-fstring-interpolation

import logging
import sys
from datetime import datetime
from typing import Any, Optional

import click
import click_log  # type: ignore
import yaml

from calverlex.configuration.configuration import CONFIG, Configuration
from calverlex.exceptions import CalVerLexError, ConfigurationError, MissingInputError
from calverlex.help import tag_commands
from calverlex.tags.date_prefix import compute_date_prefix
from calverlex.tags.sequencer import TagSequencer
from calverlex.tags.source import GitHubTagSource, RefsJsonTagSource, TagSource
from calverlex.utils.actions_utils import (
    running_in_actions,
    use_actions_annotations,
    write_output,
)
from calverlex.utils.cli_utils import log_value_from_config, query_dict, strip_or_none

logger = logging.getLogger(__name__)
# the only place the "calverlex" logger gets its handler; __main__ reuses it
package_logger = click_log.basic_config("calverlex")

CONTEXT_SETTINGS = {"help_option_names": ["--help", "-h"]}  # help options

CURRENT_VERSION_ENVVARS = ["INPUT_CURRENT_VERSION", "CURRENT_VERSION"]
REPOSITORY_ENVVARS = ["INPUT_REPOSITORY", "GITHUB_REPOSITORY"]
TOKEN_ENVVARS = ["INPUT_GITHUB_TOKEN", "GITHUB_TOKEN"]

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def fail(exc: Exception) -> None:
    """Logs a fatal error and exits with status 1"""
    logger.error(f"calverlex failed: {exc}")
    sys.exit(1)


def build_tag_source(
    config: Configuration,
    repository: Optional[str],
    token: Optional[str],
    tags_json: Optional[str],
) -> TagSource:
    """Picks where the existing tags are listed from

    Args:
        config (Configuration): supplies the GitHub API settings
        repository (Optional[str]): owner/repo
        token (Optional[str]): GitHub token
        tags_json (Optional[str]): json list of refs, used instead of the API when given

    Raises:
        MissingInputError: If the API is needed and the token or repository is missing
        InvalidRepositoryError: If repository isn't owner/repo

    Returns:
        TagSource: the source to list tags from
    """
    if tags_json:
        logger.info("Reading existing tags from json refs...")
        return RefsJsonTagSource(tags_json)
    if not token:
        raise MissingInputError("token", TOKEN_ENVVARS)
    if not repository:
        raise MissingInputError("repository", REPOSITORY_ENVVARS)

    logger.info("Fetching existing tags from GitHub API...")
    return GitHubTagSource(
        repository,
        token,
        api_url=config.github_api_url,
        api_version=config.github_api_version,
        endpoints=config.github_endpoints,
        per_page=config.github_per_page,
        timeout=config.github_timeout,
    )


def resolve_year_format(config: Configuration, year_format: Optional[str]) -> str:
    """Takes the year format from the CLI, falling back to the config"""
    if year_format is None:
        year_format = config.year_format
        log_value_from_config("year_format", year_format)
    return year_format


# invoke_without_command=True -> forces the application not to show aids before
# losing them with a --h
@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click_log.simple_verbosity_option(package_logger)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    envvar="CALVERLEX_CONFIG",
    help=query_dict(tag_commands, ("tag", "config")),
)
@click.pass_context
def tag(ctx: Any, config: Optional[str]) -> None:  # use as `calverlex tag ...`
    """
    Sub-commands for computing CalVer tags.
    """
    if running_in_actions():
        use_actions_annotations(package_logger)
    if config:
        try:
            logger.debug(f"Loading config file contents in '{config}'")
            CONFIG.load_config(config)
        except (ValueError, yaml.YAMLError, ConfigurationError) as exc:
            logger.error(f"Could not load the config file '{config}'.")
            fail(exc)
    ctx.obj = CONFIG


@tag.command(
    "next",
    short_help=query_dict(tag_commands, ("tag", "next", "short_help")),
)
@click_log.simple_verbosity_option(package_logger)
@click.option(
    "--current-version",
    "current_version",
    envvar=CURRENT_VERSION_ENVVARS,
    callback=strip_or_none,
    help=query_dict(tag_commands, ("tag", "next", "current_version")),
)
@click.option(
    "-r",
    "--repository",
    envvar=REPOSITORY_ENVVARS,
    callback=strip_or_none,
    help=query_dict(tag_commands, ("tag", "next", "repository")),
)
@click.option(
    "-t",
    "--token",
    envvar=TOKEN_ENVVARS,
    callback=strip_or_none,
    help=query_dict(tag_commands, ("tag", "next", "token")),
)
@click.option(
    "-y",
    "--year-format",
    "year_format",
    type=click.Choice(["2", "4"]),
    envvar="INPUT_YEAR_FORMAT",
    help=query_dict(tag_commands, ("tag", "next", "year_format")),
)
@click.option(
    "--tags-json",
    "tags_json",
    envvar="TAGS",
    callback=strip_or_none,
    help=query_dict(tag_commands, ("tag", "next", "tags_json")),
)
@click.option(
    "-d",
    "--date",
    "date",
    type=click.DateTime(formats=DATE_FORMATS),
    help=query_dict(tag_commands, ("tag", "next", "date")),
)
@click.pass_obj
def next_tag(
    config: Configuration,
    current_version: Optional[str],
    repository: Optional[str],
    token: Optional[str],
    year_format: Optional[str],
    tags_json: Optional[str],
    date: Optional[datetime],
) -> None:
    """Print the next tag, and set it as the `tag` step output inside a workflow."""
    year_format = resolve_year_format(config, year_format)
    try:
        sequencer = TagSequencer(year_format, instant=date)
        if current_version:
            new_tag = sequencer.next_from_version(current_version)
        else:
            source = build_tag_source(config, repository, token, tags_json)
            new_tag = sequencer.next_from_source(source)
    except CalVerLexError as exc:
        fail(exc)

    click.echo(new_tag)
    if write_output("tag", new_tag):
        logger.debug("Wrote the tag to GITHUB_OUTPUT")


@tag.command(
    "prefix",
    short_help=query_dict(tag_commands, ("tag", "prefix", "short_help")),
)
@click_log.simple_verbosity_option(package_logger)
@click.option(
    "-y",
    "--year-format",
    "year_format",
    type=click.Choice(["2", "4"]),
    envvar="INPUT_YEAR_FORMAT",
    help=query_dict(tag_commands, ("tag", "next", "year_format")),
)
@click.option(
    "-d",
    "--date",
    "date",
    type=click.DateTime(formats=DATE_FORMATS),
    help=query_dict(tag_commands, ("tag", "next", "date")),
)
@click.pass_obj
def prefix(
    config: Configuration, year_format: Optional[str], date: Optional[datetime]
) -> None:
    """Print the date prefix tags get today."""
    year_format = resolve_year_format(config, year_format)
    click.echo(compute_date_prefix(date, year_format))
