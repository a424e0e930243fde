"""Next tag policy

A tag is a date prefix followed by a letter suffix, ie. 25216a. Within one
prefix the suffixes count up a, b, ..., z, aa, ab, ...; a new prefix starts
again at a. No counter is stored anywhere: every run reads either the
previous version or the existing tags and decides from those.
"""

# pylint: disable=logging-fstring-interpolation

import logging
import re
from typing import Any, Iterable, NamedTuple, Optional, Union

from calverlex.exceptions import (
    FormatError,
    SourceUnavailableError,
    VersionFormatError,
)
from calverlex.tags.date_prefix import Instant, compute_date_prefix
from calverlex.tags.source import TagSource
from calverlex.tags.suffix import decode, encode, successor

logger = logging.getLogger(__name__)

# ASCII digits only, always matched with fullmatch
VERSION_RE = re.compile(r"(?P<prefix>[0-9]{5,7})(?P<suffix>[a-z]+)")

FIRST_SUFFIX = encode(1)


class ParsedVersion(NamedTuple):
    """A tag split into its two parts"""

    prefix: str
    suffix: str


def parse_version(version: str) -> ParsedVersion:
    """Splits a tag into date prefix and suffix

    Args:
        version (str): ie. "25216a" or "2025216abc"

    Raises:
        VersionFormatError: If the version isn't 5-7 digits followed by a-z letters

    Returns:
        ParsedVersion: ie. ParsedVersion(prefix="25216", suffix="a")
    """
    match = VERSION_RE.fullmatch(version) if isinstance(version, str) else None
    if not match:
        raise VersionFormatError(str(version))
    return ParsedVersion(match.group("prefix"), match.group("suffix"))


def matching_suffixes(candidates: Iterable[Any], prefix: str) -> list[str]:
    """Gets the suffixes of the candidates that are tags for `prefix`

    Args:
        candidates (Iterable[Any]): raw tag names
        prefix (str): the date prefix, ie. "25216"

    Returns:
        list[str]: the letters after the prefix of every matching candidate
    """
    pattern = re.compile(f"{re.escape(prefix)}([a-z]+)")
    suffixes: list[str] = []
    for candidate in candidates:
        if not isinstance(candidate, str):
            logger.debug(f"Skipping tag that is not a string: {candidate!r}")
            continue
        match = pattern.fullmatch(candidate)
        if match:
            suffixes.append(match.group(1))
    return suffixes


class TagSequencer:
    """Computes the next tag for today's date prefix.

    The prefix is computed once, when the sequencer is created, so every
    method of one instance agrees on what "today" is.
    """

    def __init__(
        self,
        year_format: Union[str, int] = "2",
        instant: Optional[Instant] = None,
        prefix: Optional[str] = None,
    ) -> None:
        """
        Args:
            year_format (Union[str, int], optional): "2" or "4". Defaults to "2".
            instant (Optional[Instant], optional): the moment to take the date
              from. Defaults to now (UTC).
            prefix (Optional[str], optional): use this prefix instead of
              computing one. year_format and instant are ignored when given.

        Raises:
            InvalidYearFormatError: If year_format isn't "2" or "4"
        """
        if prefix is None:
            prefix = compute_date_prefix(instant, year_format)
        self.prefix = prefix

    def first_tag(self) -> str:
        """
        Returns:
            str: The first tag of the day, ie. "25216a"
        """
        return self.prefix + FIRST_SUFFIX

    def next_from_version(self, version: str) -> str:
        """Computes the tag that follows a previously issued one

        Args:
            version (str): the previous tag, ie. "25216a"

        Raises:
            VersionFormatError: If version isn't a tag

        Returns:
            str: the previous suffix plus one when the prefix is still today's,
              otherwise today's first tag
        """
        logger.info(f"Using provided current version: {version}")
        current = parse_version(version)
        if current.prefix != self.prefix:
            logger.info(
                f"Date changed from {current.prefix} to {self.prefix}, "
                f"starting with suffix '{FIRST_SUFFIX}'"
            )
            return self.first_tag()

        next_suffix = successor(current.suffix)
        logger.info(f"Incremented suffix from {current.suffix} to {next_suffix}")
        return self.prefix + next_suffix

    def next_from_candidates(self, candidates: Iterable[Any]) -> str:
        """Computes the tag that follows the highest existing tag for today

        Candidates from other days, or that aren't tags at all, are ignored.

        Args:
            candidates (Iterable[Any]): existing tag names

        Returns:
            str: today's prefix with the highest suffix found plus one
        """
        highest = 0
        matching: list[str] = []
        for suffix in matching_suffixes(candidates, self.prefix):
            tag = self.prefix + suffix
            try:
                number = decode(suffix)
            except FormatError as exc:
                logger.debug(f"Skipping invalid tag {tag}: {exc}")
                continue
            matching.append(tag)
            highest = max(highest, number)

        logger.info(
            f"Found {len(matching)} matching tags for prefix {self.prefix}: "
            f"{', '.join(matching)}"
        )
        next_suffix = encode(highest + 1)
        if highest > 0:
            logger.info(f"Incremented from {encode(highest)} to {next_suffix}")
        else:
            logger.info(
                f"No existing tags found for today, starting with {next_suffix}"
            )
        return self.prefix + next_suffix

    def next_from_source(self, source: TagSource) -> str:
        """Lists the existing tags and computes the one that follows

        An unavailable source is not an error: the day's sequence then
        starts at a.

        Args:
            source (TagSource): where the existing tags are listed from

        Returns:
            str: the next tag
        """
        try:
            tags = source.list_tags()
        except SourceUnavailableError as exc:
            logger.debug(str(exc))
            logger.info(
                f"Could not list existing tags, starting with suffix \"{FIRST_SUFFIX}\""
            )
            return self.first_tag()
        return self.next_from_candidates(tags)

    def next_tag(
        self,
        current_version: Optional[str] = None,
        source: Optional[TagSource] = None,
    ) -> str:
        """Computes the next tag from whichever input is given

        Args:
            current_version (Optional[str], optional): the previous tag. When
              given, the source is never consulted.
            source (Optional[TagSource], optional): where existing tags are listed from

        Raises:
            ValueError: If neither input is given
            VersionFormatError: If current_version isn't a tag

        Returns:
            str: the next tag
        """
        if current_version:
            return self.next_from_version(current_version)
        if source is None:
            raise ValueError("Either a current version or a tag source is needed")
        return self.next_from_source(source)
