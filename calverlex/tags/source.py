"""Tag sources

A tag source lists the names of the tags that already exist. It either
returns the full list or raises SourceUnavailableError; the sequencer turns
the latter into "start the day's sequence at a".
"""

# pylint: disable=logging-fstring-interpolation

import json
import logging
from typing import Any, Iterable, Optional, Protocol, Sequence

import requests

from calverlex import USER_AGENT
from calverlex.exceptions import InvalidRepositoryError, SourceUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"

# Tried in order, the first one that answers wins
DEFAULT_ENDPOINTS = (
    "/repos/{owner}/{repo}/tags",
    "/repos/{owner}/{repo}/git/refs/tags",
)

TAG_REF_PREFIX = "refs/tags/"


class TagSource(Protocol):
    """Anything that can list existing tag names"""

    def list_tags(self) -> list[str]:
        """
        Raises:
            SourceUnavailableError: If the tags can't be listed

        Returns:
            list[str]: raw tag names, in no particular order
        """


def parse_repository(repository: str) -> tuple[str, str]:
    """Splits a repository identifier into owner and name

    Args:
        repository (str): ie. "octo-org/octo-repo"

    Raises:
        InvalidRepositoryError: If the identifier isn't exactly owner/repo

    Returns:
        tuple[str, str]: (owner, repo)
    """
    parts = repository.strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidRepositoryError(repository)
    owner, repo = parts
    return owner, repo


def tag_names_from_items(items: Iterable[Any]) -> list[str]:
    """Gets tag names from GitHub API items

    Args:
        items (Iterable[Any]): Items from either the tags endpoint
          ({"name": "25216a", ...}) or the refs endpoint
          ({"ref": "refs/tags/25216a", ...}). Plain strings are taken as names.

    Returns:
        list[str]: The non-empty tag names
    """
    names: list[str] = []
    for item in items:
        if isinstance(item, str):
            name = item
        elif isinstance(item, dict):
            name = item.get("name") or ""
            if not name and isinstance(item.get("ref"), str):
                name = item["ref"].removeprefix(TAG_REF_PREFIX)
        else:
            name = ""
        if name and isinstance(name, str):
            names.append(name)
    return names


def tags_from_refs_json(tag_string: str) -> list[str]:
    """Gets the tag names from a list of refs in json string form

    Args:
        tag_string (str): A json in string form that contains tag information such as:
            '[
                {
                    "ref": "refs/tags/25216a",
                },
                {
                    "ref": "refs/tags/25216b",
                }
            ]'

    Raises:
        SourceUnavailableError: If the string isn't a json list

    Returns:
        list[str]: A list of tag names, ie. ["25216a", "25216b"]
    """
    try:
        tag_list = json.loads(tag_string)
    except ValueError as exc:
        raise SourceUnavailableError("TAGS", [f"not valid json: {exc}"]) from exc
    if not isinstance(tag_list, list):
        raise SourceUnavailableError(
            "TAGS", [f"expected a json list, got {type(tag_list).__name__}"]
        )
    return tag_names_from_items(tag_list)


class StaticTagSource:
    """Tag source over a list already in memory"""

    def __init__(self, tags: Sequence[str]) -> None:
        self.tags = list(tags)

    def list_tags(self) -> list[str]:
        return list(self.tags)


class RefsJsonTagSource:
    """Tag source over a json list of refs, ie. the output of
    `gh api repos/{owner}/{repo}/git/refs/tags`"""

    def __init__(self, tag_string: str) -> None:
        self.tag_string = tag_string

    def list_tags(self) -> list[str]:
        tags = tags_from_refs_json(self.tag_string)
        logger.info(f"Read {len(tags)} tags from json refs")
        return tags


class GitHubTagSource:
    """Lists the tags of a GitHub repository through the REST API.

    Each endpoint is paginated by following the `Link: rel="next"` header.
    A transport error, an error status, or a body that isn't a json list
    fails that endpoint and the next one is tried.
    """

    def __init__(
        self,
        repository: str,
        token: str,
        api_url: str = DEFAULT_API_URL,
        api_version: str = DEFAULT_API_VERSION,
        endpoints: Sequence[str] = DEFAULT_ENDPOINTS,
        per_page: int = 100,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            repository (str): owner/repo
            token (str): token sent as a bearer credential
            api_url (str, optional): base url of the API
            api_version (str, optional): value of the X-GitHub-Api-Version header
            endpoints (Sequence[str], optional): url path templates with
              {owner} and {repo} placeholders, tried in order
            per_page (int, optional): page size requested from the API
            timeout (float, optional): seconds to wait for each response
            session (Optional[requests.Session], optional): Defaults to a new session.

        Raises:
            InvalidRepositoryError: If repository isn't owner/repo
        """
        self.repository = repository
        self.owner, self.repo = parse_repository(repository)
        self.api_url = api_url.rstrip("/")
        self.endpoints = list(endpoints)
        self.per_page = per_page
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": api_version,
            **USER_AGENT,
        }

    def endpoint_urls(self) -> list[str]:
        """
        Returns:
            list[str]: The full url of every endpoint, in the order they are tried
        """
        return [
            self.api_url + template.format(owner=self.owner, repo=self.repo)
            for template in self.endpoints
        ]

    def list_tags(self) -> list[str]:
        attempts: list[str] = []
        for url in self.endpoint_urls():
            logger.debug(f"Trying API endpoint: {url}")
            try:
                tags = self._fetch_all_pages(url)
            except (requests.RequestException, ValueError) as exc:
                logger.debug(f"Failed to fetch from {url}: {exc}")
                attempts.append(f"{url}: {exc}")
                continue
            logger.info(f"Successfully fetched {len(tags)} tags from {url}")
            return tags
        raise SourceUnavailableError(self.repository, attempts)

    def _fetch_all_pages(self, url: str) -> list[str]:
        tags: list[str] = []
        params: Optional[dict[str, int]] = {"per_page": self.per_page}
        next_url: Optional[str] = url
        while next_url:
            response = self.session.get(
                next_url, headers=self.headers, params=params, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, list):
                raise ValueError(
                    f"expected a json list, got {type(data).__name__}"
                )
            tags.extend(tag_names_from_items(data))
            # the next link already carries the query string
            params = None
            next_url = (response.links or {}).get("next", {}).get("url")
        return tags
