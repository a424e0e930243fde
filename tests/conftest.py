"""Fixtures and helpers for use across all tests"""
import json
import logging
import os
from typing import Any, Optional

import pytest
import requests

from calverlex.configuration.configuration import Configuration

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

# Silence some very verbose loggers
logging.getLogger("urllib3").setLevel(logging.INFO)


TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(TESTS_DIR, "data")

# Inputs the CLI reads from the environment
CALVERLEX_ENVVARS = [
    "CALVERLEX_CONFIG",
    "CURRENT_VERSION",
    "GITHUB_ACTIONS",
    "GITHUB_OUTPUT",
    "GITHUB_REPOSITORY",
    "GITHUB_TOKEN",
    "INPUT_CURRENT_VERSION",
    "INPUT_GITHUB_TOKEN",
    "INPUT_REPOSITORY",
    "INPUT_YEAR_FORMAT",
    "TAGS",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keeps the runner's own environment (ie. a GitHub workflow) out of the tests"""
    for envvar in CALVERLEX_ENVVARS:
        monkeypatch.delenv(envvar, raising=False)


# This class serves as a container for helper functions that can be
# passed to individual tests using the `helpers` fixture. This approach
# was required because fixture functions cannot take arguments.


class Helpers:
    @staticmethod
    def get_data_path(path, *paths):
        return os.path.join(DATA_DIR, path, *paths)

    @staticmethod
    def get_data_file(path, *paths, **kwargs):
        fullpath = os.path.join(DATA_DIR, path, *paths)
        return open(fullpath, **kwargs)

    @staticmethod
    def make_response(
        body: Any,
        status_code: int = 200,
        next_url: Optional[str] = None,
        url: str = "https://api.github.com/repos/octo-org/octo-repo/tags",
    ) -> requests.Response:
        """Builds a requests.Response the way the GitHub API would send it

        Args:
            body (Any): json serializable body, or bytes sent as they are
            status_code (int, optional): Defaults to 200.
            next_url (Optional[str], optional): url of the next page, sent in a Link header
            url (str, optional): url the response answers

        Returns:
            requests.Response: the response
        """
        response = requests.Response()
        response.status_code = status_code
        response.url = url
        response.encoding = "utf-8"
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
        if next_url:
            response.headers["Link"] = f'<{next_url}>; rel="next"'
        return response


@pytest.fixture(scope="function")
def helpers():
    yield Helpers


@pytest.fixture(scope="function")
def config():
    yield Configuration()
