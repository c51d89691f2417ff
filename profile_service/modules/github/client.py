"""
GitHub repository listing for a profile's ``githubusername``.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from profile_service.config import settings
from profile_service.core.errors import UpstreamNotFound, UpstreamUnavailable

logger = logging.getLogger(__name__)

NO_GITHUB_PROFILE_MSG = "No profile found"


class GithubClient:
    """Thin wrapper over the GitHub REST ``/users/{username}/repos`` endpoint."""

    def __init__(self, client: Optional[httpx.Client] = None):
        self._client = client

    def _params(self) -> dict:
        return {
            "per_page": settings.github_repos_per_page,
            "sort": settings.github_repos_sort,
            "client_id": settings.github_client_id,
            "client_secret": settings.github_client_secret,
        }

    def _get(self, url: str) -> httpx.Response:
        headers = {"User-Agent": settings.github_user_agent}
        if self._client is not None:
            return self._client.get(url, params=self._params(), headers=headers)
        with httpx.Client() as client:
            return client.get(url, params=self._params(), headers=headers)

    def list_repos(self, username: str) -> Any:
        """
        Return GitHub's JSON body for the user's latest repositories.

        Raises:
            UpstreamNotFound when GitHub answers with anything but 200.
            UpstreamUnavailable when GitHub cannot be reached or the body is not JSON.
        """
        url = f"{settings.github_api_url.rstrip('/')}/users/{quote(username, safe='')}/repos"
        try:
            response = self._get(url)
        except httpx.TransportError as e:
            logger.error("GitHub request for %s failed: %s", username, e)
            raise UpstreamUnavailable(f"GitHub unreachable: {e}") from e

        if response.status_code != 200:
            logger.warning("GitHub returned %s for %s", response.status_code, username)
            raise UpstreamNotFound(NO_GITHUB_PROFILE_MSG)

        try:
            return response.json()
        except ValueError as e:
            logger.error("GitHub returned a non-JSON body for %s", username)
            raise UpstreamUnavailable("GitHub returned an invalid body") from e


def get_github_client() -> GithubClient:
    return GithubClient()
