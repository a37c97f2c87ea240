"""Client for the post generation proxy endpoint."""

import logging
from collections.abc import Sequence
from typing import Any

import backoff
import requests

from sfm.core.constants import DEFAULT_SERVER_URL, GENERATE_POSTS_PATH, APIConstants, ErrorMessages
from sfm.exceptions import APIError, FeedServiceError
from sfm.models.post import Platform, Post


class FeedAPIClient:
    """Client for fetching generated posts from the proxy."""

    def __init__(self, base_url: str | None = None, timeout: float = APIConstants.REQUEST_TIMEOUT) -> None:
        """Initialize the API client.

        Args:
            base_url: Proxy base URL (defaults to the local server)
            timeout: Request timeout in seconds
        """
        self.logger = logging.getLogger(__name__)
        self.base_url = (base_url or DEFAULT_SERVER_URL).rstrip("/")
        self.timeout = timeout
        self.session: requests.Session | None = None

    def __enter__(self) -> "FeedAPIClient":
        """Enter context."""
        self.logger.debug("Opening client session")
        self.session = requests.Session()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        if self.session:
            self.session.close()
            self.session = None
            self.logger.debug("Client session closed")

    @property
    def url(self) -> str:
        """Full URL of the generation endpoint."""
        return f"{self.base_url}{GENERATE_POSTS_PATH}"

    @backoff.on_exception(
        backoff.expo,
        (requests.exceptions.ConnectionError,),
        max_tries=APIConstants.BACKOFF_MAX_TRIES,
        factor=APIConstants.BACKOFF_FACTOR,
        max_value=APIConstants.BACKOFF_MAX_VALUE,
    )
    def _post(self, payload: dict[str, Any]) -> requests.Response:
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")
        return self.session.post(self.url, json=payload, timeout=self.timeout)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the error message from an error response."""
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"Request failed with status {response.status_code}"

    def fetch_posts(self, keywords: Sequence[str], platforms: Sequence[Platform] | None = None) -> list[Post]:
        """Fetch generated posts for a keyword search.

        Args:
            keywords: Search keywords
            platforms: Allowed platforms (all platforms if omitted)

        Returns:
            Posts returned by the proxy

        Raises:
            FeedServiceError: If the request fails or the response is malformed
        """
        if not keywords:
            return []

        payload: dict[str, Any] = {"keywords": list(keywords)}
        if platforms is not None:
            payload["platforms"] = [str(p) for p in platforms]

        self.logger.debug(f"POST {self.url} keywords={payload['keywords']}")

        try:
            response = self._post(payload)
            if not response.ok:
                raise APIError(response.status_code, self._error_message(response), response.text)
            data = response.json()
            if not isinstance(data, list):
                raise ValueError("Expected a JSON array of posts")
            return [Post.model_validate(item) for item in data]
        except APIError as e:
            self.logger.error(f"Error fetching posts: {e}")
            if e.response_text:
                self.logger.debug(f"Response body: {e.response_text}")
            raise FeedServiceError(ErrorMessages.FEED_FETCH_FAILED.format(details=e), e.status_code) from e
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Error fetching posts: {e}")
            raise FeedServiceError(ErrorMessages.FEED_FETCH_FAILED.format(details=e)) from e
