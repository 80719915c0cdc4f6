"""Single-request HTTP transport."""

import logging
from typing import Optional

import httpx

from ..errors import BodyReadError, TransportError, UnexpectedStatus

logger = logging.getLogger(__name__)


class Transport:
    """Issue one blocking GET per call and return the raw body.

    Holds no per-call state, so one instance can serve concurrent callers.
    There are no retries and no timeout settings beyond httpx's defaults.
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize transport; ``http_client`` is used as-is when given."""
        if http_client is None:
            headers = {"Accept": "application/json"}
            if user_agent:
                headers["User-Agent"] = user_agent
            http_client = httpx.Client(headers=headers)
        self._client = http_client

    def get(self, url: str) -> bytes:
        """Fetch ``url`` and return the full response body.

        Raises:
            TransportError: The request could not be completed
            UnexpectedStatus: The status was not 200; the body is not read
            BodyReadError: The status was 200 but the body could not be read
        """
        logger.debug("GET %s", url)
        try:
            with self._client.stream("GET", url) as response:
                if response.status_code != httpx.codes.OK:
                    logger.debug("GET %s -> %s", url, response.status_code)
                    raise UnexpectedStatus(url, response.status_code)
                try:
                    body = response.read()
                except httpx.HTTPError as e:
                    raise BodyReadError(url, e) from e
        except httpx.HTTPError as e:
            raise TransportError(url, e) from e

        logger.debug("GET %s -> %d bytes", url, len(body))
        return body

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
