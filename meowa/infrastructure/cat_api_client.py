"""
TheCatAPI client for fetching the breed catalog.

One GET per call, no retries and no caching. Failures come back as a
`FetchResult` carrying a typed `FetchError` instead of being raised, so
callers (the catalog store, tests) never have to catch `requests` exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

import requests

from meowa.domain.breed import Breed, BreedSchemaError
from meowa.utils.config import breeds_endpoint, cat_api_timeout, cat_image_base_url
from meowa.utils.logger import get_logger

logger = get_logger()


class FetchError(RuntimeError):
    """Base class for breed catalog fetch failures."""

    kind = "fetch_error"

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class InvalidURLError(FetchError):
    """The configured endpoint is not a usable http(s) URL."""

    kind = "invalid_url"


class TransportError(FetchError):
    """Network-level failure: DNS, connection refused, timeout, TLS."""

    kind = "transport_error"


class InvalidResponseError(FetchError):
    """The server answered with a status other than 200."""

    kind = "invalid_response"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(FetchError):
    """The body is not a JSON array of breed objects."""

    kind = "decode_error"


@dataclass(frozen=True)
class FetchResult:
    """Either the decoded breeds (`ok`) or the error that prevented them."""

    breeds: tuple[Breed, ...] = ()
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, breeds: list[Breed] | tuple[Breed, ...]) -> FetchResult:
        return cls(breeds=tuple(breeds))

    @classmethod
    def failure(cls, error: FetchError) -> FetchResult:
        return cls(error=error)


def _is_http_url(url: str) -> bool:
    try:
        parts = urlparse(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _parse_breeds_response(data: Any, image_base_url: str | None = None) -> list[Breed]:
    """
    Decode the `/breeds` payload. All-or-nothing: the first bad element fails the lot.

    Raises:
        BreedSchemaError: If the payload is not a list or any element is malformed.
    """
    if not isinstance(data, list):
        raise BreedSchemaError(f"expected a JSON array of breeds, got {type(data).__name__}")
    base = image_base_url or cat_image_base_url()
    return [Breed.from_api(el, index=i, image_base_url=base) for i, el in enumerate(data)]


class CatApiClient:
    """
    Thin wrapper around `GET {CAT_API_BASE_URL}/breeds`.

    No headers, query parameters or body are sent. The timeout defaults to
    CAT_API_TIMEOUT; when that is unset requests waits indefinitely.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._endpoint = endpoint if endpoint is not None else breeds_endpoint()
        self._timeout = timeout if timeout is not None else cat_api_timeout()
        self._session = session

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _get(self, url: str) -> requests.Response:
        if self._session is not None:
            return self._session.get(url, timeout=self._timeout)
        return requests.get(url, timeout=self._timeout)

    def fetch_breeds(self) -> FetchResult:
        """
        Fetch and decode the full breed list.

        Returns:
            FetchResult.success(breeds) on HTTP 200 with a valid body, else
            FetchResult.failure(...) with one of InvalidURLError, TransportError,
            InvalidResponseError or DecodeError.
        """
        url = self._endpoint
        if not _is_http_url(url):
            return FetchResult.failure(InvalidURLError(f"Invalid breeds endpoint URL: {url!r}"))

        logger.info("Fetching breeds from %s", url)
        try:
            r = self._get(url)
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            return FetchResult.failure(InvalidURLError(f"Invalid breeds endpoint URL: {e}", original=e))
        except requests.RequestException as e:
            return FetchResult.failure(TransportError(f"Breeds request failed: {e}", original=e))

        if r.status_code != 200:
            return FetchResult.failure(
                InvalidResponseError(f"Invalid response: HTTP {r.status_code}", status_code=r.status_code)
            )

        try:
            data = r.json()
        except ValueError as e:
            return FetchResult.failure(DecodeError(f"Breeds response is not valid JSON: {e}", original=e))

        try:
            breeds = _parse_breeds_response(data)
        except BreedSchemaError as e:
            return FetchResult.failure(DecodeError(f"Breeds response does not match schema: {e}", original=e))

        logger.info("Fetched %d breeds", len(breeds))
        return FetchResult.success(breeds)
