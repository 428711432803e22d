"""
Client implementation for the Yelp Fusion API.

This module defines the :class:`YelpClient` class which
authenticates against the Yelp token endpoint using the OAuth2
client credentials grant and performs business searches and
lookups.  The client caches the access token in its
:class:`~yelp_api_client.credentials.Credentials` until the
``expires_in`` period reported by the token response has elapsed
and fetches a new one on the next request after that.

Usage
-----

.. code-block:: python

    from yelp_api_client import Credentials, SearchOptions, YelpClient

    client = YelpClient(
        Credentials(client_id="abc123", client_secret="shhsecret"),
        timeout=10,
    )

    results = client.search(SearchOptions(term="coffee", location="Portland, OR"))
    for business in results.businesses:
        print(business.name, business.rating)

    business = client.business_by_id(results.businesses[0].id)

Every failure is raised to the caller; nothing is retried.  See
:mod:`yelp_api_client.exceptions` for the error types.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar
from urllib.parse import quote

import requests

from .credentials import Credentials
from .exceptions import YelpAPIError, YelpAuthError, YelpValidationError
from .models import Business, SearchResults
from .search import SearchOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_HOST = "https://api.yelp.com"
SEARCH_PATH = "/v3/businesses/search"
BUSINESS_PATH = "/v3/businesses/{id}"
TOKEN_PATH = "/oauth2/token"


class Client(Protocol):
    """The Yelp requests available to callers.

    :class:`YelpClient` implements this protocol; tests and callers
    may substitute any object providing the same two methods.
    """

    def search(self, options: SearchOptions) -> SearchResults:
        ...

    def business_by_id(self, business_id: str) -> Business:
        ...


class YelpClient:
    """A client for the Yelp Fusion API.

    Parameters
    ----------
    credentials : Credentials
        Client credentials (or a static API key).  The client stores
        fetched access tokens on this object.
    session : requests.Session, optional
        The transport used for every request.  A new session is
        created when omitted.  Proxies, adapters and the like should
        be configured on the session.
    base_url : str, optional
        Override the API host.  Defaults to ``https://api.yelp.com``.
    timeout : float, optional
        Timeout in seconds passed to every request.  ``None`` leaves
        the deadline to the transport.

    Notes
    -----
    The check for an expired token and the refresh that follows are
    serialised by a lock, so a single client may be shared between
    threads without fetching the token more than once.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if credentials is None:
            raise ValueError("credentials must be provided")

        self.credentials = credentials
        self.session = session if session is not None else requests.Session()
        self.base_url = (base_url or API_HOST).rstrip("/")
        self.timeout = timeout

        self._token_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def fetch_token(self) -> None:
        """Retrieve a new access token from the Yelp token endpoint.

        This method posts the form values from
        :meth:`Credentials.url_values` to the token endpoint.  On
        success, it stores the ``access_token`` on the credentials and
        calculates the absolute expiry time from the ``expires_in``
        value.  The credentials are left untouched when anything
        fails.

        Raises
        ------
        YelpAuthError
            If the endpoint answers with a non-200 status or the
            response carries no ``access_token``.
        requests.RequestException
            If the request could not be sent.
        ValueError
            If the response body is not valid JSON.
        """
        if self.credentials.uses_api_key:
            return

        url = self._build_url(TOKEN_PATH)
        logger.debug("Fetching Yelp access token from %s", url)
        response = self.session.post(
            url,
            data=self.credentials.url_values(),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=self.timeout,
        )
        try:
            if response.status_code != 200:
                raise YelpAuthError(
                    f"Authentication failed with status {response.status_code} {response.reason}"
                )
            token_info: Dict[str, Any] = response.json()
        finally:
            self._close(response)

        if not isinstance(token_info, dict) or not token_info.get("access_token"):
            raise YelpAuthError("Authentication response did not contain an access_token")
        expires_in = _parse_expires_in(token_info.get("expires_in"))

        self.credentials.access_token = token_info["access_token"]
        self.credentials.expiry = time.time() + expires_in
        logger.debug(
            "Fetched Yelp %s token valid for %s seconds",
            token_info.get("token_type", "bearer"),
            expires_in,
        )

    def _get_access_token(self) -> str:
        """Return a valid access token, fetching a new one if needed."""
        with self._token_lock:
            if not self.credentials.is_valid():
                self.fetch_token()
            return self.credentials.access_token

    # ------------------------------------------------------------------
    # Public requests
    # ------------------------------------------------------------------
    def search(self, options: SearchOptions) -> SearchResults:
        """Search for businesses matching ``options``.

        Raises
        ------
        YelpValidationError
            If ``options`` names neither a location nor coordinates.
            No request is sent in that case.
        YelpAPIError
            If the search endpoint answers with a non-200 status.
        """
        if not options.is_valid():
            raise YelpValidationError(
                "SearchOptions is not valid: a location or both latitude "
                "and longitude must be set"
            )
        url = f"{self._build_url(SEARCH_PATH)}?{options.encode()}"
        return self._authed_do("GET", url, SearchResults.from_dict)

    def business_by_id(self, business_id: str) -> Business:
        """Look up a single business by its Yelp id or alias.

        Raises
        ------
        YelpAPIError
            If the business endpoint answers with a non-200 status,
            e.g. ``404 Not Found`` for an unknown id.
        """
        if not business_id:
            raise ValueError("business_id must not be empty")
        path = BUSINESS_PATH.format(id=quote(business_id, safe=""))
        return self._authed_do("GET", self._build_url(path), Business.from_dict)

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _authed_do(
        self,
        method: str,
        url: str,
        decode: Callable[[Any], T],
        *,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> T:
        """Perform an authenticated request and decode its JSON body.

        A new access token is fetched first if the cached one is
        missing or expired; if that fails, the error is raised and no
        request is made.  Caller supplied ``headers`` are sent as
        given except for ``Authorization``, which always carries the
        bearer token.

        Parameters
        ----------
        method : str
            The HTTP verb.
        url : str
            The absolute request URL, query string included.
        decode : callable
            Turns the parsed JSON body into the return value.
        data : optional
            Request body.
        headers : dict, optional
            Additional HTTP headers.

        Raises
        ------
        YelpAPIError
            If the response status is not ``200``.  The body is not
            decoded.
        """
        token = self._get_access_token()

        req_headers: Dict[str, str] = {}
        if headers:
            for key, value in headers.items():
                if key.lower() == "authorization":
                    continue
                req_headers[key] = value
        req_headers["Authorization"] = f"Bearer {token}"

        logger.debug("%s %s", method.upper(), url)
        response = self.session.request(
            method=method.upper(),
            url=url,
            data=data,
            headers=req_headers,
            timeout=self.timeout,
        )
        try:
            if response.status_code != 200:
                raise YelpAPIError(response.status_code, response.reason or "", url)
            payload = response.json()
        finally:
            self._close(response)
        return decode(payload)

    @staticmethod
    def _close(response: requests.Response) -> None:
        try:
            response.close()
        except Exception as exc:
            logger.warning("Failed to close Yelp response body: %s", exc)


def _parse_expires_in(value: Any) -> float:
    """Return the token lifetime in seconds, ``0`` when it is unusable.

    Numeric strings such as ``"3600"`` are accepted.  A lifetime of
    ``0`` makes the next request fetch a new token.
    """
    if isinstance(value, bool):
        value = None
    elif isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            value = None
    if not isinstance(value, (int, float)) or value != value or value < 0:
        logger.debug("Token response has no usable expires_in (%r), treating it as 0", value)
        return 0.0
    return float(value)
