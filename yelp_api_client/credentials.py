"""
Credentials and token cache for the Yelp API client.

A :class:`Credentials` value holds the OAuth client identifier and
secret used for the client credentials grant together with the
access token obtained from the token endpoint.  The token and its
expiry are written by :meth:`yelp_api_client.YelpClient.fetch_token`
and nowhere else.

Yelp also issues static API keys.  A key passed as ``api_key`` is
used directly as the bearer token and never expires, so no token
exchange takes place.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class Credentials:
    """Client credentials plus the cached access token.

    Parameters
    ----------
    client_id : str, optional
        Your Yelp OAuth client identifier.
    client_secret : str, optional
        Your Yelp OAuth client secret.
    api_key : str, optional
        A static Yelp API key.  When provided, ``client_id`` and
        ``client_secret`` are not required.

    Notes
    -----
    ``access_token`` is empty and ``expiry`` is ``0.0`` (epoch
    seconds) until a token has been fetched.
    """

    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    api_key: Optional[str] = field(default=None, repr=False)
    access_token: str = field(default="", repr=False)
    expiry: float = 0.0

    def __post_init__(self) -> None:
        if self.api_key:
            self.access_token = self.api_key
            self.expiry = float("inf")
            return
        if not self.client_id:
            raise ValueError("client_id must be provided")
        if not self.client_secret:
            raise ValueError("client_secret must be provided")

    @property
    def uses_api_key(self) -> bool:
        return bool(self.api_key)

    def is_valid(self) -> bool:
        """Return ``True`` if the access token is set and not yet expired."""
        return bool(self.access_token) and time.time() < self.expiry

    def url_values(self) -> Dict[str, str]:
        """Form values for the client credentials token request."""
        return {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
