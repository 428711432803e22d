"""
Python client for the Yelp Fusion API.

This package provides a `YelpClient` class that handles OAuth2
client-credentials authentication against the Yelp token endpoint
and exposes the business search and business lookup endpoints,
decoding their JSON responses into typed values.

The client caches access tokens for their entire lifetime and
automatically requests a new token when the current one expires.

Examples
--------

```python
from yelp_api_client import Credentials, SearchOptions, YelpClient

client = YelpClient(
    Credentials(client_id="YOUR_CLIENT_ID", client_secret="YOUR_CLIENT_SECRET"),
)

results = client.search(
    SearchOptions(term="tacos", latitude=37.7749, longitude=-122.4194, limit=5),
)
print(results.total, [b.name for b in results.businesses])
```

Endpoints used
--------------
``POST /oauth2/token``, ``GET /v3/businesses/search`` and
``GET /v3/businesses/{id}`` on ``https://api.yelp.com``.
"""

from .client import Client, YelpClient
from .credentials import Credentials
from .exceptions import (
    YelpAPIError,
    YelpAuthError,
    YelpDecodeError,
    YelpError,
    YelpValidationError,
)
from .models import Business, Category, Coordinates, Location, Region, SearchResults
from .search import SearchOptions

__all__ = [
    "Client",
    "YelpClient",
    "Credentials",
    "SearchOptions",
    "Business",
    "Category",
    "Coordinates",
    "Location",
    "Region",
    "SearchResults",
    "YelpError",
    "YelpAuthError",
    "YelpAPIError",
    "YelpValidationError",
    "YelpDecodeError",
]
