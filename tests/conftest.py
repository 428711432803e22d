import json
import sys
from pathlib import Path

import pytest

# Ensure the package is importable when running pytest from a source checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yelp_api_client import Credentials, YelpClient  # noqa: E402


class DummyResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", text=None):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._text = text
        self.closed = False

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload

    def close(self):
        self.closed = True


class DummySession:
    """Records requests and replays queued responses in order."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, response):
        self.responses.append(response)
        return response

    def _next(self):
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append(("POST", url, data, headers, timeout))
        return self._next()

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.calls.append((method, url, data, headers, timeout))
        return self._next()


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def credentials():
    return Credentials(client_id="cid", client_secret="secret")


@pytest.fixture
def client(session, credentials):
    return YelpClient(credentials, session=session, timeout=5)


@pytest.fixture
def token_response():
    return DummyResponse(
        payload={"access_token": "T", "token_type": "Bearer", "expires_in": 3600}
    )


BUSINESS_PAYLOAD = {
    "id": "gR9DTbKCvezQlqvD7_FzPw",
    "alias": "north-india-restaurant-san-francisco",
    "name": "North India Restaurant",
    "image_url": "https://s3-media1.fl.yelpcdn.com/bphoto/howYvOKNPXU9A5KUahEXLA/o.jpg",
    "is_claimed": True,
    "is_closed": False,
    "url": "https://www.yelp.com/biz/north-india-restaurant-san-francisco",
    "price": "$$",
    "rating": 4.0,
    "review_count": 615,
    "phone": "+14153481234",
    "photos": [
        "https://s3-media2.fl.yelpcdn.com/bphoto/a.jpg",
        "https://s3-media3.fl.yelpcdn.com/bphoto/b.jpg",
    ],
    "categories": [{"alias": "indpak", "title": "Indian"}],
    "coordinates": {"latitude": 37.787789124691, "longitude": -122.399305736113},
    "location": {
        "address1": "123 Second St",
        "address2": "",
        "address3": None,
        "city": "San Francisco",
        "zip_code": "94105",
        "country": "US",
        "state": "CA",
        "display_address": ["123 Second St", "San Francisco, CA 94105"],
        "cross_streets": "Natoma St & Minna St",
    },
    "transactions": ["pickup", "delivery"],
}
