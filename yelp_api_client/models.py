"""
Value types decoded from Yelp API responses.

Each type maps the JSON field names used by the Yelp API onto
attributes explicitly in its ``from_dict`` constructor, so the wire
names stay the contract even where the Python attribute differs.
Fields missing from a response, or sent as ``null``, decode to the
empty value of their type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from .exceptions import YelpDecodeError


def _mapping(payload: Any, what: str) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise YelpDecodeError(
            f"expected a JSON object for {what}, got {type(payload).__name__}"
        )
    return payload


def _str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if isinstance(value, (Mapping, list, tuple)):
        raise YelpDecodeError(
            f"expected a JSON string for {key!r}, got {type(value).__name__}"
        )
    return str(value)


def _number(payload: Mapping[str, Any], key: str):
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise YelpDecodeError(
            f"expected a JSON number for {key!r}, got {type(value).__name__}"
        )
    return value


def _float(payload: Mapping[str, Any], key: str) -> float:
    value = _number(payload, key)
    return 0.0 if value is None else float(value)


def _int(payload: Mapping[str, Any], key: str) -> int:
    value = _number(payload, key)
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise YelpDecodeError(f"expected an integer for {key!r}, got {value!r}") from exc


def _bool(payload: Mapping[str, Any], key: str) -> bool:
    value = payload.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise YelpDecodeError(
            f"expected a JSON boolean for {key!r}, got {type(value).__name__}"
        )
    return value


def _array(payload: Mapping[str, Any], key: str) -> list:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise YelpDecodeError(
            f"expected a JSON array for {key!r}, got {type(value).__name__}"
        )
    return list(value)


def _strings(payload: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    values = _array(payload, key)
    for value in values:
        if not isinstance(value, str):
            raise YelpDecodeError(f"expected strings in {key!r}, got {type(value).__name__}")
    return tuple(values)


@dataclass(frozen=True)
class Category:
    """A category a business is listed under."""

    alias: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Category":
        data = _mapping(payload, "category")
        return cls(alias=_str(data, "alias"), title=_str(data, "title"))


@dataclass(frozen=True)
class Coordinates:
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, payload: Any) -> "Coordinates":
        data = _mapping(payload, "coordinates")
        return cls(latitude=_float(data, "latitude"), longitude=_float(data, "longitude"))


@dataclass(frozen=True)
class Location:
    """Postal address of a business."""

    address1: str = ""
    address2: str = ""
    address3: str = ""
    city: str = ""
    zip_code: str = ""
    country: str = ""
    state: str = ""
    display_address: Tuple[str, ...] = ()
    cross_streets: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Location":
        data = _mapping(payload, "location")
        return cls(
            address1=_str(data, "address1"),
            address2=_str(data, "address2"),
            address3=_str(data, "address3"),
            city=_str(data, "city"),
            zip_code=_str(data, "zip_code"),
            country=_str(data, "country"),
            state=_str(data, "state"),
            display_address=_strings(data, "display_address"),
            cross_streets=_str(data, "cross_streets"),
        )


@dataclass(frozen=True)
class Business:
    """A business as returned by the search and business endpoints.

    ``display_phone`` and ``distance`` are only filled in for search
    results; ``distance`` is in meters from the search location.
    """

    id: str = ""
    alias: str = ""
    name: str = ""
    image_url: str = ""
    is_claimed: bool = False
    is_closed: bool = False
    url: str = ""
    price: str = ""
    rating: float = 0.0
    review_count: int = 0
    phone: str = ""
    photos: Tuple[str, ...] = ()
    categories: Tuple[Category, ...] = ()
    coordinates: Coordinates = field(default_factory=Coordinates)
    location: Location = field(default_factory=Location)
    transactions: Tuple[str, ...] = ()

    # Only in search results
    display_phone: str = ""
    distance: float = 0.0

    @classmethod
    def from_dict(cls, payload: Any) -> "Business":
        data = _mapping(payload, "business")
        return cls(
            id=_str(data, "id"),
            alias=_str(data, "alias"),
            name=_str(data, "name"),
            image_url=_str(data, "image_url"),
            is_claimed=_bool(data, "is_claimed"),
            is_closed=_bool(data, "is_closed"),
            url=_str(data, "url"),
            price=_str(data, "price"),
            rating=_float(data, "rating"),
            review_count=_int(data, "review_count"),
            phone=_str(data, "phone"),
            photos=_strings(data, "photos"),
            categories=tuple(Category.from_dict(c) for c in _array(data, "categories")),
            coordinates=Coordinates.from_dict(data.get("coordinates")),
            location=Location.from_dict(data.get("location")),
            transactions=_strings(data, "transactions"),
            display_phone=_str(data, "display_phone"),
            distance=_float(data, "distance"),
        )


@dataclass(frozen=True)
class Region:
    """The area a search was resolved to."""

    center: Coordinates = field(default_factory=Coordinates)

    @classmethod
    def from_dict(cls, payload: Any) -> "Region":
        data = _mapping(payload, "region")
        return cls(center=Coordinates.from_dict(data.get("center")))


@dataclass(frozen=True)
class SearchResults:
    """Envelope of a business search.

    ``total`` is the number of matches Yelp reports overall, which is
    usually larger than ``len(businesses)``.
    """

    businesses: Tuple[Business, ...] = ()
    total: int = 0
    region: Region = field(default_factory=Region)

    @classmethod
    def from_dict(cls, payload: Any) -> "SearchResults":
        data = _mapping(payload, "search results")
        return cls(
            businesses=tuple(Business.from_dict(b) for b in _array(data, "businesses")),
            total=_int(data, "total"),
            region=Region.from_dict(data.get("region")),
        )

    def __len__(self) -> int:
        return len(self.businesses)

    def __iter__(self):
        return iter(self.businesses)
