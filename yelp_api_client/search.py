"""Query parameters for the ``/v3/businesses/search`` endpoint."""

from __future__ import annotations

import collections.abc
from dataclasses import dataclass, fields
from typing import Dict, Iterable, Optional, Union
from urllib.parse import urlencode


@dataclass
class SearchOptions:
    """Parameters for a business search.

    Every field maps one-to-one onto a query parameter of the same
    name and is left out of the request when ``None``.  A search must
    name either a ``location`` or both ``latitude`` and ``longitude``.

    ``categories``, ``price`` and ``attributes`` accept either a
    preformatted comma separated string or any iterable of values,
    e.g. ``price=[1, 2]`` is sent as ``price=1,2``.  Sets are sent in
    sorted order.
    """

    term: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    radius: Optional[int] = None
    categories: Optional[Union[str, Iterable[str]]] = None
    locale: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    sort_by: Optional[str] = None
    price: Optional[Union[str, Iterable[Union[int, str]]]] = None
    open_now: Optional[bool] = None
    open_at: Optional[int] = None
    attributes: Optional[Union[str, Iterable[str]]] = None

    def is_valid(self) -> bool:
        """Return ``True`` when a location or a full coordinate pair is set."""
        if self.location:
            return True
        return self.latitude is not None and self.longitude is not None

    def url_values(self) -> Dict[str, str]:
        """Return the set parameters rendered as query string values."""
        values: Dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            values[f.name] = _format_value(value)
        return values

    def encode(self) -> str:
        """Return the URL encoded query string, keys in sorted order."""
        return urlencode(sorted(self.url_values().items()))


def _format_value(value) -> str:
    # bool before the generic path, str(True) is "True"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, bytes)) or not isinstance(value, collections.abc.Iterable):
        return str(value)
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)
    return ",".join(str(v) for v in value)
