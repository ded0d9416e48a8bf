"""
Response metadata returned by the Atlas API client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs, urlparse

from atlas_tools.constants import LINK_REL_NEXT, LINK_REL_SELF
from atlas_tools.models.common import Link


@dataclass
class Response:
    """
    Metadata for a completed API call.

    Attributes:
        status_code: HTTP status code
        url: Final request URL
        headers: Response headers
        links: Hypermedia links surfaced from the response envelope
        data: Body decoded into the requested model (None when not decoded)
    """

    status_code: int
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    links: list[Link] = field(default_factory=list)
    data: Any = None

    def current_page(self) -> int | None:
        """Page number from the 'self' link, or None when it can't be determined."""
        for link in self.links:
            if link.rel == LINK_REL_SELF:
                values = parse_qs(urlparse(link.href).query).get("pageNum")
                if values and values[0].isdigit():
                    return int(values[0])
                return None
        return None

    def is_last_page(self) -> bool:
        """True when there is no 'next' link."""
        return not any(link.rel == LINK_REL_NEXT for link in self.links)
