"""
Shared response models for the Atlas API.

Atlas responses carry hypermedia links alongside their payload; these
models decode them so callers can discover self/next/previous pages.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """
    Hypermedia link from an Atlas response envelope.

    Attributes:
        rel: Link relation (e.g. 'self', 'next')
        href: Absolute URL of the linked resource
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    rel: str = Field(default="", description="Link relation")
    href: str = Field(default="", description="Linked resource URL")
