"""Navigation link models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A navigational URL attached to an API response."""

    href: str
    rel: str
    method: str
