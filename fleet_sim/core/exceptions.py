"""Application exceptions."""
from __future__ import annotations


class FleetSimError(Exception):
    """Base class for fleet simulator errors."""


class UnknownSiteError(FleetSimError):
    """
    A camera references a site that is not in the site registry.

    Well-formed generation never produces this, so it signals a bug in the
    generator or engine and is not recovered from.
    """

    def __init__(self, site: str) -> None:
        self.site = site
        super().__init__(f"Unknown site: {site!r}")
