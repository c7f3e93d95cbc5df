"""
Site registry.

Static mapping from site name to its network policy (VLAN + subnet prefix).
Built once at startup and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping

from fleet_sim.core.exceptions import UnknownSiteError

if TYPE_CHECKING:
    from fleet_sim.core.config import SitePolicyConfig


@dataclass(frozen=True)
class SitePolicy:
    """Network contract of a site."""

    vlan: int
    subnet_prefix: str


class SiteRegistry:
    """Immutable lookup table of site policies, in registration order."""

    def __init__(self, policies: Mapping[str, SitePolicy]) -> None:
        if not policies:
            raise ValueError("SiteRegistry needs at least one site")
        self._policies: Mapping[str, SitePolicy] = MappingProxyType(dict(policies))
        self._site_names = tuple(self._policies)
        self._vlans = tuple(p.vlan for p in self._policies.values())

    @classmethod
    def from_config(
        cls, sites: Mapping[str, SitePolicyConfig],
    ) -> SiteRegistry:
        """Build from the ``Settings.sites`` table."""
        return cls({
            name: SitePolicy(vlan=cfg.vlan, subnet_prefix=cfg.subnet_prefix)
            for name, cfg in sites.items()
        })

    def policy_of(self, site: str) -> SitePolicy:
        """Return the policy for ``site``; raises UnknownSiteError if unregistered."""
        try:
            return self._policies[site]
        except KeyError:
            raise UnknownSiteError(site) from None

    @property
    def site_names(self) -> tuple[str, ...]:
        return self._site_names

    @property
    def vlans(self) -> tuple[int, ...]:
        """Every known VLAN, one entry per site."""
        return self._vlans

    def __contains__(self, site: object) -> bool:
        return site in self._policies

    def __iter__(self) -> Iterator[str]:
        return iter(self._site_names)

    def __len__(self) -> int:
        return len(self._policies)

    def __repr__(self) -> str:
        return f"SiteRegistry({dict(self._policies)!r})"
