"""Network reduction — count the contested hubs of a shop network.

Pure computation over a frozen :class:`ShopNetwork`:

1. The degree threshold is the highest degree in the network.
2. The core is every shop at that degree (ties kept).
3. Each core shop's external impact is the summed degree of its neighbor
   entries outside the core, counted with multiplicity.
4. The winners are the core shops at the highest impact (ties kept).
5. The result is the number of winners, or 0 when fewer than two.

Nothing here mutates the network, so repeated calls give the same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shopnet.domain.network import ShopNetwork

logger = logging.getLogger(__name__)

# Fewer tied winners than this means nothing is contested.
MIN_CONTESTED_WINNERS = 2


@dataclass(frozen=True)
class ReductionReport:
    """Intermediate values of one reduction run, identifiers ascending."""

    degree_threshold: int
    core: tuple[int, ...]
    impacts: dict[int, int]
    impact_threshold: int
    winners: tuple[int, ...]

    @property
    def result(self) -> int:
        if len(self.winners) < MIN_CONTESTED_WINNERS:
            return 0
        return len(self.winners)


def analyze_network(
    network: ShopNetwork,
    *,
    log: logging.Logger | None = None,
) -> ReductionReport:
    """Run the reduction and keep every intermediate value.

    Args:
        network: A populated network. An empty one raises ``ValueError``.
        log: Diagnostic sink. Defaults to this module's logger, which is
            silent unless debug logging is configured.
    """
    log = log or logger
    shops = list(network.shops())
    if not shops:
        msg = "cannot reduce an empty network"
        raise ValueError(msg)

    degree_threshold = max(shop.degree for shop in shops)
    log.debug("reducing with threshold value of %d", degree_threshold)

    core_shops = [shop for shop in shops if shop.degree >= degree_threshold]
    core = tuple(shop.identifier for shop in core_shops)
    core_members = frozenset(core)
    log.debug("core holds %d shop(s): %s", len(core), list(core))

    impacts: dict[int, int] = {}
    for shop in core_shops:
        impact = 0
        for neighbor in shop.neighbors:
            if neighbor not in core_members:
                impact += network.degree(neighbor)
        impacts[shop.identifier] = impact
    log.debug("external impacts: %s", impacts)

    impact_threshold = max(impacts.values())
    winners = tuple(identifier for identifier in core if impacts[identifier] >= impact_threshold)
    log.debug("%d shop(s) at impact %d: %s", len(winners), impact_threshold, list(winners))

    return ReductionReport(
        degree_threshold=degree_threshold,
        core=core,
        impacts=impacts,
        impact_threshold=impact_threshold,
        winners=winners,
    )


def reduce_network(network: ShopNetwork, *, log: logging.Logger | None = None) -> int:
    """Return the reduction result: the number of tied winners, or 0."""
    return analyze_network(network, log=log).result
