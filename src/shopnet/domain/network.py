"""Shop network — the graph store.

Owns every shop by identifier. Neighbor entries are identifiers into the
same store, so a shop never owns another shop. Roads are undirected and
never deduplicated: inserting the same road twice records it twice, and a
road from a shop to itself gives that shop two self-references.

INVARIANT: every identifier in a neighbor list has an entry in the store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Shop:
    """A node of the network and its neighbor entries in insertion order."""

    identifier: int
    neighbors: list[int] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.neighbors)


class ShopNetwork:
    """Mapping from identifier to :class:`Shop`, built one road at a time.

    Construction and analysis are separate phases. Call :meth:`freeze` once
    all roads are in; the reduction only reads a frozen network.

    Usage::

        network = ShopNetwork()
        network.add_edge(1, 2)
        network.add_edge(1, 3)
        network.freeze()
    """

    def __init__(self) -> None:
        self._shops: dict[int, Shop] = {}
        self._frozen = False

    @classmethod
    def from_edges(
        cls,
        pairs: Iterable[tuple[int, int]],
        *,
        log: logging.Logger | None = None,
    ) -> ShopNetwork:
        """Build and freeze a network from ``(shop_id, road_to)`` pairs."""
        network = cls()
        for shop_id, road_to in pairs:
            network.add_edge(shop_id, road_to, log=log)
        network.freeze()
        return network

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def get_or_create(self, identifier: int, *, log: logging.Logger | None = None) -> Shop:
        """Return the shop with *identifier*, registering an empty one if absent."""
        shop = self._shops.get(identifier)
        if shop is None:
            (log or logger).debug("shop with identifier %d is being instantiated", identifier)
            shop = Shop(identifier)
            self._shops[identifier] = shop
        return shop

    def add_edge(self, u_id: int, v_id: int, *, log: logging.Logger | None = None) -> None:
        """Record an undirected road between *u_id* and *v_id*.

        Both endpoints are created on first reference. ``v`` is appended to
        ``u``'s neighbors first, then ``u`` to ``v``'s, even when ``u_id ==
        v_id``.
        """
        if self._frozen:
            msg = "cannot add a road to a frozen network"
            raise RuntimeError(msg)
        u = self.get_or_create(u_id, log=log)
        v = self.get_or_create(v_id, log=log)
        u.neighbors.append(v.identifier)
        v.neighbors.append(u.identifier)

    def freeze(self) -> None:
        """End the construction phase."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, identifier: int) -> Shop | None:
        return self._shops.get(identifier)

    def degree(self, identifier: int) -> int:
        """Degree of an existing shop. Raises ``KeyError`` for unknown ids."""
        return self._shops[identifier].degree

    def shops(self) -> Iterator[Shop]:
        """Iterate shops in ascending identifier order."""
        for identifier in sorted(self._shops):
            yield self._shops[identifier]

    def connections(self) -> Iterator[tuple[int, int]]:
        """Yield every directed link as ``(shop_id, neighbor_id)``.

        Shops come in ascending identifier order, neighbors in insertion
        order. Each road appears twice, once from each end.
        """
        for shop in self.shops():
            for neighbor in shop.neighbors:
                yield shop.identifier, neighbor

    def total_nodes(self) -> int:
        return len(self._shops)

    def total_directed_links(self) -> int:
        """Sum of neighbor-list lengths (twice the number of roads added)."""
        return sum(shop.degree for shop in self._shops.values())

    def __len__(self) -> int:
        return len(self._shops)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._shops
