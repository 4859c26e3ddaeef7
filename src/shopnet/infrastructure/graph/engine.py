"""NetworkX view of a road list, for structural statistics.

The reduction itself runs on :class:`~shopnet.domain.network.ShopNetwork`;
this view only answers questions NetworkX already knows how to answer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeAlias

import networkx as nx

# Roads may repeat and may be self-loops, so a plain Graph would drop data.
_Graph: TypeAlias = nx.MultiGraph


class GraphEngine:
    """Multigraph over ``(shop_id, road_to)`` pairs, built on first use."""

    def __init__(self, roads: Iterable[tuple[int, int]]) -> None:
        self._roads = list(roads)
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        if self._graph is None:
            self._graph = nx.MultiGraph(self._roads)
        return self._graph

    def summary(self) -> dict[str, Any]:
        """Structural statistics of the road network.

        Self-loops count twice towards a node's degree, matching the shop
        network's neighbor bookkeeping.
        """
        g = self.graph
        degrees = [d for _, d in g.degree()]
        return {
            "nodes": g.number_of_nodes(),
            "roads": g.number_of_edges(),
            "directed_links": sum(degrees),
            "self_loops": nx.number_of_selfloops(g),
            "components": nx.number_connected_components(g),
            "max_degree": max(degrees, default=0),
            "degree_histogram": nx.degree_histogram(g) if degrees else [],
        }
