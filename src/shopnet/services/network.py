"""NetworkService — load a road list and analyze it.

Every operation follows the same pipeline: read the file, parse and
validate it, feed the roads into a :class:`ShopNetwork`, freeze it, then
run one analysis. Fatal input problems short-circuit into an ``ok=False``
result before any analysis runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shopnet.config.models import InputConfig
from shopnet.domain.input_format import InputFormatError, InputLimits, ParsedInput, parse_network
from shopnet.domain.network import ShopNetwork
from shopnet.domain.reduction import analyze_network
from shopnet.infrastructure.graph.engine import GraphEngine
from shopnet.services.result import ServiceResult

logger = logging.getLogger(__name__)

IO_ERROR = "IO_ERROR"


@dataclass(frozen=True)
class LoadedNetwork:
    """A parsed input file and the frozen network built from it."""

    path: Path
    parsed: ParsedInput
    network: ShopNetwork


class NetworkService:
    """Handles loading, reducing, and describing shop networks."""

    def __init__(self, config: InputConfig | None = None) -> None:
        self._config = config or InputConfig()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _limits(self, strict_road_to: bool | None) -> InputLimits:
        cfg = self._config
        return InputLimits(
            min_shops=cfg.min_shops,
            max_shops=cfg.max_shops,
            min_roads=cfg.min_roads,
            max_roads=cfg.max_roads,
            min_shop_id=cfg.min_shop_id,
            max_shop_id=cfg.max_shop_id,
            strict_road_to=cfg.strict_road_to if strict_road_to is None else strict_road_to,
        )

    def load(
        self,
        op: str,
        path: Path,
        *,
        strict_road_to: bool | None = None,
    ) -> LoadedNetwork | ServiceResult:
        """Read and parse *path*, returning the network or a failed result."""
        try:
            text = path.read_text(encoding=self._config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Reading %s failed", path, exc_info=True)
            return ServiceResult.failure(
                op, IO_ERROR, "file couldn't be opened", path=str(path), reason=str(exc)
            )

        try:
            parsed = parse_network(text, self._limits(strict_road_to))
        except InputFormatError as exc:
            return ServiceResult.failure(
                op, exc.code, exc.message, path=str(path), line=exc.line
            )

        for warning in parsed.warnings:
            logger.debug("Skipped input line: %s", warning)

        network = ShopNetwork.from_edges(parsed.edges, log=logger.getChild("build"))
        logger.debug(
            "Loaded %s: %d shops, %d directed links",
            path,
            network.total_nodes(),
            network.total_directed_links(),
        )
        return LoadedNetwork(path=path, parsed=parsed, network=network)

    @staticmethod
    def _meta(loaded: LoadedNetwork) -> dict[str, Any]:
        return {
            "path": str(loaded.path),
            "declared_shops": loaded.parsed.num_shops,
            "declared_roads": loaded.parsed.num_roads,
            "accepted_roads": len(loaded.parsed.edges),
        }

    # ------------------------------------------------------------------
    # reduce — contested hub count
    # ------------------------------------------------------------------

    def reduce(self, path: Path, *, strict_road_to: bool | None = None) -> ServiceResult:
        """Compute the reduction result of the network in *path*.

        Args:
            path: Road-list input file.
            strict_road_to: Override ``input.strict_road_to`` for this call.
        """
        loaded = self.load("reduce", path, strict_road_to=strict_road_to)
        if isinstance(loaded, ServiceResult):
            return loaded

        network = loaded.network
        if len(network) == 0:
            # Every road line was skipped; there are no shops to reduce.
            return ServiceResult.failure(
                "reduce", "EMPTY_NETWORK", "no valid roads in input", path=str(path)
            )

        report = analyze_network(network, log=logger.getChild("reduce"))
        return ServiceResult(
            ok=True,
            op="reduce",
            data={
                "result": report.result,
                "degree_threshold": report.degree_threshold,
                "core": list(report.core),
                "impacts": [
                    {"id": shop_id, "impact": impact} for shop_id, impact in report.impacts.items()
                ],
                "impact_threshold": report.impact_threshold,
                "winners": list(report.winners),
            },
            warnings=list(loaded.parsed.warnings),
            meta=self._meta(loaded),
        )

    # ------------------------------------------------------------------
    # connections — directed link dump
    # ------------------------------------------------------------------

    def connections(self, path: Path, *, strict_road_to: bool | None = None) -> ServiceResult:
        """List every directed link, then the network size."""
        loaded = self.load("connections", path, strict_road_to=strict_road_to)
        if isinstance(loaded, ServiceResult):
            return loaded

        items = [
            {"id": shop_id, "neighbor": neighbor}
            for shop_id, neighbor in loaded.network.connections()
        ]
        return ServiceResult(
            ok=True,
            op="connections",
            data={
                "count": len(items),
                "items": items,
                "network_size": loaded.network.total_directed_links(),
            },
            warnings=list(loaded.parsed.warnings),
            meta=self._meta(loaded),
        )

    # ------------------------------------------------------------------
    # stats — structural summary via NetworkX
    # ------------------------------------------------------------------

    def stats(self, path: Path, *, strict_road_to: bool | None = None) -> ServiceResult:
        """Summarize node, road, component, and degree counts."""
        loaded = self.load("stats", path, strict_road_to=strict_road_to)
        if isinstance(loaded, ServiceResult):
            return loaded

        summary = GraphEngine(loaded.parsed.edges).summary()
        return ServiceResult(
            ok=True,
            op="stats",
            data=summary,
            warnings=list(loaded.parsed.warnings),
            meta=self._meta(loaded),
        )
