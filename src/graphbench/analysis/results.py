"""Analysis results - Value objects returned to the editor.

This module defines:
- AnalysisKind: Enum of the available analyzers
- BridgeResult, MstResult, CommunityResult: Self-contained results
- run_analysis: Run one analyzer on a snapshot and wrap its output
"""

from __future__ import annotations

import colorsys
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from graphbench.analysis.bridges import find_bridges
from graphbench.analysis.communities import find_communities
from graphbench.analysis.mst import find_mst, total_weight
from graphbench.config import get_community_params
from graphbench.graph.model import Edge, Graph
from graphbench.graph.serialize import edge_to_dict

logger = logging.getLogger(__name__)

# Hue step between consecutive communities, in degrees
GOLDEN_ANGLE = 137.508


class AnalysisKind(Enum):
    """Analyzers the workbench can run.

    Exactly one runs per invocation; they share nothing.
    """

    BRIDGES = "bridges"
    MST = "mst"
    COMMUNITIES = "communities"

    @property
    def display_name(self) -> str:
        """Human-readable name for menus and reports."""
        return {
            AnalysisKind.BRIDGES: "Bridge finding",
            AnalysisKind.MST: "Minimum spanning tree",
            AnalysisKind.COMMUNITIES: "Community detection",
        }[self]

    @classmethod
    def from_name(cls, name: str) -> AnalysisKind:
        """Look up a kind by its value, case-insensitively.

        Raises:
            ValueError: If no analyzer has that name.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown analysis '{name}' (choose from: {choices})") from None


def community_color(community_id: int) -> str:
    """Return the hex colour the editor paints a community with.

    Hues advance by the golden angle so neighbouring ids stay distinct.
    """
    hue = (community_id * GOLDEN_ANGLE) % 360.0
    r, g, b = colorsys.hsv_to_rgb(hue / 360.0, 0.7, 0.9)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


@dataclass
class BridgeResult:
    """Bridges of a graph, in discovery order."""

    bridges: list[Edge] = field(default_factory=list)
    kind: AnalysisKind = field(default=AnalysisKind.BRIDGES, init=False)

    def __len__(self) -> int:
        return len(self.bridges)

    def contains(self, edge: Edge) -> bool:
        """Membership by canonical undirected identity (weight ignored)."""
        return any(b.key == edge.key for b in self.bridges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "count": len(self.bridges),
            "bridges": [edge_to_dict(e) for e in self.bridges],
        }


@dataclass
class MstResult:
    """Minimum spanning forest, in acceptance order."""

    edges: list[Edge] = field(default_factory=list)
    kind: AnalysisKind = field(default=AnalysisKind.MST, init=False)

    def __len__(self) -> int:
        return len(self.edges)

    @property
    def total_weight(self) -> float:
        """Sum of accepted edge weights."""
        return total_weight(self.edges)

    def contains(self, edge: Edge) -> bool:
        """Membership by canonical undirected identity (weight ignored)."""
        return any(e.key == edge.key for e in self.edges)

    def is_spanning_tree(self, vertex_count: int) -> bool:
        """True when the forest is a single tree over vertex_count vertices."""
        return vertex_count > 0 and len(self.edges) == vertex_count - 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "count": len(self.edges),
            "total_weight": self.total_weight,
            "edges": [edge_to_dict(e) for e in self.edges],
        }


@dataclass
class CommunityResult:
    """Partial mapping of vertex id to community id."""

    communities: dict[str, int] = field(default_factory=dict)
    kind: AnalysisKind = field(default=AnalysisKind.COMMUNITIES, init=False)

    def __len__(self) -> int:
        return len(self.communities)

    @property
    def community_count(self) -> int:
        """Number of distinct community ids."""
        return len(set(self.communities.values()))

    def members(self, community_id: int) -> list[str]:
        """Vertex ids in a community, in assignment order."""
        return [v for v, c in self.communities.items() if c == community_id]

    def unassigned(self, graph: Graph) -> list[str]:
        """Vertex ids of graph that belong to no community."""
        return [v for v in graph.vertices if v not in self.communities]

    def to_dict(self) -> dict[str, Any]:
        ids = sorted(set(self.communities.values()))
        return {
            "kind": self.kind.value,
            "count": len(ids),
            "communities": dict(self.communities),
            "colors": {str(c): community_color(c) for c in ids},
        }


AnalysisResult = Union[BridgeResult, MstResult, CommunityResult]


def run_analysis(
    graph: Graph,
    kind: AnalysisKind,
    *,
    start_k: int | None = None,
    expansion_threshold: int | None = None,
    config: dict[str, Any] | None = None,
) -> AnalysisResult:
    """Run one analyzer against a snapshot of graph.

    The snapshot is taken here so callers may keep editing their graph.
    Community parameters come from explicit arguments first, then from
    config, then from the defaults.

    Raises:
        ConfigurationError: If config holds invalid community parameters.
        ValueError: If explicit community parameters are invalid.
    """
    snapshot = graph.snapshot()
    logger.debug(
        "Running %s on %d vertices, %d edges",
        kind.value,
        snapshot.vertex_count(),
        snapshot.edge_count(),
    )

    if kind is AnalysisKind.BRIDGES:
        return BridgeResult(find_bridges(snapshot))
    if kind is AnalysisKind.MST:
        return MstResult(find_mst(snapshot))

    params = get_community_params(config or {})
    if start_k is not None:
        params["start_k"] = start_k
    if expansion_threshold is not None:
        params["expansion_threshold"] = expansion_threshold
    return CommunityResult(find_communities(snapshot, **params))


__all__ = [
    "AnalysisKind",
    "AnalysisResult",
    "BridgeResult",
    "MstResult",
    "CommunityResult",
    "community_color",
    "run_analysis",
]
