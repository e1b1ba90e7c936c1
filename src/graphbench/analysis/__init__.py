"""Analysis module - Structural analyses over a workbench graph.

Exports:
- find_bridges: Cut edges (Tarjan low-link)
- find_mst: Minimum spanning forest (Kruskal)
- find_communities: Core-expansion community detection
- DisjointSetUnion: Union-find used by the MST builder
- AnalysisKind / run_analysis: Dispatch one analyzer on a snapshot
"""

from graphbench.analysis.bridges import find_bridges
from graphbench.analysis.communities import (
    DEFAULT_EXPANSION_THRESHOLD,
    DEFAULT_START_K,
    find_communities,
    k_core,
    maximal_core,
)
from graphbench.analysis.dsu import DisjointSetUnion
from graphbench.analysis.mst import find_mst, total_weight
from graphbench.analysis.results import (
    AnalysisKind,
    AnalysisResult,
    BridgeResult,
    CommunityResult,
    MstResult,
    community_color,
    run_analysis,
)

__all__ = [
    "find_bridges",
    "find_mst",
    "total_weight",
    "find_communities",
    "k_core",
    "maximal_core",
    "DEFAULT_START_K",
    "DEFAULT_EXPANSION_THRESHOLD",
    "DisjointSetUnion",
    "AnalysisKind",
    "AnalysisResult",
    "BridgeResult",
    "MstResult",
    "CommunityResult",
    "community_color",
    "run_analysis",
]
