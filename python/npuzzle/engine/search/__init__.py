from npuzzle.engine.search.astar import (
    TIE_BREAKS,
    SearchNode,
    SearchResult,
    a_star,
    reconstruct_path,
)

__all__ = ["TIE_BREAKS", "SearchNode", "SearchResult", "a_star", "reconstruct_path"]
