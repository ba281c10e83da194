from npuzzle.engine.heuristic.manhattan import manhattan

__all__ = ["manhattan"]
