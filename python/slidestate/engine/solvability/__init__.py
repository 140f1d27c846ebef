from slidestate.engine.solvability.parity import count_inversions, is_solvable

__all__ = ["count_inversions", "is_solvable"]
