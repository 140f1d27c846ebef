from slidestate.engine.moves.shift import Mover

__all__ = ["Mover"]
