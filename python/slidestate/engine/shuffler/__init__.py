from slidestate.engine.shuffler.shuffler import Shuffler

__all__ = ["Shuffler"]
