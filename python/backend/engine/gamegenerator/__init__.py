from backend.engine.gamegenerator.generator import DEFAULT_LEVEL, GameGenerator

__all__ = ["DEFAULT_LEVEL", "GameGenerator"]
