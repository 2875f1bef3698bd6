from backend.engine.movement.resolver import MovementResolver

__all__ = ["MovementResolver"]
