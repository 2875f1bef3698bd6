from backend.engine.winscanner.scanner import WinScanner

__all__ = ["WinScanner"]
