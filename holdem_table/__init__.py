"""Console Texas Hold'em against equity-driven computer players, with cards, a hand evaluator and fast random generators."""

__version__ = "0.1.0"
__all__ = ["cards", "rng", "hand", "player", "bot", "game", "handler", "app"]