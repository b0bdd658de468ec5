"""wordsieve: constraint filtering, ranking and autonomous solving for word-guessing puzzles."""

__version__ = "0.1.0"
