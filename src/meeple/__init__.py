"""MEEPLE CATCHER - catch falling board games, complete the incomplete ones."""

__version__ = "0.1.0"
