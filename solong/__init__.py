"""A tile-based puzzle game: collect every item, then reach the exit.

Holds map loading and checking, game state and movement, a pygame window,
the ``solong`` command and small string, line-reading and printf helpers.
"""

__version__ = "0.1.0"