"""random-show-themes - Pick random theme songs from a catalog of shows.

Loads a catalog of shows and their opening, ending, and other theme songs,
optionally narrows it to an allow-list of show IDs, and prints a random
selection as text, a table, or CSV.
"""

__version__ = "0.1.0"

from .cli import main

__all__ = ["main", "__version__"]
