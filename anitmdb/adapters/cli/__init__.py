"""
Commandes CLI d'AniTMDB.

- resolve : resolution d'un titre et titres d'episodes
"""

from anitmdb.adapters.cli.commands import resolve

__all__ = ["resolve"]
