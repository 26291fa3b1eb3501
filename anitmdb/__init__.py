"""
AniTMDB - Resolution des titres d'anime vers les fiches TMDB.

Ce package resout un titre brut (issu d'un flux RSS) vers une fiche canonique
TMDB et recupere les titres d'episodes utilises lors du renommage.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (normalisation, recherche, classement)
- adapters/ : Couche infrastructure (client TMDB, CLI)
"""

__version__ = "0.1.0"
