"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, httpx).

Sous-packages :
- entities/ : Entite Anime (demande de resolution)
- ports/ : Interface du catalogue de metadonnees
- value_objects/ : MediaType, MediaRecord, SearchHit, EpisodeEntry, NormalizedTitle
"""
