"""
Couche application (services).

- title_normalizer : retrait des annotations d'annee
- catalog_search : recherche TMDB avec retrecissement de la requete
- candidate_ranker : filtre genre Animation et choix de la fiche
- episode_titles : titres d'episodes d'une saison (best-effort)
- resolution : orchestration, verrou global et nom d'affichage
"""
