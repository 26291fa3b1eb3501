"""Utilitaires partages (constantes, normalisation des noms)."""
