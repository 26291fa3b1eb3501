"""
Utilitaires partages pour les commandes CLI d'AniTMDB.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
"""

from functools import wraps

from rich.console import Console

from anitmdb.container import Container

# Console globale pour tous les affichages
console = Console()


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client TMDB du container est ferme a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.tmdb_client().close()
        return wrapper
    return decorator
