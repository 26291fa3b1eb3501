"""
Point d'entrée CLI d'AniTMDB.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import resolve
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="anitmdb",
    help="Résolution des titres d'anime vers TMDB",
)
container = Container()

app.command()(resolve)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration AniTMDB")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Langue TMDB : {config.tmdb_language}")
    typer.echo(f"ID TMDB dans le nom : {'oui' if config.tmdb_id else 'non'}")
    typer.echo(f"Template de renommage : {config.rename_template}")
    typer.echo(f"Titres d'épisodes : {'oui' if config.episode_title_enabled else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Journal fichier : {config.log_file or 'désactivé'} ({config.log_file_level})")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AniTMDB v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging(container.config())

    logger.info("Démarrage d'AniTMDB", version=__version__)

    app()


if __name__ == "__main__":
    main()
