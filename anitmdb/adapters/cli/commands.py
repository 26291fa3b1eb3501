"""
Commande CLI de resolution d'un titre d'anime.
"""

import asyncio
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from anitmdb.adapters.cli.helpers import console, with_container
from anitmdb.core.entities import Anime


def resolve(
    title: Annotated[str, typer.Argument(help="Titre brut de l'anime")],
    ova: Annotated[
        bool,
        typer.Option("--ova", help="Film/OVA (recherche search/movie)"),
    ] = False,
    season: Annotated[
        int,
        typer.Option("--season", "-s", min=1, help="Saison pour les titres d'episodes"),
    ] = 1,
    episodes: Annotated[
        bool,
        typer.Option("--episodes", "-e", help="Afficher les titres d'episodes de la saison"),
    ] = False,
) -> None:
    """Resout un titre vers sa fiche TMDB et affiche le nom de renommage."""
    found = asyncio.run(_resolve_async(title, ova, season, episodes))
    if not found:
        raise typer.Exit(code=1)


@with_container()
async def _resolve_async(
    container, title: str, ova: bool, season: int, episodes: bool
) -> bool:
    """Implementation async de la commande resolve."""
    anime = Anime(title=title, ova=ova, season=season)

    name = await container.resolution_service().resolve_display_name(anime)
    if not name or anime.tmdb is None:
        console.print(f"[yellow]Aucune correspondance TMDB pour[/yellow] {escape(repr(title))}")
        return False

    record = anime.tmdb
    console.print(f"[bold green]{escape(name)}[/bold green]")
    console.print(f"  [dim]tmdb id :[/dim] {record.id}")
    console.print(f"  [dim]nom     :[/dim] {escape(record.name)}")
    if record.release_date:
        console.print(f"  [dim]date    :[/dim] {record.release_date.isoformat()}")

    if episodes:
        if anime.ova:
            console.print("[dim]Pas de titres d'episodes pour un film/OVA.[/dim]")
            return True

        service = container.episode_title_service()
        if not service.template_uses_episode_title:
            console.print(
                "[dim]Le template de renommage n'utilise pas ${episodeTitle} :"
                " titres d'episodes non recuperes.[/dim]"
            )
            return True

        titles = await service.get_episode_title_map(anime)
        if not titles:
            console.print(f"[yellow]Aucun titre d'episode pour la saison {season}.[/yellow]")
            return True

        table = Table(title=f"Saison {season}")
        table.add_column("Episode", justify="right", style="cyan")
        table.add_column("Titre")
        for number in sorted(titles):
            table.add_row(str(number), escape(titles[number]))
        console.print(table)

    return True
