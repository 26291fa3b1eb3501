"""
Configuration du logging d'AniTMDB via loguru.

Deux sorties, pilotees par Settings :
- stderr, coloree, au niveau ANITMDB_LOG_LEVEL
- un fichier JSON avec rotation, au niveau ANITMDB_LOG_FILE_LEVEL
  (desactive si ANITMDB_LOG_FILE est vide)
"""

import sys

from loguru import logger

from anitmdb.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    """
    Remplace les sorties loguru par celles definies dans settings.

    Args:
        settings: Parametres de l'application (niveaux, fichier, rotation)
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    if settings.log_file is None:
        logger.debug("Journal fichier desactive")
        return

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level=settings.log_file_level,
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        console_level=settings.log_level,
        file_level=settings.log_file_level,
    )
