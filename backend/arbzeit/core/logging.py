import logging

from arbzeit.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Root-Logger einmalig beim App-Start konfigurieren."""
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
    logging.getLogger("arbzeit").setLevel(settings.LOG_LEVEL.upper())
