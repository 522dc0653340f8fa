import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging and set the level of all mojitracker.* loggers"""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("mojitracker").setLevel(level.upper())
