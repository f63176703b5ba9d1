import logging


def setup_logging(level: str = "INFO"):
    """Configure root logging once; later calls only adjust the level."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
