# product_api/logging_config.py
import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Send all log records through a rich console handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
