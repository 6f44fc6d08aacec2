# product_api/__main__.py
import logging

import uvicorn

from .config import get_settings
from .logging_config import configure_logging
from .main import create_app

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
