import logging
from typing import Optional

LOGGER_NAME = "blog_backend"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def configure_logging(level: Optional[str] = None, sql_echo: bool = False) -> None:
    """Configure the root handler and the application logger.

    The gateway already logs each assembled statement at DEBUG, so the
    SQLAlchemy engine logger stays at WARNING unless ``sql_echo`` is set.
    """
    level = (level or "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)


logger = logging.getLogger(LOGGER_NAME)
