from loguru import logger
from quote_graphql.config import get_config

class AppLogger:
    """Loguru sink setup shared by the resolver and the catalog backends.

    Re-reads the configured level on every construction so tests can lower it.
    """
    def __init__(self) -> None:
        log_level = get_config().log_level.upper()
        logger.remove()
        logger.add(
            sink=lambda msg: print(msg, end=""),
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
        self.logger = logger

    def get_logger(self, name: str = None):
        """Return the logger bound to `name` (the package name when omitted)."""
        return self.logger.bind(name=name or "quote_graphql")

def get_logger(name: str = None):
    """Configure loguru from the current settings and return a named logger."""
    return AppLogger().get_logger(name)
