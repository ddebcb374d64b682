
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging once for the server process.

    - Installs a single stream handler on the root logger unless one exists
      (uvicorn or pytest may have set one up already)
    - Pins the ``webapp`` loggers to ``level`` so the startup and shutdown
      lines are always emitted
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("webapp").setLevel(level)
