import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "squad_analyzer.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Configure logging for the squad analyzer.

    Writes everything at DEBUG and above to a rotating log file and
    *log_level* and above to the console. Calling it again is a no-op
    once the root logger has handlers.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger.setLevel(logging.DEBUG)

    # 5MB per file, keep 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5 * 1024 * 1024, backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", log_level, log_dir / LOG_FILE_NAME
    )
