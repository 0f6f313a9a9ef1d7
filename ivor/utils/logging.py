import os
import logging

def setup_logging(name: str = "ivor") -> logging.Logger:
    level = os.getenv("IVOR_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # httpx logs every PostgREST request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger(name)
