import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

# third-party loggers that are noisy at INFO while waiting on slow agent calls
QUIET_LOGGERS = ("urllib3", "httpx", "multipart")


def setup_logging(level: str = "INFO") -> None:
    """Install one stdout handler on the root logger (idempotent across uvicorn reloads)."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_legal_dashboard", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._legal_dashboard = True
    root.addHandler(handler)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
