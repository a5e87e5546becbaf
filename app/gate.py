import logging
import threading
from contextlib import contextmanager

log = logging.getLogger(__name__)


class GateBusy(RuntimeError):
    """Another request of the same class is still in flight."""


class SingleFlightGate:
    """
    Allows one outstanding operation per request class.
    A second caller is turned away immediately instead of queueing.
    """
    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self):
        if not self._lock.acquire(blocking=False):
            log.info("%s request rejected: one already in flight", self.name)
            raise GateBusy(f"A {self.name} request is already in progress")
        try:
            yield
        finally:
            self._lock.release()
