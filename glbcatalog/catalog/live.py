import threading
from typing import List

from glbcatalog.access.models import ModelAccess, Subscription
from glbcatalog.models.glb_model import GlbModel


class LiveCatalog:
    """Latest ordered catalog snapshot, kept current by a ``ModelAccess`` subscription."""

    def __init__(self, models: ModelAccess):
        self._lock = threading.Lock()
        self._snapshot: List[GlbModel] = []
        self._subscription: Subscription = models.subscribe(self._on_change)

    def _on_change(self, snapshot: List[GlbModel]) -> None:
        with self._lock:
            self._snapshot = snapshot

    @property
    def snapshot(self) -> List[GlbModel]:
        with self._lock:
            return list(self._snapshot)

    def close(self) -> None:
        self._subscription.close()
