"""
Catalog access: the ``glb_models`` table.

Besides plain reads and writes, ``ModelAccess`` offers a live view of the
ordered catalog. Subscribers get the current snapshot as soon as they
subscribe and a fresh one after every insert or delete.
"""

import threading
from typing import Callable, List, Optional

from sqlalchemy import delete, desc, select

from glbcatalog.db.session import Database
from glbcatalog.logging_config import get_logger
from glbcatalog.models.glb_model import GlbModel

logger = get_logger(__name__)

SnapshotCallback = Callable[[List[GlbModel]], None]


class Subscription:
    """Handle returned by ``ModelAccess.subscribe``; close it to stop updates."""

    def __init__(self, access: "ModelAccess", callback: SnapshotCallback):
        self._access = access
        self.callback = callback
        self.active = True

    def close(self) -> None:
        if self.active:
            self.active = False
            self._access._unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ModelAccess:
    def __init__(self, database: Database):
        self.database = database
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()
        # serializes snapshot delivery so subscribers never see an older list last
        self._publish_lock = threading.RLock()

    def insert(self, model: GlbModel) -> GlbModel:
        """Append a catalog row and assign its id. The file path is not checked."""
        with self.database.session() as db:
            db.add(model)
            db.commit()
            db.refresh(model)
        logger.info("model_inserted", model_id=model.id, file_name=model.file_name)
        self._publish()
        return model

    def delete(self, model: GlbModel) -> None:
        """Remove the row with ``model.id``. The backing file is the caller's concern."""
        with self.database.session() as db:
            db.execute(delete(GlbModel).where(GlbModel.id == model.id))
            db.commit()
        logger.info("model_deleted", model_id=model.id)
        self._publish()

    def list_all(self) -> List[GlbModel]:
        """All rows, newest ``added_date`` first."""
        query = select(GlbModel).order_by(desc(GlbModel.added_date))
        with self.database.session() as db:
            return list(db.execute(query).scalars().all())

    def get_by_id(self, model_id: int) -> Optional[GlbModel]:
        with self.database.session() as db:
            return db.get(GlbModel, model_id)

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        subscription = Subscription(self, callback)
        with self._publish_lock:
            with self._lock:
                self._subscriptions.append(subscription)
            self._deliver(subscription, self.list_all())
        return subscription

    def _unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def _publish(self) -> None:
        with self._publish_lock:
            with self._lock:
                subscriptions = list(self._subscriptions)
            if not subscriptions:
                return
            snapshot = self.list_all()
            for subscription in subscriptions:
                self._deliver(subscription, snapshot)

    def _deliver(self, subscription: Subscription, snapshot: List[GlbModel]) -> None:
        if not subscription.active:
            return
        try:
            subscription.callback(list(snapshot))
        except Exception:
            logger.exception("catalog_subscriber_failed")
