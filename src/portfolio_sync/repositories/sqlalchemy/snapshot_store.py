"""SQLAlchemy implementation of SnapshotStore."""

import logging
import math
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from portfolio_sync.api.schemas import HoldingSchema, HoldingListAdapter
from portfolio_sync.core.clock import Clock, now_epoch
from portfolio_sync.domain.models import Holding
from portfolio_sync.repositories.sqlalchemy.orm_models import SnapshotEntryORM

logger = logging.getLogger(__name__)

HOLDINGS_KEY = "portfolio_holdings_cache"
TIMESTAMP_KEY = "portfolio_cache_timestamp"


class SqlAlchemySnapshotStore:
    """
    SQLAlchemy-backed holdings snapshot.

    The snapshot is two rows (holdings JSON, capture timestamp) that are
    always written and deleted in the same transaction. A snapshot is fresh
    while `now <= captured_at + ttl`.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        ttl_seconds: int = 300,
        clock: Clock = now_epoch,
    ):
        self._session_factory = session_factory
        self._ttl = ttl_seconds
        self._clock = clock

    def save(self, holdings: list[Holding]) -> None:
        """Replace the snapshot with `holdings` captured now."""
        payload = HoldingListAdapter.dump_json(
            [HoldingSchema.from_domain(h) for h in holdings],
            by_alias=True,
        ).decode("utf-8")
        captured_at = self._clock()

        try:
            with self._session_factory() as db:
                db.merge(SnapshotEntryORM(key=HOLDINGS_KEY, value=payload))
                db.merge(SnapshotEntryORM(key=TIMESTAMP_KEY, value=repr(captured_at)))
                db.commit()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to save holdings snapshot: {e}")

    def load(self) -> Optional[list[Holding]]:
        """
        Return the cached holdings if present, fresh and decodable.

        Any miss (absent, expired, corrupt, unreadable) clears the snapshot.
        """
        try:
            with self._session_factory() as db:
                payload = db.get(SnapshotEntryORM, HOLDINGS_KEY)
                stamp = db.get(SnapshotEntryORM, TIMESTAMP_KEY)
                payload_value = payload.value if payload else None
                stamp_value = stamp.value if stamp else None
        except SQLAlchemyError as e:
            logger.warning(f"Failed to read holdings snapshot: {e}")
            self.clear()
            return None

        if payload_value is None:
            self.clear()
            return None

        if self._is_expired(stamp_value):
            logger.info("Holdings snapshot expired; clearing")
            self.clear()
            return None

        try:
            items = HoldingListAdapter.validate_json(payload_value)
        except ValidationError as e:
            logger.warning(f"Corrupt holdings snapshot; clearing: {e}")
            self.clear()
            return None

        return [item.to_domain() for item in items]

    def clear(self) -> None:
        """Remove both snapshot rows."""
        try:
            with self._session_factory() as db:
                db.query(SnapshotEntryORM).filter(
                    SnapshotEntryORM.key.in_((HOLDINGS_KEY, TIMESTAMP_KEY))
                ).delete(synchronize_session=False)
                db.commit()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to clear holdings snapshot: {e}")

    def has_data(self) -> bool:
        """Check whether holdings are stored, without evaluating the TTL."""
        try:
            with self._session_factory() as db:
                return db.get(SnapshotEntryORM, HOLDINGS_KEY) is not None
        except SQLAlchemyError as e:
            logger.warning(f"Failed to check holdings snapshot: {e}")
            return False

    def _is_expired(self, stamp_value: Optional[str]) -> bool:
        """A missing, unparseable or non-finite timestamp counts as expired."""
        if stamp_value is None:
            return True
        try:
            captured_at = float(stamp_value)
        except ValueError:
            return True
        if not math.isfinite(captured_at):
            return True
        return self._clock() > captured_at + self._ttl
