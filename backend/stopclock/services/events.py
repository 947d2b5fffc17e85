"""Best-effort event logging against the analytics store.

Events are stamped when they are emitted and written by a background task.
A missing store or a failing write is reported on the app logger and never
reaches the game transition that produced the event.
"""

import enum
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from stopclock.errors import StoreReadError


class EventType(str, enum.Enum):
    GAME_START = 'GAME_START'
    GAME_STOP = 'GAME_STOP'
    RESET = 'RESET'
    VISIT_DASHBOARD = 'VISIT_DASHBOARD'


def _run_inline(fn, *args):
    return fn(*args)


class EventLogger:
    def __init__(self, app, spawn: Optional[Callable] = None):
        self.app = app
        self._spawn = spawn or _run_inline

    @property
    def enabled(self) -> bool:
        return bool(self.app.config.get('ANALYTICS_ENABLED'))

    def log_event(self, event_type: EventType, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Queue one event for the store. Never raises, never blocks on the write."""
        event_type = EventType(event_type)
        if not self.enabled:
            self.app.logger.warning(f"[analytics] store not configured, event not logged: {event_type.value}")
            return
        created_at = datetime.now(timezone.utc)
        self._spawn(self._write, event_type.value, dict(metadata or {}), created_at)

    def _write(self, event_type: str, metadata: Dict[str, Any], created_at: datetime) -> None:
        from stopclock import db
        from stopclock.models import AnalyticsEvent

        with self.app.app_context():
            try:
                db.session.add(AnalyticsEvent(event_type=event_type, event_metadata=metadata, created_at=created_at))
                db.session.commit()
            except Exception as exc:  # noqa: BLE001
                db.session.rollback()
                self.app.logger.error(f"[analytics] write failed event={event_type}: {exc}")

    def fetch_events(self) -> Optional[List[Dict[str, Any]]]:
        """Full event history, newest first. None when the store is not configured."""
        if not self.enabled:
            return None
        from stopclock.models import AnalyticsEvent

        try:
            rows = AnalyticsEvent.query.order_by(AnalyticsEvent.created_at.desc(), AnalyticsEvent.id.desc()).all()
        except SQLAlchemyError as exc:
            raise StoreReadError(str(exc)) from exc
        return [row.to_dict() for row in rows]
