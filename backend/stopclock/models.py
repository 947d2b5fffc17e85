from stopclock import db
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


class AnalyticsEvent(db.Model):
    """Append-only kiosk event. Rows are inserted and read, never updated or deleted."""
    __tablename__ = 'analytics'
    id = db.Column(db.Integer, primary_key=True)
    event_type = db.Column(db.String(32), nullable=False, index=True) # GAME_START, GAME_STOP, RESET, VISIT_DASHBOARD
    # `metadata` is reserved on declarative models, so the attribute name differs from the column
    event_metadata = db.Column('metadata', db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'event_type': self.event_type,
            'metadata': self.event_metadata or {},
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
