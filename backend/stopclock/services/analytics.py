"""Dashboard aggregation over the analytics event log."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping

from stopclock.errors import StoreReadError


@dataclass(frozen=True)
class Stats:
    total_games: int = 0
    official_wins: int = 0
    practice_games: int = 0
    resets: int = 0
    average_time_seconds: float = 0

    @property
    def official_games(self) -> int:
        return self.total_games - self.practice_games

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['official_games'] = self.official_games
        return data


def _metadata(event: Mapping[str, Any]) -> Mapping[str, Any]:
    meta = event.get('metadata')
    return meta if isinstance(meta, Mapping) else {}


def _time_ms(meta: Mapping[str, Any]):
    value = meta.get('time_ms')
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def compute_stats(events: Iterable[Mapping[str, Any]]) -> Stats:
    """Fold the event history into dashboard counters.

    Missing or malformed metadata only drops that field's contribution.
    """
    total_games = 0
    official_wins = 0
    practice_games = 0
    resets = 0
    total_time = 0
    time_count = 0

    for event in events:
        event_type = event.get('event_type')
        if event_type == 'GAME_STOP':
            meta = _metadata(event)
            total_games += 1
            if meta.get('is_official'):
                if meta.get('is_win'):
                    official_wins += 1
            else:
                practice_games += 1
            time_ms = _time_ms(meta)
            if time_ms is not None:
                total_time += time_ms
                time_count += 1
        elif event_type == 'RESET':
            resets += 1

    average = round(total_time / time_count / 1000, 2) if time_count else 0
    return Stats(
        total_games=total_games,
        official_wins=official_wins,
        practice_games=practice_games,
        resets=resets,
        average_time_seconds=average,
    )


def _summary(event: Mapping[str, Any]) -> str:
    meta = _metadata(event)
    event_type = event.get('event_type')
    if event_type == 'GAME_START':
        return f"Attempt {meta.get('attempt_number', '?')} started"
    if event_type == 'GAME_STOP':
        time_ms = _time_ms(meta)
        shown = f"{time_ms / 1000:.2f}s" if time_ms is not None else 'unknown time'
        if meta.get('is_win'):
            return f"WIN at {shown}"
        kind = 'official' if meta.get('is_official') else 'practice'
        return f"Stopped at {shown} ({kind})"
    if event_type == 'RESET':
        return f"Reset by {meta.get('cashier', 'unknown')} after {meta.get('total_attempts', '?')} attempts"
    if event_type == 'VISIT_DASHBOARD':
        return 'Dashboard viewed'
    return str(event_type)


def recent_activity(events: Iterable[Mapping[str, Any]], limit: int = 20) -> List[Dict[str, Any]]:
    """Feed rows for the first `limit` events; the store returns them newest first."""
    ordered = list(events)
    return [
        {
            'event_type': event.get('event_type'),
            'created_at': event.get('created_at'),
            'summary': _summary(event),
        }
        for event in ordered[:limit]
    ]


def dashboard_view(event_logger, limit: int = 20) -> Dict[str, Any]:
    """Stats + feed for the dashboard. Offline or unreadable stores give a zeroed view."""
    view = {'stats': Stats().to_dict(), 'recent': [], 'loading': False, 'offline': False}
    try:
        events = event_logger.fetch_events()
    except StoreReadError as exc:
        event_logger.app.logger.error(f"[analytics] error fetching stats: {exc}")
        return view
    if events is None:
        view['offline'] = True
        return view
    view['stats'] = compute_stats(events).to_dict()
    view['recent'] = recent_activity(events, limit)
    return view
