"""Stopwatch challenge rules that are independent from HTTP, DB and clocks.

Every rule the kiosk applies lives here once: the evaluator reads these
constants and so does the presentation copy ("2 official attempts left").

Rule of thumb:
- OK: comparisons, formatting, pure transformations.
- Not OK: touching the session, the event store, Flask or time.monotonic().
"""

from dataclasses import dataclass, asdict

# Inclusive target window in raw milliseconds ("3.00" on the display).
TARGET_MIN_MS = 2995
TARGET_MAX_MS = 3005
TARGET_DISPLAY = '3.00'

# Attempt indices 0..MAX_OFFICIAL_ATTEMPTS-1 are eligible for the prize.
MAX_OFFICIAL_ATTEMPTS = 3


@dataclass(frozen=True)
class AttemptRecord:
    attempt_index: int
    elapsed_ms: int
    hit_target: bool
    is_official: bool
    is_win: bool

    def to_dict(self):
        return asdict(self)


def hit_target(elapsed_ms: int) -> bool:
    return TARGET_MIN_MS <= elapsed_ms <= TARGET_MAX_MS


def is_official(attempt_index: int) -> bool:
    return attempt_index < MAX_OFFICIAL_ATTEMPTS


def evaluate(elapsed_ms: int, attempt_index: int) -> AttemptRecord:
    """Classify a stopped run.

    A win needs both a hit on the target window and an official attempt;
    hitting the target on a practice attempt is reported but not rewarded.
    """
    hit = hit_target(elapsed_ms)
    official = is_official(attempt_index)
    return AttemptRecord(
        attempt_index=attempt_index,
        elapsed_ms=elapsed_ms,
        hit_target=hit,
        is_official=official,
        is_win=hit and official,
    )


def attempts_left(attempt_count: int) -> int:
    """Official attempts still available in this session."""
    return max(0, MAX_OFFICIAL_ATTEMPTS - attempt_count)


def format_time(ms: int) -> str:
    """Render milliseconds as S.CC, truncating (not rounding) to centiseconds."""
    seconds = ms // 1000
    centiseconds = (ms % 1000) // 10
    return f"{seconds}.{centiseconds:02d}"
