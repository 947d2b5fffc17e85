"""Attempt tracking for the stop-the-clock challenge.

One GameController owns one Session (one kiosk, one active customer).
Phases: idle -> running -> winner | result -> idle. A staff reset returns
to idle from anywhere and zeroes the attempt count.
"""

import enum
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from stopclock.errors import InvalidTransition
from stopclock.services.events import EventType
from stopclock.services.game import rules
from stopclock.services.game.clock import MonotonicClock, Sampler


class Phase(str, enum.Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    RESULT = 'result'
    WINNER = 'winner'


@dataclass
class Session:
    phase: Phase = Phase.IDLE
    elapsed_ms: int = 0
    attempt_count: int = 0
    last_result_win: bool = False
    last_attempt: Optional[rules.AttemptRecord] = None

    def to_dict(self) -> Dict[str, Any]:
        next_official = rules.is_official(self.attempt_count)
        return {
            'phase': self.phase.value,
            'elapsed_ms': self.elapsed_ms,
            'display_time': rules.format_time(self.elapsed_ms),
            'attempt_count': self.attempt_count,
            'last_result_win': self.last_result_win,
            'last_attempt': self.last_attempt.to_dict() if self.last_attempt else None,
            'next_attempt_official': next_official,
            'attempts_left': rules.attempts_left(self.attempt_count),
            'max_official_attempts': rules.MAX_OFFICIAL_ATTEMPTS,
            'target_display': rules.TARGET_DISPLAY,
        }


def _noop(*_args, **_kwargs):
    return None


class GameController:
    """Drives the Session through its phases.

    `emit(event_type, metadata)` receives the analytics events and must not
    block; `on_change(kind, state)` receives presentation updates, where kind
    is 'state' for phase changes and 'tick' for live stopwatch samples.
    Both run under the session lock, so listeners see updates in session order
    and a tick can never be delivered after the stop that ended its run.
    """

    def __init__(
        self,
        sampler: Sampler,
        clock: Optional[MonotonicClock] = None,
        emit: Optional[Callable[[EventType, Dict[str, Any]], None]] = None,
        on_change: Optional[Callable[[str, Dict[str, Any]], None]] = None,
        logger=None,
    ):
        self.session = Session()
        self.sampler = sampler
        self.clock = clock or MonotonicClock()
        self._emit = emit or _noop
        self._on_change = on_change or _noop
        self._logger = logger
        self._started_at = 0
        self._run_generation = 0
        self._lock = threading.RLock()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self.session.to_dict()

    def start(self) -> Dict[str, Any]:
        with self._lock:
            if self.session.phase is not Phase.IDLE:
                raise InvalidTransition('start', self.session.phase.value)
            self.session.elapsed_ms = 0
            self.session.phase = Phase.RUNNING
            self._started_at = self.clock.now_ms()
            self._run_generation = self.sampler.start(self._on_sample)
            attempt_number = self.session.attempt_count + 1
            self._log(f"[game-start] attempt={attempt_number}")
            self._emit(EventType.GAME_START, {'attempt_number': attempt_number})
            state = self.session.to_dict()
            self._on_change('state', state)
        return state

    def stop(self) -> Dict[str, Any]:
        with self._lock:
            if self.session.phase is not Phase.RUNNING:
                raise InvalidTransition('stop', self.session.phase.value)
            elapsed = max(0, self.clock.now_ms() - self._started_at)
            self.sampler.cancel()
            record = rules.evaluate(elapsed, self.session.attempt_count)
            self.session.elapsed_ms = elapsed
            self.session.last_attempt = record
            self.session.last_result_win = record.is_win
            self.session.phase = Phase.WINNER if record.is_win else Phase.RESULT
            self.session.attempt_count += 1
            self._log(
                f"[game-stop] attempt_index={record.attempt_index} time_ms={elapsed} "
                f"hit={record.hit_target} official={record.is_official} win={record.is_win}"
            )
            self._emit(EventType.GAME_STOP, {
                'time_ms': elapsed,
                'is_win': record.is_win,
                'is_official': record.is_official,
                'hit_target': record.hit_target,
                'attempt_index': record.attempt_index,
            })
            state = self.session.to_dict()
            self._on_change('state', state)
        return state

    def try_again(self) -> Dict[str, Any]:
        """Back to idle; the customer presses start again for the next run."""
        with self._lock:
            if self.session.phase not in (Phase.RESULT, Phase.WINNER):
                raise InvalidTransition('try again', self.session.phase.value)
            self.session.phase = Phase.IDLE
            self.session.elapsed_ms = 0
            self.session.last_result_win = False
            state = self.session.to_dict()
            self._on_change('state', state)
        return state

    def full_reset(self, cashier: str) -> Dict[str, Any]:
        """Start over for a new customer. Valid from any phase."""
        with self._lock:
            total_attempts = self.session.attempt_count
            self.sampler.cancel()
            self.session = Session()
            self._log(f"[reset] cashier={cashier} total_attempts={total_attempts}")
            self._emit(EventType.RESET, {'total_attempts': total_attempts, 'cashier': cashier})
            state = self.session.to_dict()
            self._on_change('state', state)
        return state

    def _on_sample(self) -> None:
        with self._lock:
            if self.session.phase is not Phase.RUNNING or not self.sampler.is_current(self._run_generation):
                return
            self.session.elapsed_ms = max(0, self.clock.now_ms() - self._started_at)
            tick = {'elapsed_ms': self.session.elapsed_ms, 'display_time': rules.format_time(self.session.elapsed_ms)}
            self._on_change('tick', tick)

    def _log(self, message: str) -> None:
        if self._logger is not None:
            self._logger.info(message)
