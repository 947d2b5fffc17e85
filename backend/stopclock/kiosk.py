from flask import current_app

from stopclock.services.events import EventLogger
from stopclock.services.game import CASHIERS, GameController, PinGate
from stopclock.services.game.clock import MonotonicClock, Sampler

EXTENSION_KEY = 'stopclock'


class Kiosk:
    """The single game instance of one device: controller, staff gate, event logger."""

    def __init__(self, controller: GameController, gate: PinGate, events: EventLogger):
        self.controller = controller
        self.gate = gate
        self.events = events


def _skip_task(fn, *args):
    return None


def build_kiosk(app, socketio) -> Kiosk:
    testing = app.config.get('TESTING')
    if testing:
        # Deterministic writes in tests
        events = EventLogger(app)
    else:
        events = EventLogger(app, spawn=socketio.start_background_task)

    # No live sampling loops in tests unless explicitly requested
    if testing and not app.config.get('ENABLE_SAMPLER_IN_TESTS'):
        sampler_spawn = _skip_task
    else:
        sampler_spawn = socketio.start_background_task

    def on_change(kind, payload):
        event = 'tick' if kind == 'tick' else 'state_update'
        socketio.emit(event, payload, namespace='/ws')

    sampler = Sampler(
        int(app.config.get('TICK_INTERVAL_MS', 10)),
        spawn=sampler_spawn,
        sleep=socketio.sleep,
    )
    controller = GameController(
        sampler,
        clock=MonotonicClock(),
        emit=events.log_event,
        on_change=on_change,
        logger=app.logger,
    )
    gate = PinGate(CASHIERS, on_authorized=controller.full_reset)
    return Kiosk(controller, gate, events)


def get_kiosk() -> Kiosk:
    return current_app.extensions[EXTENSION_KEY]
