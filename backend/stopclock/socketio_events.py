from flask_socketio import emit
from stopclock import socketio
from stopclock.errors import InvalidTransition
from stopclock.kiosk import get_kiosk


def handle_connect(auth=None):
    emit('state_update', get_kiosk().controller.snapshot())


def _drive(action):
    try:
        action()
    except InvalidTransition as exc:
        emit('error', {'message': str(exc), 'action': exc.action, 'phase': exc.phase})


def handle_start_game(data=None):
    _drive(get_kiosk().controller.start)


def handle_stop_game(data=None):
    _drive(get_kiosk().controller.stop)


def handle_try_again(data=None):
    _drive(get_kiosk().controller.try_again)


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'.

    State changes are broadcast by the controller listener, so handlers
    only report failures back to the caller.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('start_game', handle_start_game, namespace='/ws')
    socketio.on_event('stop_game', handle_stop_game, namespace='/ws')
    socketio.on_event('try_again', handle_try_again, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
