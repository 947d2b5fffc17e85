from conftest import FakeClock
from stopclock.kiosk import EXTENSION_KEY


def names(received):
    return [pkt['name'] for pkt in received]


def test_connect_sends_state(sio_client):
    assert sio_client.is_connected('/ws')
    received = sio_client.get_received('/ws')
    updates = [pkt for pkt in received if pkt['name'] == 'state_update']
    assert updates
    assert updates[0]['args'][0]['phase'] == 'idle'


def test_start_and_stop_over_socket(flask_app, sio_client):
    clock = FakeClock(now=10_000)
    flask_app.extensions[EXTENSION_KEY].controller.clock = clock
    sio_client.get_received('/ws')  # flush

    sio_client.emit('start_game', namespace='/ws')
    clock.advance(3004)
    sio_client.emit('stop_game', namespace='/ws')

    received = sio_client.get_received('/ws')
    phases = [pkt['args'][0]['phase'] for pkt in received if pkt['name'] == 'state_update']
    assert phases[0] == 'running'
    assert phases[-1] == 'winner'
    assert 'error' not in names(received)


def test_invalid_transition_emits_error(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('stop_game', namespace='/ws')
    received = sio_client.get_received('/ws')
    errors = [pkt['args'][0] for pkt in received if pkt['name'] == 'error']
    assert errors and errors[0]['action'] == 'stop'
    assert errors[0]['phase'] == 'idle'


def test_ping_pong(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)
