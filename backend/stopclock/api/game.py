from flask import Blueprint, jsonify, request
from stopclock.errors import InvalidPinInput, InvalidTransition, PinGateClosed
from stopclock.kiosk import get_kiosk


game = Blueprint('game', __name__)


@game.errorhandler(InvalidTransition)
def handle_invalid_transition(exc):
    return jsonify({'error': str(exc), 'state': get_kiosk().controller.snapshot()}), 409


@game.errorhandler(InvalidPinInput)
def handle_invalid_pin_input(exc):
    return jsonify({'error': str(exc), 'gate': get_kiosk().gate.to_dict()}), 400


@game.errorhandler(PinGateClosed)
def handle_gate_closed(exc):
    return jsonify({'error': str(exc), 'gate': get_kiosk().gate.to_dict()}), 409


@game.route('/state', methods=['GET'])
def get_state():
    return jsonify(get_kiosk().controller.snapshot())


@game.route('/start', methods=['POST'])
def start():
    return jsonify(get_kiosk().controller.start())


@game.route('/stop', methods=['POST'])
def stop():
    return jsonify(get_kiosk().controller.stop())


@game.route('/try-again', methods=['POST'])
def try_again():
    return jsonify(get_kiosk().controller.try_again())


# ---- Staff reset gate ----

@game.route('/pin', methods=['GET'])
def get_gate():
    return jsonify(get_kiosk().gate.to_dict())


@game.route('/pin/open', methods=['POST'])
def open_gate():
    gate = get_kiosk().gate
    gate.open()
    return jsonify(gate.to_dict())


@game.route('/pin/digit', methods=['POST'])
def append_digit():
    data = request.get_json(silent=True) or {}
    gate = get_kiosk().gate
    gate.append_digit(data.get('digit'))
    return jsonify(gate.to_dict())


@game.route('/pin/clear', methods=['POST'])
def clear_pin():
    gate = get_kiosk().gate
    gate.clear()
    return jsonify(gate.to_dict())


@game.route('/pin/submit', methods=['POST'])
def submit_pin():
    kiosk = get_kiosk()
    cashier = kiosk.gate.submit()
    return jsonify({
        'ok': cashier is not None,
        'cashier': cashier,
        'gate': kiosk.gate.to_dict(),
        'state': kiosk.controller.snapshot(),
    })


@game.route('/pin/cancel', methods=['POST'])
def cancel_gate():
    gate = get_kiosk().gate
    gate.cancel()
    return jsonify(gate.to_dict())
