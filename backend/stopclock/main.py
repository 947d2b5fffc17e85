from flask import Blueprint, jsonify, current_app

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Stop-the-clock kiosk server',
        'offline': not current_app.config.get('ANALYTICS_ENABLED', False),
    })
