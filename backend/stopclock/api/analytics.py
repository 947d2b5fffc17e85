from flask import Blueprint, jsonify, current_app
from stopclock.kiosk import get_kiosk
from stopclock.services.analytics import dashboard_view
from stopclock.services.events import EventType


analytics = Blueprint('analytics', __name__)


@analytics.route('/stats', methods=['GET'])
def get_stats():
    kiosk = get_kiosk()
    kiosk.events.log_event(EventType.VISIT_DASHBOARD)
    limit = int(current_app.config.get('RECENT_ACTIVITY_LIMIT', 20))
    return jsonify(dashboard_view(kiosk.events, limit))
