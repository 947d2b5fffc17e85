import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'stopclock-kiosk-dev'
    # Event store endpoint + credential. Both must be set, otherwise the kiosk runs offline.
    ANALYTICS_STORE_URL = os.environ.get('ANALYTICS_STORE_URL')
    ANALYTICS_STORE_KEY = os.environ.get('ANALYTICS_STORE_KEY')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Stopwatch sampling granularity (ms) for the live display
    TICK_INTERVAL_MS = int(os.environ.get('TICK_INTERVAL_MS', '10'))
    # Rows shown in the dashboard activity feed
    RECENT_ACTIVITY_LIMIT = int(os.environ.get('RECENT_ACTIVITY_LIMIT', '20'))
