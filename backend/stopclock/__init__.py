from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
from sqlalchemy.engine import make_url
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)


def store_uri(url: str, key: str) -> str:
    """Database URI for the event store, with the credential filled in as the password."""
    parsed = make_url(url)
    if parsed.username and not parsed.password:
        parsed = parsed.set(password=key)
    return parsed.render_as_string(hide_password=False)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    store_url = flask_app.config.get('ANALYTICS_STORE_URL')
    store_key = flask_app.config.get('ANALYTICS_STORE_KEY')
    if store_url and store_key:
        flask_app.config['SQLALCHEMY_DATABASE_URI'] = store_uri(store_url, store_key)
        flask_app.config['ANALYTICS_ENABLED'] = True
        db.init_app(flask_app)
        migrate.init_app(flask_app, db)
        # Ensure the model is registered on the metadata
        from stopclock import models  # noqa: F401
    else:
        flask_app.config['ANALYTICS_ENABLED'] = False
        flask_app.logger.warning("[analytics] ANALYTICS_STORE_URL/ANALYTICS_STORE_KEY missing, running offline")

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from stopclock.main import main
    flask_app.register_blueprint(main)

    from stopclock.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    from stopclock.api.analytics import analytics
    flask_app.register_blueprint(analytics, url_prefix='/api/analytics')

    from stopclock.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from stopclock.kiosk import EXTENSION_KEY, build_kiosk
    flask_app.extensions[EXTENSION_KEY] = build_kiosk(flask_app, socketio)

    return flask_app
