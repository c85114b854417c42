# medtrack/__init__.py
import os

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .extensions import db, migrate
from .services.storage import EXTENSION_KEY, build_storage
from .utils.validation import ValidationError

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).lower() == "true"


def create_app(test_config=None, storage=None):
    """
    Build the API. ``storage`` overrides the backend picked by
    STORAGE_BACKEND; the same instance serves every request of this app.
    """
    app = Flask(__name__)

    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///medtrack.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['STORAGE_BACKEND'] = os.getenv('STORAGE_BACKEND', 'database')
    app.config['CORS_ORIGINS'] = os.getenv('CORS_ORIGINS', DEFAULT_CORS_ORIGINS)
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO').upper()
    app.config['AUTO_CREATE_TABLES'] = _env_flag('AUTO_CREATE_TABLES', 'true')

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)

    if storage is None:
        storage = build_storage(app.config['STORAGE_BACKEND'])
    app.extensions[EXTENSION_KEY] = storage

    if storage.name == "database" and app.config['AUTO_CREATE_TABLES']:
        with app.app_context():
            db.create_all()

    origins = [o.strip() for o in app.config['CORS_ORIGINS'].split(",") if o.strip()]
    CORS(app,
         origins=origins,
         methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
         allow_headers=["Content-Type"])

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify(success=False, message=e.message, data=None), 400

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return jsonify(success=False, message=e.description, data=None), e.code
        app.logger.exception("Unhandled error")
        return jsonify(success=False, message="Internal server error", data=None), 500

    from .routes.medication_routes import medications_bp
    from .routes.dose_routes import doses_bp
    from .routes.symptom_routes import symptoms_bp
    from .routes.settings_routes import settings_bp
    from .routes.schedule_routes import schedule_bp
    from .routes.catalog_routes import catalog_bp
    from .routes.health_routes import health_bp

    app.register_blueprint(medications_bp)
    app.register_blueprint(doses_bp)
    app.register_blueprint(symptoms_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(schedule_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(health_bp)

    app.logger.info("MedTrack started with %s storage", storage.name)
    return app
