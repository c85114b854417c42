from flask import Blueprint, current_app
from sqlalchemy.exc import SQLAlchemyError
from medtrack.helpers import api_response
from medtrack.services.storage import get_storage

health_bp = Blueprint("health", __name__, url_prefix="/api/v1")


@health_bp.route("/health")
def health_check():
    storage = get_storage()
    try:
        storage.ping()
        return api_response(
            success=True,
            message="Storage connection successful",
            data={"status": "connected", "storage": storage.name}
        )
    except SQLAlchemyError:
        current_app.logger.exception("Storage health check failed")
        return api_response(
            success=False,
            message="Storage connection failed",
            data={"status": "disconnected", "storage": storage.name},
            status_code=503
        )
