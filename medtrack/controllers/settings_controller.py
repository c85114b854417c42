# medtrack/controllers/settings_controller.py
from flask import current_app, request

from medtrack.helpers import api_response
from medtrack.services.storage import get_storage
from medtrack.utils.validation import validate_settings


def get_settings():
    settings = get_storage().get_settings()
    # nothing saved yet
    if not settings:
        return api_response(True, "Settings fetched", {})
    return api_response(True, "Settings fetched", settings.to_dict())


def update_settings():
    fields = validate_settings(request.get_json(silent=True))
    settings = get_storage().upsert_settings(fields)
    current_app.logger.info("Settings saved")
    return api_response(True, "Settings saved successfully", settings.to_dict())
