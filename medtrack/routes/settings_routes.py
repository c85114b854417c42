# medtrack/routes/settings_routes.py
from flask import Blueprint
from medtrack.controllers import settings_controller

settings_bp = Blueprint("settings", __name__, url_prefix="/api/v1/settings")

settings_bp.route("", methods=["GET"])(settings_controller.get_settings)
settings_bp.route("", methods=["PUT"])(settings_controller.update_settings)
