# medtrack/routes/dose_routes.py
from flask import Blueprint
from medtrack.controllers import dose_controller

doses_bp = Blueprint("doses", __name__, url_prefix="/api/v1/doses")

doses_bp.route("", methods=["GET"])(dose_controller.list_doses)
doses_bp.route("", methods=["POST"])(dose_controller.create_dose)
doses_bp.route("/summary", methods=["GET"])(dose_controller.dose_summary)
doses_bp.route("/<dose_id>", methods=["GET"])(dose_controller.get_dose)
doses_bp.route("/<dose_id>", methods=["PUT"])(dose_controller.update_dose)
