# medtrack/routes/medication_routes.py
from flask import Blueprint
from medtrack.controllers import medication_controller

medications_bp = Blueprint("medications", __name__, url_prefix="/api/v1/medications")

medications_bp.route("", methods=["GET"])(medication_controller.list_medications)
medications_bp.route("", methods=["POST"])(medication_controller.create_medication)
medications_bp.route("/<medication_id>", methods=["GET"])(medication_controller.get_medication)
medications_bp.route("/<medication_id>", methods=["PUT"])(medication_controller.update_medication)
medications_bp.route("/<medication_id>", methods=["DELETE"])(medication_controller.delete_medication)
medications_bp.route("/<medication_id>/doses", methods=["GET"])(medication_controller.list_medication_doses)
