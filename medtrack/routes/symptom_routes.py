# medtrack/routes/symptom_routes.py
from flask import Blueprint
from medtrack.controllers import symptom_controller

symptoms_bp = Blueprint("symptoms", __name__, url_prefix="/api/v1/symptoms")

symptoms_bp.route("", methods=["GET"])(symptom_controller.list_symptoms)
symptoms_bp.route("", methods=["POST"])(symptom_controller.create_symptom)
symptoms_bp.route("/summary", methods=["GET"])(symptom_controller.symptom_summary)
