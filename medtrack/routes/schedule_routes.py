# medtrack/routes/schedule_routes.py
from flask import Blueprint
from medtrack.controllers import schedule_controller

schedule_bp = Blueprint("schedule", __name__, url_prefix="/api/v1")

schedule_bp.route("/generate-schedule", methods=["POST"])(schedule_controller.generate)
schedule_bp.route("/reminders", methods=["GET"])(schedule_controller.upcoming_reminders)
