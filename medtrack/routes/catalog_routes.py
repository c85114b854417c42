# medtrack/routes/catalog_routes.py
from flask import Blueprint
from medtrack.controllers import catalog_controller

catalog_bp = Blueprint("medication_database", __name__, url_prefix="/api/v1/medication-database")

catalog_bp.route("/search", methods=["GET"])(catalog_controller.search)
catalog_bp.route("/category/<category>", methods=["GET"])(catalog_controller.get_by_category)
catalog_bp.route("/<name>", methods=["GET"])(catalog_controller.get_by_name)
