# medtrack/controllers/dose_controller.py
from flask import request

from medtrack.helpers import api_response, to_dicts
from medtrack.services.storage import get_storage
from medtrack.services.summary import dose_adherence
from medtrack.utils.dates import utcnow
from medtrack.utils.validation import ValidationError, optional_date_arg, validate_dose


def list_doses():
    day = optional_date_arg(request.args, "date")
    doses = get_storage().list_doses(date=day)
    return api_response(True, "Doses fetched", to_dicts(doses))


def create_dose():
    storage = get_storage()
    fields = validate_dose(request.get_json(silent=True))

    if not storage.get_medication(fields["medication_id"]):
        return api_response(False, "Medication not found", status_code=404)

    dose = storage.create_dose(fields)
    return api_response(True, "Dose created", dose.to_dict(), 201)


def get_dose(dose_id):
    dose = get_storage().get_dose(dose_id)
    if not dose:
        return api_response(False, "Dose not found", status_code=404)
    return api_response(True, "Dose fetched", dose.to_dict())


def update_dose(dose_id):
    """
    Record adherence for a dose. Body carries ``status`` and optionally
    ``takenTime``/``scheduledTime`` as ISO-8601 strings. Marking a dose
    taken or late without a takenTime stamps the current time.
    """
    fields = validate_dose(request.get_json(silent=True), partial=True)
    if fields.get("status") in ("taken", "late") and not fields.get("taken_time"):
        fields["taken_time"] = utcnow()

    dose = get_storage().update_dose(dose_id, fields)
    if not dose:
        return api_response(False, "Dose not found", status_code=404)
    return api_response(True, "Dose updated", dose.to_dict())


def dose_summary():
    day = optional_date_arg(request.args, "date")
    if not day:
        raise ValidationError("date query parameter is required")
    doses = get_storage().list_doses(date=day)
    return api_response(True, "Dose summary", dose_adherence(doses, day))
