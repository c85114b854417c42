# medtrack/controllers/medication_controller.py
from flask import current_app, request

from medtrack.helpers import api_response, to_dicts
from medtrack.services.storage import get_storage
from medtrack.utils.validation import validate_medication


def list_medications():
    medications = get_storage().list_medications()
    return api_response(True, "Medications fetched", to_dicts(medications))


def create_medication():
    fields = validate_medication(request.get_json(silent=True))
    medication = get_storage().create_medication(fields)
    current_app.logger.info("Medication created: %s (%s)", medication.id, medication.name)
    return api_response(True, "Medication created", medication.to_dict(), 201)


def get_medication(medication_id):
    medication = get_storage().get_medication(medication_id)
    if not medication:
        return api_response(False, "Medication not found", status_code=404)
    return api_response(True, "Medication fetched", medication.to_dict())


def update_medication(medication_id):
    fields = validate_medication(request.get_json(silent=True), partial=True)
    medication = get_storage().update_medication(medication_id, fields)
    if not medication:
        return api_response(False, "Medication not found", status_code=404)
    return api_response(True, "Medication updated", medication.to_dict())


def delete_medication(medication_id):
    """Soft delete: the record stays fetchable by id with isActive=false."""
    if not get_storage().delete_medication(medication_id):
        return api_response(False, "Medication not found", status_code=404)
    current_app.logger.info("Medication deactivated: %s", medication_id)
    return api_response(True, "Medication deleted successfully")


def list_medication_doses(medication_id):
    storage = get_storage()
    if not storage.get_medication(medication_id):
        return api_response(False, "Medication not found", status_code=404)
    doses = storage.list_doses_by_medication(medication_id)
    return api_response(True, "Doses fetched", to_dicts(doses))
