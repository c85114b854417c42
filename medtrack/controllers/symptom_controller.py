# medtrack/controllers/symptom_controller.py
from flask import current_app, request

from medtrack.helpers import api_response, to_dicts
from medtrack.services.storage import get_storage
from medtrack.services.summary import symptom_severity
from medtrack.utils.validation import (
    ValidationError,
    optional_date_arg,
    positive_int_arg,
    validate_symptom,
)

RECENT_DEFAULT_LIMIT = 5


def list_symptoms():
    storage = get_storage()
    if request.args.get("recent") == "true":
        limit = positive_int_arg(request.args, "limit", RECENT_DEFAULT_LIMIT)
        symptoms = storage.recent_symptoms(limit)
    else:
        symptoms = storage.list_symptoms(date=optional_date_arg(request.args, "date"))
    return api_response(True, "Symptoms fetched", to_dicts(symptoms))


def create_symptom():
    fields = validate_symptom(request.get_json(silent=True))
    symptom = get_storage().create_symptom(fields)
    current_app.logger.info("Symptom logged: %s (severity %s)", symptom.id, symptom.severity)
    return api_response(True, "Symptom logged", symptom.to_dict(), 201)


def symptom_summary():
    start = optional_date_arg(request.args, "start")
    end = optional_date_arg(request.args, "end")
    if not start or not end:
        raise ValidationError("start and end query parameters are required")
    if start > end:
        raise ValidationError("start must not be after end")

    symptoms = get_storage().list_symptoms()
    return api_response(True, "Symptom summary", symptom_severity(symptoms, start, end))
