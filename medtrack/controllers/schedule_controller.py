# medtrack/controllers/schedule_controller.py

from flask import request

from medtrack.helpers import api_response, to_dicts
from medtrack.services.reminders import plan_reminders
from medtrack.services.schedule import generate_schedule
from medtrack.services.storage import get_storage
from medtrack.utils.dates import is_valid_date, utcnow
from medtrack.utils.validation import ValidationError, optional_timestamp_arg


def generate():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")

    target_date = data.get("date") or utcnow().date().isoformat()
    if not is_valid_date(target_date):
        raise ValidationError("date must be a YYYY-MM-DD date")

    created = generate_schedule(get_storage(), target_date)
    return api_response(True, "Schedule generated", {
        "date": target_date,
        "dosesCreated": len(created),
        "doses": to_dicts(created),
    })

def upcoming_reminders():
    now = optional_timestamp_arg(request.args, "now") or utcnow()

    storage = get_storage()
    settings = storage.get_settings()
    enabled = settings.notifications_enabled if settings else True

    reminders = plan_reminders(storage.list_medications(), now, notifications_enabled=enabled)
    return api_response(True, "Reminders planned", reminders)
