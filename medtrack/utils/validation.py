# medtrack/utils/validation.py
"""
Request body validation.

Each ``validate_*`` function takes the decoded JSON body (camelCase keys),
checks the shape and returns a dict keyed by model attribute names
(snake_case), ready to hand to the storage layer. Unknown keys are ignored.
"""

from medtrack.models import DOSE_STATUSES
from medtrack.utils.dates import is_valid_date, is_valid_time_of_day, parse_timestamp


class ValidationError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _non_empty_string(name):
    def check(value):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{name} must be a non-empty string")
        return value.strip()
    return check


def _optional_string(name):
    def check(value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be a string or null")
        return value.strip() or None
    return check


def _boolean(name):
    def check(value):
        if not isinstance(value, bool):
            raise ValidationError(f"{name} must be a boolean")
        return value
    return check


def _times(value):
    if not isinstance(value, list):
        raise ValidationError("times must be a list of HH:MM strings")
    bad = [t for t in value if not is_valid_time_of_day(t)]
    if bad:
        raise ValidationError(f"Invalid times (expected HH:MM): {bad}")
    return list(value)


def _food_reminder_minutes(value):
    if not _is_int(value) or value < 0:
        raise ValidationError("foodReminderMinutes must be a non-negative integer")
    return value


def _date(name):
    def check(value):
        if not is_valid_date(value):
            raise ValidationError(f"{name} must be a YYYY-MM-DD date")
        return value
    return check


def _timestamp(name, nullable=False):
    def check(value):
        if value is None and nullable:
            return None
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be an ISO-8601 timestamp")
        try:
            return parse_timestamp(value)
        except ValueError:
            raise ValidationError(f"{name} must be an ISO-8601 timestamp")
    return check


def _status(value):
    if value not in DOSE_STATUSES:
        raise ValidationError(f"status must be one of {list(DOSE_STATUSES)}")
    return value


def _severity(value):
    if not _is_int(value):
        raise ValidationError("severity must be an integer")
    return value


# (json key, model attribute, checker)
MEDICATION_FIELDS = [
    ("name", "name", _non_empty_string("name")),
    ("dosage", "dosage", _non_empty_string("dosage")),
    ("frequency", "frequency", _non_empty_string("frequency")),
    ("times", "times", _times),
    ("requiresFood", "requires_food", _boolean("requiresFood")),
    ("emptyStomach", "empty_stomach", _boolean("emptyStomach")),
    ("foodReminderMinutes", "food_reminder_minutes", _food_reminder_minutes),
    ("isActive", "is_active", _boolean("isActive")),
]
MEDICATION_REQUIRED = ["name", "dosage", "frequency", "times"]

DOSE_FIELDS = [
    ("medicationId", "medication_id", _non_empty_string("medicationId")),
    ("scheduledTime", "scheduled_time", _timestamp("scheduledTime")),
    ("takenTime", "taken_time", _timestamp("takenTime", nullable=True)),
    ("status", "status", _status),
    ("date", "date", _date("date")),
]
DOSE_REQUIRED = ["medicationId", "scheduledTime", "date"]

SYMPTOM_FIELDS = [
    ("description", "description", _non_empty_string("description")),
    ("severity", "severity", _severity),
    ("date", "date", _date("date")),
]
SYMPTOM_REQUIRED = ["description", "severity", "date"]

SETTINGS_FIELDS = [
    ("emergencyContactName", "emergency_contact_name", _optional_string("emergencyContactName")),
    ("emergencyContactPhone", "emergency_contact_phone", _optional_string("emergencyContactPhone")),
    ("doctorName", "doctor_name", _optional_string("doctorName")),
    ("doctorPhone", "doctor_phone", _optional_string("doctorPhone")),
    ("notificationsEnabled", "notifications_enabled", _boolean("notificationsEnabled")),
]


def _validate(data, fields, required=(), exclude=()):
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")

    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(f"Missing fields: {missing}")

    cleaned = {}
    for key, attr, check in fields:
        if key in data and key not in exclude:
            cleaned[attr] = check(data[key])
    return cleaned


def validate_medication(data, partial=False):
    if partial:
        return _validate(data, MEDICATION_FIELDS)
    # isActive is managed by the store on creation
    return _validate(data, MEDICATION_FIELDS, MEDICATION_REQUIRED, exclude=("isActive",))


def validate_dose(data, partial=False):
    if partial:
        return _validate(data, DOSE_FIELDS, exclude=("medicationId",))
    return _validate(data, DOSE_FIELDS, DOSE_REQUIRED)


def validate_symptom(data):
    return _validate(data, SYMPTOM_FIELDS, SYMPTOM_REQUIRED)


def validate_settings(data):
    return _validate(data, SETTINGS_FIELDS)


def optional_date_arg(args, name):
    value = args.get(name)
    if value is None or value == "":
        return None
    if not is_valid_date(value):
        raise ValidationError(f"{name} must be a YYYY-MM-DD date")
    return value


def positive_int_arg(args, name, default):
    raw = args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a positive integer")
    if value < 1:
        raise ValidationError(f"{name} must be a positive integer")
    return value


def optional_timestamp_arg(args, name):
    raw = args.get(name)
    if raw is None or raw == "":
        return None
    try:
        # an unescaped "+" in a query string arrives as a space
        return parse_timestamp(raw.strip().replace(" ", "+"))
    except ValueError:
        raise ValidationError(f"{name} must be an ISO-8601 timestamp")
