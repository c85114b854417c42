# medtrack/services/storage.py
"""
Storage for medications, doses, symptoms and the settings singleton.

Two backends share one contract:
  - DatabaseStorage: Flask-SQLAlchemy session (durable)
  - MemoryStorage: process-local dicts (tests / demo), no locking,
    concurrent writers to the same record are last-write-wins

"Not found" is returned as None (or False for deletes), never raised.
The app holds exactly one storage instance, reachable via get_storage().
"""

import uuid

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from medtrack.extensions import db
from medtrack.models import Medication, MedicationDose, Symptom, UserSettings
from medtrack.utils.dates import utcnow

EXTENSION_KEY = "medtrack.storage"

MEDICATION_DEFAULTS = {
    "requires_food": False,
    "empty_stomach": False,
    "food_reminder_minutes": 30,
}
SETTINGS_DEFAULTS = {
    "emergency_contact_name": None,
    "emergency_contact_phone": None,
    "doctor_name": None,
    "doctor_phone": None,
    "notifications_enabled": True,
}


def clamp_severity(value):
    return max(1, min(5, int(value)))


def _new_id():
    return str(uuid.uuid4())


def _merge(record, fields):
    for attr, value in fields.items():
        if attr == "id":
            continue
        setattr(record, attr, value)
    return record


def _medication(fields):
    values = dict(MEDICATION_DEFAULTS)
    values.update(fields)
    values["is_active"] = True
    values["created_at"] = utcnow()
    values["id"] = _new_id()
    return Medication(**values)


def _dose(fields):
    values = dict(fields)
    values["status"] = values.get("status") or "pending"
    values.setdefault("taken_time", None)
    values["id"] = _new_id()
    return MedicationDose(**values)


def _symptom(fields):
    values = dict(fields)
    values["severity"] = clamp_severity(values["severity"])
    values["timestamp"] = utcnow()
    values["id"] = _new_id()
    return Symptom(**values)


def _settings(fields):
    values = dict(SETTINGS_DEFAULTS)
    values.update(fields)
    values["id"] = _new_id()
    return UserSettings(**values)


def _newest_first(symptoms):
    return sorted(symptoms, key=lambda s: s.timestamp, reverse=True)


class Storage:
    """Contract shared by both backends."""

    name = "base"

    # Medications
    def create_medication(self, fields):
        raise NotImplementedError

    def get_medication(self, medication_id):
        raise NotImplementedError

    def list_medications(self):
        raise NotImplementedError

    def update_medication(self, medication_id, fields):
        raise NotImplementedError

    def delete_medication(self, medication_id):
        raise NotImplementedError

    # Doses
    def create_dose(self, fields):
        raise NotImplementedError

    def get_dose(self, dose_id):
        raise NotImplementedError

    def list_doses(self, date=None):
        raise NotImplementedError

    def list_doses_by_medication(self, medication_id):
        raise NotImplementedError

    def update_dose(self, dose_id, fields):
        raise NotImplementedError

    # Symptoms
    def create_symptom(self, fields):
        raise NotImplementedError

    def list_symptoms(self, date=None):
        raise NotImplementedError

    def recent_symptoms(self, limit=5):
        raise NotImplementedError

    # Settings
    def get_settings(self):
        raise NotImplementedError

    def upsert_settings(self, fields):
        raise NotImplementedError

    def ping(self):
        return True


class MemoryStorage(Storage):
    name = "memory"

    def __init__(self):
        self._medications = {}
        self._doses = {}
        self._symptoms = {}
        self._settings = None

    def create_medication(self, fields):
        medication = _medication(fields)
        self._medications[medication.id] = medication
        return medication

    def get_medication(self, medication_id):
        return self._medications.get(medication_id)

    def list_medications(self):
        return [m for m in self._medications.values() if m.is_active]

    def update_medication(self, medication_id, fields):
        existing = self._medications.get(medication_id)
        if existing is None:
            return None
        return _merge(existing, fields)

    def delete_medication(self, medication_id):
        existing = self._medications.get(medication_id)
        if existing is None:
            return False
        existing.is_active = False
        return True

    def create_dose(self, fields):
        dose = _dose(fields)
        self._doses[dose.id] = dose
        return dose

    def get_dose(self, dose_id):
        return self._doses.get(dose_id)

    def list_doses(self, date=None):
        doses = self._doses.values()
        if date:
            doses = [d for d in doses if d.date == date]
        return sorted(doses, key=lambda d: d.scheduled_time)

    def list_doses_by_medication(self, medication_id):
        doses = [d for d in self._doses.values() if d.medication_id == medication_id]
        return sorted(doses, key=lambda d: d.scheduled_time)

    def update_dose(self, dose_id, fields):
        existing = self._doses.get(dose_id)
        if existing is None:
            return None
        return _merge(existing, fields)

    def create_symptom(self, fields):
        symptom = _symptom(fields)
        self._symptoms[symptom.id] = symptom
        return symptom

    def list_symptoms(self, date=None):
        symptoms = self._symptoms.values()
        if date:
            symptoms = [s for s in symptoms if s.date == date]
        return _newest_first(symptoms)

    def recent_symptoms(self, limit=5):
        return _newest_first(self._symptoms.values())[:limit]

    def get_settings(self):
        return self._settings

    def upsert_settings(self, fields):
        if self._settings is None:
            self._settings = _settings(fields)
        else:
            _merge(self._settings, fields)
        return self._settings


class DatabaseStorage(Storage):
    name = "database"

    def _commit(self, record=None):
        try:
            if record is not None:
                db.session.add(record)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return record

    def create_medication(self, fields):
        return self._commit(_medication(fields))

    def get_medication(self, medication_id):
        return db.session.get(Medication, medication_id)

    def list_medications(self):
        return (
            Medication.query
            .filter_by(is_active=True)
            .order_by(Medication.created_at, Medication.id)
            .all()
        )

    def update_medication(self, medication_id, fields):
        existing = self.get_medication(medication_id)
        if existing is None:
            return None
        return self._commit(_merge(existing, fields))

    def delete_medication(self, medication_id):
        existing = self.get_medication(medication_id)
        if existing is None:
            return False
        existing.is_active = False
        self._commit(existing)
        return True

    def create_dose(self, fields):
        return self._commit(_dose(fields))

    def get_dose(self, dose_id):
        return db.session.get(MedicationDose, dose_id)

    def list_doses(self, date=None):
        query = MedicationDose.query
        if date:
            query = query.filter(MedicationDose.date == date)
        return query.order_by(MedicationDose.scheduled_time).all()

    def list_doses_by_medication(self, medication_id):
        return (
            MedicationDose.query
            .filter_by(medication_id=medication_id)
            .order_by(MedicationDose.scheduled_time)
            .all()
        )

    def update_dose(self, dose_id, fields):
        existing = self.get_dose(dose_id)
        if existing is None:
            return None
        return self._commit(_merge(existing, fields))

    def create_symptom(self, fields):
        return self._commit(_symptom(fields))

    def list_symptoms(self, date=None):
        query = Symptom.query
        if date:
            query = query.filter(Symptom.date == date)
        return query.order_by(Symptom.timestamp.desc()).all()

    def recent_symptoms(self, limit=5):
        return Symptom.query.order_by(Symptom.timestamp.desc()).limit(limit).all()

    def get_settings(self):
        return UserSettings.query.first()

    def upsert_settings(self, fields):
        settings = self.get_settings()
        if settings is None:
            settings = _settings(fields)
        else:
            _merge(settings, fields)
        return self._commit(settings)

    def ping(self):
        db.session.execute(text("SELECT 1"))
        return True


BACKENDS = {
    "memory": MemoryStorage,
    "database": DatabaseStorage,
}


def build_storage(backend):
    try:
        return BACKENDS[backend]()
    except KeyError:
        raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}; expected one of {sorted(BACKENDS)}")


def get_storage() -> Storage:
    return current_app.extensions[EXTENSION_KEY]
