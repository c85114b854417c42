# medtrack/models/__init__.py
from .medication import Medication
from .medication_dose import MedicationDose, DOSE_STATUSES
from .symptom import Symptom
from .user_settings import UserSettings
