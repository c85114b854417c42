import uuid
from medtrack.extensions import db
from medtrack.utils.dates import isoformat

DOSE_STATUSES = ("pending", "taken", "late", "missed")


class MedicationDose(db.Model):
    __tablename__ = "medication_doses"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    medication_id = db.Column(db.String(36), db.ForeignKey("medications.id"), nullable=False, index=True)

    scheduled_time = db.Column(db.DateTime, nullable=False)
    taken_time = db.Column(db.DateTime, nullable=True)
    status = db.Column(db.String(20), nullable=False, default="pending")  # pending | taken | late | missed
    date = db.Column(db.String(10), nullable=False, index=True)           # YYYY-MM-DD

    medication = db.relationship("Medication", backref=db.backref("doses", order_by="MedicationDose.scheduled_time"))

    def to_dict(self):
        return {
            "id": self.id,
            "medicationId": self.medication_id,
            "scheduledTime": isoformat(self.scheduled_time),
            "takenTime": isoformat(self.taken_time),
            "status": self.status,
            "date": self.date,
        }
