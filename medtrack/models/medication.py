import uuid
from medtrack.extensions import db
from medtrack.utils.dates import utcnow


class Medication(db.Model):
    __tablename__ = "medications"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(120), nullable=False)
    dosage = db.Column(db.String(60), nullable=False)      # e.g., "10 mg"
    frequency = db.Column(db.String(60), nullable=False)   # e.g., "twice daily"
    times = db.Column(db.JSON, nullable=False, default=list)  # ["08:00", "20:00"]

    requires_food = db.Column(db.Boolean, nullable=False, default=False)
    empty_stomach = db.Column(db.Boolean, nullable=False, default=False)
    food_reminder_minutes = db.Column(db.Integer, nullable=False, default=30)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "times": list(self.times or []),
            "requiresFood": self.requires_food,
            "emptyStomach": self.empty_stomach,
            "foodReminderMinutes": self.food_reminder_minutes,
            "isActive": self.is_active,
        }
