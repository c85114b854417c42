import uuid
from medtrack.extensions import db


class UserSettings(db.Model):
    __tablename__ = "user_settings"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    emergency_contact_name = db.Column(db.String(120), nullable=True)
    emergency_contact_phone = db.Column(db.String(40), nullable=True)
    doctor_name = db.Column(db.String(120), nullable=True)
    doctor_phone = db.Column(db.String(40), nullable=True)
    notifications_enabled = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            "id": self.id,
            "emergencyContactName": self.emergency_contact_name,
            "emergencyContactPhone": self.emergency_contact_phone,
            "doctorName": self.doctor_name,
            "doctorPhone": self.doctor_phone,
            "notificationsEnabled": self.notifications_enabled,
        }
