import uuid
from medtrack.extensions import db
from medtrack.utils.dates import isoformat, utcnow


class Symptom(db.Model):
    __tablename__ = "symptoms"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    description = db.Column(db.Text, nullable=False)
    severity = db.Column(db.Integer, nullable=False)  # 1-5
    timestamp = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD, may differ from timestamp

    def to_dict(self):
        return {
            "id": self.id,
            "description": self.description,
            "severity": self.severity,
            "timestamp": isoformat(self.timestamp),
            "date": self.date,
        }
