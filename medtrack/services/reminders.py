# medtrack/services/reminders.py
"""
Reminder planning.

Only computes when the next reminders would fire; nothing is queued or
delivered here. Delivery is a best-effort client-side timer, so a reminder
whose client session is closed at fire time never shows.
"""

from datetime import timedelta

from medtrack.utils.dates import isoformat


def _next_occurrence(hhmm, now):
    hours, minutes = (int(p) for p in hhmm.split(":"))
    fire_at = now.replace(hour=hours, minute=minutes, second=0, microsecond=0)
    if fire_at <= now:
        fire_at += timedelta(days=1)
    return fire_at


def plan_reminders(medications, now, notifications_enabled=True):
    """Next medication (and food) reminder per configured time, soonest first."""
    if not notifications_enabled:
        return []

    planned = []
    for medication in medications:
        for hhmm in medication.times or []:
            fire_at = _next_occurrence(hhmm, now)

            lead = medication.food_reminder_minutes or 0
            if medication.requires_food and lead > 0:
                food_at = fire_at - timedelta(minutes=lead)
                if food_at > now:
                    planned.append((food_at, {
                        "type": "food",
                        "medicationId": medication.id,
                        "title": "Eat something before your medication",
                        "body": f"{medication.name} should be taken with food in {lead} minutes",
                        "time": hhmm,
                    }))

            planned.append((fire_at, {
                "type": "medication",
                "medicationId": medication.id,
                "title": f"Time to take {medication.name}",
                "body": f"Take {medication.dosage} at {hhmm}",
                "time": hhmm,
            }))

    planned.sort(key=lambda item: item[0])
    return [dict(reminder, fireAt=isoformat(fire_at)) for fire_at, reminder in planned]
