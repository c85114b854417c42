# medtrack/services/schedule.py
from flask import current_app

from medtrack.utils.dates import at_time_of_day, time_of_day


def generate_schedule(storage, target_date):
    """
    Materialize pending doses for every active medication on ``target_date``.

    A dose is only created for a (medication, HH:MM) slot that has no dose on
    that date yet, so running this twice for the same date creates nothing the
    second time. Creation order is medication order, then time order.

    The check-then-create sequence is not transactional: two concurrent calls
    for the same date can both miss a slot and insert it twice.
    """
    existing = {
        (dose.medication_id, time_of_day(dose.scheduled_time))
        for dose in storage.list_doses(date=target_date)
    }

    created = []
    for medication in storage.list_medications():
        for hhmm in medication.times or []:
            slot = (medication.id, hhmm)
            if slot in existing:
                continue
            dose = storage.create_dose({
                "medication_id": medication.id,
                "scheduled_time": at_time_of_day(target_date, hhmm),
                "date": target_date,
                "status": "pending",
            })
            existing.add(slot)
            created.append(dose)

    current_app.logger.info("Generated %d dose(s) for %s", len(created), target_date)
    return created
