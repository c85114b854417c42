# medtrack/services/summary.py
from collections import defaultdict

from medtrack.models import DOSE_STATUSES


def _average(values):
    if not values:
        return None
    return round(sum(values) / len(values), 1)


def dose_adherence(doses, day):
    counts = {status: 0 for status in DOSE_STATUSES}
    for dose in doses:
        counts[dose.status] = counts.get(dose.status, 0) + 1

    total = len(doses)
    rate = None
    if total:
        rate = round((counts["taken"] + counts["late"]) / total * 100, 1)

    return {"date": day, "total": total, **counts, "adherenceRate": rate}


def symptom_severity(symptoms, start, end):
    """Average severity over [start, end]; dates compare as YYYY-MM-DD strings."""
    in_range = [s for s in symptoms if start <= s.date <= end]

    by_day = defaultdict(list)
    for symptom in in_range:
        by_day[symptom.date].append(symptom.severity)

    return {
        "start": start,
        "end": end,
        "count": len(in_range),
        "averageSeverity": _average([s.severity for s in in_range]),
        "dailyAverages": {day: _average(values) for day, values in sorted(by_day.items())},
    }
