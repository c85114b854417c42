# medtrack/controllers/catalog_controller.py
from flask import request

from medtrack.helpers import api_response
from medtrack.services.medication_catalog import catalog


def search():
    results = catalog.search(request.args.get("q", ""))
    return api_response(True, "Search results", results)


def get_by_name(name):
    entry = catalog.lookup(name)
    if not entry:
        return api_response(False, "Medication not found", status_code=404)
    return api_response(True, "Medication fetched", entry)


def get_by_category(category):
    return api_response(True, "Medications fetched", catalog.by_category(category))
