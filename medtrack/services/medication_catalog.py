# medtrack/services/medication_catalog.py
"""
Reference data for common medications.

Static lookup list used to pre-fill the add-medication form. Independent of
the medications a user registers; nothing here is persisted.
"""

SEARCH_LIMIT = 20
DEFAULT_RESULTS = 10


MEDICATIONS = [
    # Pain Relief
    {
        "name": "Ibuprofen",
        "genericName": "Ibuprofen",
        "brandNames": ["Advil", "Motrin", "Nuprin"],
        "dosages": ["200mg", "400mg", "600mg", "800mg"],
        "commonFrequencies": ["every 6-8 hours", "twice daily", "three times daily"],
        "category": "Pain Relief/Anti-inflammatory",
        "requiresFood": True,
        "emptyStomach": False,
        "commonSideEffects": ["Stomach upset", "Nausea", "Dizziness"],
        "description": "Non-steroidal anti-inflammatory drug (NSAID) for pain and inflammation",
        "shape": "round",
        "color": ["white", "orange", "brown"],
    },
    {
        "name": "Acetaminophen",
        "genericName": "Acetaminophen",
        "brandNames": ["Tylenol", "Panadol"],
        "dosages": ["325mg", "500mg", "650mg"],
        "commonFrequencies": ["every 4-6 hours", "three times daily", "four times daily"],
        "category": "Pain Relief/Fever Reducer",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Rare when used as directed"],
        "description": "Pain reliever and fever reducer",
        "shape": "round",
        "color": ["white", "red"],
    },

    # Blood Pressure
    {
        "name": "Lisinopril",
        "genericName": "Lisinopril",
        "brandNames": ["Prinivil", "Zestril"],
        "dosages": ["2.5mg", "5mg", "10mg", "20mg", "40mg"],
        "commonFrequencies": ["once daily"],
        "category": "Blood Pressure",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Dry cough", "Dizziness", "Fatigue"],
        "description": "ACE inhibitor for high blood pressure and heart conditions",
        "shape": "round",
        "color": ["white", "pink", "yellow"],
    },
    {
        "name": "Amlodipine",
        "genericName": "Amlodipine",
        "brandNames": ["Norvasc"],
        "dosages": ["2.5mg", "5mg", "10mg"],
        "commonFrequencies": ["once daily"],
        "category": "Blood Pressure",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Swelling", "Dizziness", "Flushing"],
        "description": "Calcium channel blocker for high blood pressure",
        "shape": "round",
        "color": ["white", "blue"],
    },

    # Diabetes
    {
        "name": "Metformin",
        "genericName": "Metformin",
        "brandNames": ["Glucophage", "Fortamet"],
        "dosages": ["500mg", "750mg", "850mg", "1000mg"],
        "commonFrequencies": ["twice daily", "three times daily"],
        "category": "Diabetes",
        "requiresFood": True,
        "emptyStomach": False,
        "commonSideEffects": ["Nausea", "Diarrhea", "Stomach upset"],
        "description": "Medication for type 2 diabetes",
        "shape": "oval",
        "color": ["white"],
    },

    # Cholesterol
    {
        "name": "Atorvastatin",
        "genericName": "Atorvastatin",
        "brandNames": ["Lipitor"],
        "dosages": ["10mg", "20mg", "40mg", "80mg"],
        "commonFrequencies": ["once daily"],
        "category": "Cholesterol",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Muscle pain", "Headache", "Nausea"],
        "description": "Statin medication to lower cholesterol",
        "shape": "oval",
        "color": ["white", "blue"],
    },
    {
        "name": "Simvastatin",
        "genericName": "Simvastatin",
        "brandNames": ["Zocor"],
        "dosages": ["5mg", "10mg", "20mg", "40mg", "80mg"],
        "commonFrequencies": ["once daily in evening"],
        "category": "Cholesterol",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Muscle pain", "Headache", "Stomach upset"],
        "description": "Statin medication to lower cholesterol",
        "shape": "round",
        "color": ["tan", "pink", "red"],
    },

    # Heart Conditions
    {
        "name": "Aspirin",
        "genericName": "Aspirin",
        "brandNames": ["Bayer", "Bufferin"],
        "dosages": ["81mg", "325mg"],
        "commonFrequencies": ["once daily"],
        "category": "Heart Health/Pain Relief",
        "requiresFood": True,
        "emptyStomach": False,
        "commonSideEffects": ["Stomach irritation", "Bleeding risk"],
        "description": "Low-dose for heart protection, higher doses for pain relief",
        "shape": "round",
        "color": ["white"],
    },

    # Anxiety/Depression
    {
        "name": "Sertraline",
        "genericName": "Sertraline",
        "brandNames": ["Zoloft"],
        "dosages": ["25mg", "50mg", "100mg"],
        "commonFrequencies": ["once daily"],
        "category": "Antidepressant",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Nausea", "Dizziness", "Sleep changes"],
        "description": "SSRI antidepressant for depression and anxiety",
        "shape": "oval",
        "color": ["blue", "yellow"],
    },
    {
        "name": "Lorazepam",
        "genericName": "Lorazepam",
        "brandNames": ["Ativan"],
        "dosages": ["0.5mg", "1mg", "2mg"],
        "commonFrequencies": ["as needed", "twice daily", "three times daily"],
        "category": "Anxiety",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Drowsiness", "Dizziness", "Confusion"],
        "description": "Benzodiazepine for anxiety and panic disorders",
        "shape": "round",
        "color": ["white"],
    },

    # Thyroid
    {
        "name": "Levothyroxine",
        "genericName": "Levothyroxine",
        "brandNames": ["Synthroid", "Levoxyl"],
        "dosages": ["25mcg", "50mcg", "75mcg", "100mcg", "125mcg", "150mcg"],
        "commonFrequencies": ["once daily in morning"],
        "category": "Thyroid",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Heart palpitations", "Nervousness", "Weight loss"],
        "description": "Synthetic thyroid hormone replacement",
        "shape": "round",
        "color": ["orange", "white", "purple", "yellow", "pink"],
    },

    # Antibiotics
    {
        "name": "Amoxicillin",
        "genericName": "Amoxicillin",
        "brandNames": ["Amoxil"],
        "dosages": ["250mg", "500mg", "875mg"],
        "commonFrequencies": ["twice daily", "three times daily"],
        "category": "Antibiotic",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Diarrhea", "Nausea", "Rash"],
        "description": "Penicillin antibiotic for bacterial infections",
        "shape": "capsule",
        "color": ["pink", "white"],
    },

    # Acid Reflux
    {
        "name": "Omeprazole",
        "genericName": "Omeprazole",
        "brandNames": ["Prilosec"],
        "dosages": ["10mg", "20mg", "40mg"],
        "commonFrequencies": ["once daily before breakfast"],
        "category": "Acid Reflux",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Headache", "Stomach pain", "Diarrhea"],
        "description": "Proton pump inhibitor for acid reflux and ulcers",
        "shape": "capsule",
        "color": ["purple", "pink"],
    },

    # Allergy
    {
        "name": "Cetirizine",
        "genericName": "Cetirizine",
        "brandNames": ["Zyrtec"],
        "dosages": ["5mg", "10mg"],
        "commonFrequencies": ["once daily"],
        "category": "Allergy",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Drowsiness", "Dry mouth", "Fatigue"],
        "description": "Antihistamine for allergies",
        "shape": "round",
        "color": ["white"],
    },
    {
        "name": "Loratadine",
        "genericName": "Loratadine",
        "brandNames": ["Claritin"],
        "dosages": ["10mg"],
        "commonFrequencies": ["once daily"],
        "category": "Allergy",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Headache", "Fatigue", "Dry mouth"],
        "description": "Non-drowsy antihistamine for allergies",
        "shape": "round",
        "color": ["white"],
    },

    # Sleep
    {
        "name": "Zolpidem",
        "genericName": "Zolpidem",
        "brandNames": ["Ambien"],
        "dosages": ["5mg", "10mg"],
        "commonFrequencies": ["once daily at bedtime"],
        "category": "Sleep Aid",
        "requiresFood": False,
        "emptyStomach": True,
        "commonSideEffects": ["Drowsiness", "Dizziness", "Memory problems"],
        "description": "Sleep medication for insomnia",
        "shape": "round",
        "color": ["white", "pink"],
    },
]


class MedicationCatalog:
    """Case-insensitive lookups over a fixed list, in declaration order."""

    def __init__(self, entries=None):
        self.entries = list(MEDICATIONS if entries is None else entries)

    @staticmethod
    def _names(entry):
        names = [entry["name"]]
        if entry.get("genericName"):
            names.append(entry["genericName"])
        names.extend(entry.get("brandNames") or [])
        return [n.lower() for n in names]

    def search(self, query):
        term = (query or "").lower().strip()
        if not term:
            return self.entries[:DEFAULT_RESULTS]

        matches = [
            entry for entry in self.entries
            if any(term in name for name in self._names(entry))
            or term in entry["category"].lower()
        ]
        return matches[:SEARCH_LIMIT]

    def lookup(self, name):
        term = (name or "").lower().strip()
        for entry in self.entries:
            if term in self._names(entry):
                return entry
        return None

    def by_category(self, category):
        term = (category or "").lower()
        return [entry for entry in self.entries if term in entry["category"].lower()]


catalog = MedicationCatalog()
