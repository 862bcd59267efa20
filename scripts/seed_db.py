#!/usr/bin/env python3
"""Load sample weather records into the database. Idempotent.

Usage: python scripts/seed_db.py [records.json]

The optional JSON file holds a list of objects with the seven record
fields; without it the built-in sample cities are loaded.
"""

import json
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from weather_api import create_app
from weather_api.models.weather import MUTABLE_FIELDS
from weather_api.services.weather_store import SAMPLE_DATA
from weather_api.validation import validate_weather_payload


def load_rows(filepath):
    """Read records from JSON, validate them, return tuples in field order."""
    with open(filepath) as f:
        records = json.load(f)
    return [
        tuple(validate_weather_payload(r, enforce_ranges=True)[k] for k in MUTABLE_FIELDS)
        for r in records
    ]


if __name__ == '__main__':
    app = create_app()
    rows = load_rows(sys.argv[1]) if len(sys.argv) > 1 else SAMPLE_DATA

    with app.app_context():
        print("Seeding database...")
        added = app.extensions['weather_store'].seed(rows)
        print(f"Records: {added} added, {len(rows) - added} skipped (already exist)")
        print("Done.")
