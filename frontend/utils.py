# frontend/utils.py

import io
from datetime import date

import pandas as pd
import requests
from flask import current_app

CSV_COLUMNS = ['Email', 'Name', 'Organization', 'Slot Name', 'Slot Date', 'Slot Time', 'Topic', 'Instructor']


def api_request(endpoint, method='GET', json=None, params=None):
    """
    Calls the Event Hub API. Returns the response, or None when the API
    could not be reached.
    """
    api_base_url = current_app.config.get('API_BASE_URL', 'http://localhost:8000')
    url = f"{api_base_url}/api/v1{endpoint}"

    try:
        if method == 'GET':
            response = requests.get(url, params=params, timeout=10)
        elif method == 'POST':
            response = requests.post(url, json=json, timeout=10)
        elif method == 'PUT':
            response = requests.put(url, json=json, timeout=10)
        elif method == 'DELETE':
            response = requests.delete(url, timeout=10)
        else:
            return None

        current_app.logger.info(f"API Request: {method} {url} - Status: {response.status_code}")
        return response

    except requests.exceptions.RequestException as e:
        current_app.logger.error(f"Request error {method} {url}: {e}")
        return None


def api_error(response, default='unknown error'):
    """Extracts the API's error detail from a failed response."""
    if response is None:
        return 'API unavailable'
    try:
        detail = response.json().get('detail')
    except ValueError:
        detail = None
    return detail if isinstance(detail, str) else f"{default} ({response.status_code})"


def registrations_to_csv(registrations):
    """Builds the registrations CSV export from the API's registration list."""
    rows = []
    for reg in registrations:
        slot = reg.get('slot') or {}
        topic = reg.get('topic') or {}
        rows.append([
            reg.get('email', ''),
            reg.get('name') or '',
            reg.get('organization') or '',
            slot.get('name', ''),
            slot.get('date', ''),
            slot.get('time', ''),
            topic.get('title', ''),
            topic.get('instructor', ''),
        ])

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    output = io.StringIO()
    df.to_csv(output, index=False)
    return output.getvalue()


def export_filename(today=None):
    today = today or date.today()
    return f"workshop-registrations-{today.isoformat()}.csv"
