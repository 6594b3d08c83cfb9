from flask import Flask, render_template, request, redirect, url_for, flash, session, Response
from functools import wraps
from datetime import datetime
import logging

from frontend.config import Config
from frontend.utils import api_request, api_error, registrations_to_csv, export_filename

app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get('is_admin_authenticated'):
            return redirect(url_for('admin_login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


@app.template_filter('format_datetime')
def format_datetime_filter(s):
    if not s:
        return ""
    try:
        dt_obj = datetime.fromisoformat(str(s).replace('Z', '+00:00'))
        return dt_obj.strftime('%Y-%m-%d %H:%M')
    except (ValueError, TypeError):
        return s


# === PUBLIC PAGES ===

@app.route('/')
def index():
    """Active events with links to their registration pages."""
    response = api_request('/events', params={'active': 'true'})
    events = response.json() if response is not None and response.status_code == 200 else []
    if response is None:
        flash("The registration service is unavailable. Please try again later.", "error")
    return render_template('index.html', events=events)


@app.route('/event/<uuid>')
def event_page(uuid):
    response = api_request(f'/events/{uuid}')
    if response is None or response.status_code != 200:
        flash("Event not found.", "error")
        return redirect(url_for('index'))
    event = response.json()

    email = request.args.get('email', '').strip()
    existing = []
    if email:
        reg_response = api_request('/registrations', params={'email': email, 'event_id': event['id']})
        if reg_response is not None and reg_response.status_code == 200:
            existing = reg_response.json()

    # slot id -> topic id of the attendee's current choices
    selected = {reg['slot_id']: reg['topic_id'] for reg in existing}

    return render_template('event.html', event=event, email=email, existing=existing, selected=selected)


@app.route('/event/<uuid>/register', methods=['POST'])
def event_register(uuid):
    """
    Saves the attendee's choices: existing registrations for the event are
    deleted, then one registration per selected slot is created.
    """
    email = request.form.get('email', '').strip()
    name = request.form.get('name', '').strip() or None
    organization = request.form.get('organization', '').strip() or None

    if not email:
        flash("Please enter your email.", "error")
        return redirect(url_for('event_page', uuid=uuid))

    selections = {}
    for key, value in request.form.items():
        if key.startswith('topic_') and value:
            selections[int(key[len('topic_'):])] = int(value)

    if not selections:
        flash("Please select at least one workshop.", "error")
        return redirect(url_for('event_page', uuid=uuid, email=email))

    event_response = api_request(f'/events/{uuid}')
    if event_response is None or event_response.status_code != 200:
        flash("Event not found.", "error")
        return redirect(url_for('index'))
    event = event_response.json()

    # only slots of this event may be registered or replaced
    if not set(selections) <= {slot['id'] for slot in event.get('slots', [])}:
        flash("Invalid workshop selection.", "error")
        return redirect(url_for('event_page', uuid=uuid, email=email))

    existing = []
    reg_response = api_request('/registrations', params={'email': email, 'event_id': event['id']})
    if reg_response is not None and reg_response.status_code == 200:
        existing = reg_response.json()

    for reg in existing:
        delete_response = api_request(f"/registrations/{reg['id']}", method='DELETE')
        if delete_response is None or delete_response.status_code != 204:
            app.logger.error(f"Could not delete registration {reg['id']} for {email}")

    created, errors = [], []
    for slot_id, topic_id in selections.items():
        data = {
            'email': email,
            'name': name,
            'organization': organization,
            'slot_id': slot_id,
            'topic_id': topic_id,
        }
        response = api_request('/registrations', method='POST', json=data)
        if response is not None and response.status_code == 201:
            created.append(response.json())
        else:
            errors.append(api_error(response, 'Registration failed'))

    if errors:
        flash(f"Some registrations failed: {', '.join(errors)}", "error")
        if not created:
            return redirect(url_for('event_page', uuid=uuid, email=email))

    summary = [{
        'event': reg['slot']['event']['name'],
        'slot': reg['slot']['name'] or reg['slot']['time'],
        'topic': reg['topic']['title'],
        'date': reg['slot']['date'],
        'time': reg['slot']['time'],
    } for reg in created]

    mail_response = api_request('/registrations/summary', method='POST', json={
        'email': email,
        'name': name,
        'registrations': summary,
        'is_update': len(existing) > 0,
    })
    if mail_response is None or mail_response.status_code != 202:
        app.logger.error(f"Summary email for {email} was not queued")

    return render_template('confirmation.html', email=email, registrations=created, uuid=uuid)


@app.route('/occupancy')
def occupancy():
    event_id = request.args.get('event_id', type=int)
    params = {'event_id': event_id} if event_id else None
    response = api_request('/workshop-data', params=params)
    slots = response.json() if response is not None and response.status_code == 200 else []
    return render_template('occupancy.html', slots=slots)


# === ADMIN ===

@app.route('/admin/login', methods=['GET', 'POST'])
def admin_login():
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        if email == app.config['ADMIN_EMAIL'] and password == app.config['ADMIN_PASSWORD']:
            session['is_admin_authenticated'] = True
            return redirect(request.args.get('next') or url_for('admin_dashboard'))
        flash("Invalid credentials.", "error")

    return render_template('admin/login.html')


@app.route('/admin/logout')
def admin_logout():
    session.pop('is_admin_authenticated', None)
    flash("You have been logged out.", "success")
    return redirect(url_for('admin_login'))


@app.route('/admin')
@admin_required
def admin_dashboard():
    slots_resp = api_request('/slots')
    topics_resp = api_request('/topics')
    registrations_resp = api_request('/registrations')
    events_resp = api_request('/events')

    def _json(response):
        return response.json() if response is not None and response.status_code == 200 else []

    slots = _json(slots_resp)
    topics = _json(topics_resp)
    registrations = _json(registrations_resp)
    events = _json(events_resp)

    stats = {
        'total_events': len(events),
        'total_slots': len(slots),
        'total_topics': len(topics),
        'total_registrations': len(registrations),
        'unique_emails': len({reg['email'] for reg in registrations}),
        'full_topics': sum(1 for topic in topics if topic.get('is_full')),
    }

    return render_template('admin/dashboard.html', slots=slots, topics=topics,
                           registrations=registrations, events=events, stats=stats)


@app.route('/admin/slots/save', methods=['POST'])
@admin_required
def admin_slot_save():
    data = {
        'name': request.form.get('name'),
        'date': request.form.get('date'),
        'time': request.form.get('time'),
    }
    slot_id = request.form.get('id')
    if slot_id:
        response = api_request(f'/slots/{slot_id}', method='PUT', json=data)
        msg = "Slot updated successfully!"
    else:
        data['event_id'] = request.form.get('event_id', type=int)
        response = api_request('/slots', method='POST', json=data)
        msg = "Slot created successfully!"

    if response is not None and response.status_code in [200, 201]:
        flash(msg, "success")
    else:
        flash(f"Error saving slot: {api_error(response)}", "error")
    return redirect(url_for('admin_dashboard'))


@app.route('/admin/slots/<int:id>/delete', methods=['POST'])
@admin_required
def admin_slot_delete(id):
    response = api_request(f'/slots/{id}', method='DELETE')
    if response is not None and response.status_code == 204:
        flash("Slot deleted successfully!", "success")
    else:
        flash("Error deleting slot.", "error")
    return redirect(url_for('admin_dashboard'))


@app.route('/admin/topics/save', methods=['POST'])
@admin_required
def admin_topic_save():
    data = {
        'title': request.form.get('title'),
        'description': request.form.get('description'),
        'instructor': request.form.get('instructor'),
        'max_participants': request.form.get('max_participants', type=int),
        'slot_id': request.form.get('slot_id', type=int),
    }
    topic_id = request.form.get('id')
    if topic_id:
        response = api_request(f'/topics/{topic_id}', method='PUT', json=data)
        msg = "Topic updated successfully!"
    else:
        response = api_request('/topics', method='POST', json=data)
        msg = "Topic created successfully!"

    if response is not None and response.status_code in [200, 201]:
        flash(msg, "success")
    else:
        flash(f"Error saving topic: {api_error(response)}", "error")
    return redirect(url_for('admin_dashboard'))


@app.route('/admin/topics/<int:id>/delete', methods=['POST'])
@admin_required
def admin_topic_delete(id):
    response = api_request(f'/topics/{id}', method='DELETE')
    if response is not None and response.status_code == 204:
        flash("Topic deleted successfully!", "success")
    else:
        flash("Error deleting topic.", "error")
    return redirect(url_for('admin_dashboard'))


@app.route('/admin/registrations/<int:id>/delete', methods=['POST'])
@admin_required
def admin_registration_delete(id):
    response = api_request(f'/registrations/{id}', method='DELETE')
    if response is not None and response.status_code == 204:
        flash("Registration deleted successfully!", "success")
    else:
        flash("Error deleting registration.", "error")
    return redirect(request.form.get('next') or url_for('admin_dashboard'))


@app.route('/admin/export')
@admin_required
def admin_export():
    event_id = request.args.get('event_id', type=int)
    params = {'event_id': event_id} if event_id else None
    response = api_request('/registrations', params=params)
    if response is None or response.status_code != 200:
        flash(f"Error fetching registrations for export: {api_error(response)}", "error")
        return redirect(url_for('admin_dashboard'))

    try:
        csv_content = registrations_to_csv(response.json())
    except Exception as e:
        app.logger.error(f"Error generating CSV: {e}", exc_info=True)
        flash("Failed to export CSV file.", "error")
        return redirect(url_for('admin_dashboard'))

    return Response(
        csv_content,
        mimetype='text/csv',
        headers={"Content-Disposition": f"attachment;filename={export_filename()}"}
    )


@app.route('/admin/events')
@admin_required
def admin_events():
    response = api_request('/events')
    events = response.json() if response is not None and response.status_code == 200 else []
    return render_template('admin/events.html', events=events)


@app.route('/admin/events/<int:id>')
@admin_required
def admin_event_view(id):
    event_resp = api_request(f'/events/{id}')
    if event_resp is None or event_resp.status_code != 200:
        flash("Event not found.", "error")
        return redirect(url_for('admin_events'))

    registrations_resp = api_request('/registrations', params={'event_id': id})
    registrations = registrations_resp.json() if registrations_resp is not None and registrations_resp.status_code == 200 else []
    return render_template('admin/event_view.html', event=event_resp.json(), registrations=registrations)


@app.route('/admin/events/save', methods=['POST'])
@admin_required
def admin_event_save():
    data = {
        'name': request.form.get('name'),
        'description': request.form.get('description') or None,
    }
    event_id = request.form.get('id')
    if event_id:
        data['is_active'] = request.form.get('is_active') == 'on'
        response = api_request(f'/events/{event_id}', method='PUT', json=data)
        msg = "Event updated successfully!"
    else:
        response = api_request('/events', method='POST', json=data)
        msg = "Event created successfully!"

    if response is not None and response.status_code in [200, 201]:
        flash(msg, "success")
    else:
        flash(f"Error saving event: {api_error(response)}", "error")
    return redirect(url_for('admin_events'))


@app.route('/admin/events/<int:id>/toggle', methods=['POST'])
@admin_required
def admin_event_toggle(id):
    is_active = request.form.get('is_active') == 'true'
    response = api_request(f'/events/{id}', method='PUT', json={'is_active': not is_active})
    if response is not None and response.status_code == 200:
        flash("Event deactivated." if is_active else "Event activated.", "success")
    else:
        flash("Error updating event.", "error")
    return redirect(url_for('admin_events'))


@app.route('/admin/events/<int:id>/delete', methods=['POST'])
@admin_required
def admin_event_delete(id):
    response = api_request(f'/events/{id}', method='DELETE')
    if response is not None and response.status_code == 204:
        flash("Event deleted successfully!", "success")
    else:
        flash("Error deleting event.", "error")
    return redirect(url_for('admin_events'))


if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=5700)
