"""
Reminder Routes

Create and list the authenticated user's reminders.
"""

from flask import Blueprint, current_app, g, jsonify, request

from utils.dates import today_str
from webapp.services import reminder_store
from webapp.services.notification_presenter import daily_nudge, upcoming
from webapp.services.session_issuer import require_auth

reminders_bp = Blueprint('reminders', __name__, url_prefix='/api/reminders')


@reminders_bp.route('', methods=['POST'])
@require_auth
def create_reminder():
    """Create a reminder owned by the caller."""
    data = request.get_json(silent=True) or {}
    reminder = reminder_store.create(
        g.claims['id'],
        data.get('title'),
        data.get('date'),
        data.get('time'),
    )
    return jsonify({'message': 'Reminder set', 'reminder': reminder})


@reminders_bp.route('', methods=['GET'])
@require_auth
def list_reminders():
    """List the caller's reminders ordered by date and time."""
    return jsonify({'reminders': reminder_store.list_for(g.claims['id'])})


@reminders_bp.route('/nudge', methods=['GET'])
@require_auth
def nudge():
    """
    What the client should show right now.

    Same decision the poller client makes locally, returned as data.
    """
    reminders = reminder_store.list_for(g.claims['id'])
    today = today_str(current_app.config['TRACKER_TIMEZONE'])
    return jsonify({
        'today': today,
        'upcomingCount': len(upcoming(reminders, today)),
        'notification': daily_nudge(reminders, today),
    })
