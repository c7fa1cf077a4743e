"""
Integration Routes

Demo hooks for Microsoft Teams and Microsoft To Do. Nothing is sent; the
response shows the payload a real Graph call would carry.
"""

from flask import Blueprint, jsonify, request

from utils.dates import format_display_date

integrations_bp = Blueprint('integrations', __name__, url_prefix='/api')


def _reminder_fields():
    data = request.get_json(silent=True) or {}
    return {
        'title': data.get('title') or '',
        'date': data.get('date') or '',
        'time': data.get('time') or None,
        'description': data.get('description') or '',
    }


@integrations_bp.route('/teams', methods=['POST'])
def teams_demo():
    """Show the channel message that would be posted to Teams."""
    fields = _reminder_fields()
    content = (
        "<b>New reminder from DeadlineTracker</b><br/>"
        f"<b>Title:</b> {fields['title']}<br/>"
        f"<b>Due:</b> {format_display_date(fields['date'], fields['time'])}<br/>"
        f"<b>Description:</b> {fields['description'] or '-'}"
    )
    return jsonify({
        'status': 'demo',
        'message': 'Teams credentials not set. This shows what would be posted to Teams.',
        'wouldSendTo': {'teamId': 'YOUR_TEAM_ID_HERE', 'channelId': 'YOUR_CHANNEL_ID_HERE'},
        'messageBody': {'contentType': 'html', 'content': content},
    })


@integrations_bp.route('/todo', methods=['POST'])
def todo_demo():
    """Show the task that would be created in Microsoft To Do."""
    fields = _reminder_fields()
    return jsonify({
        'status': 'demo',
        'message': 'This is where Microsoft To Do Graph API would be called.',
        'wouldSend': {
            'title': fields['title'],
            'body': {
                'contentType': 'text',
                'content': f"Due: {format_display_date(fields['date'], fields['time'])}\n\n{fields['description']}",
            },
        },
    })
