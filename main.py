#!/usr/bin/env python3
"""
Deadline Tracker - Main Entry Point

Runs the Flask web application, a one-off nudge sweep, or the nudge
polling client.

Usage:
    python main.py serve --port 5000
    python main.py sweep
    python main.py nudge --email me@example.com --password secret
"""

import argparse
import logging
import sys

from utils.dates import is_day

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def day_argument(value):
    """argparse type for YYYY-MM-DD days."""
    if not is_day(value):
        raise argparse.ArgumentTypeError(f"invalid day '{value}', expected YYYY-MM-DD")
    return value


def serve(args):
    from webapp.app import create_app

    overrides = {'NUDGE_SWEEP_ENABLED': False} if args.no_sweep else None
    app = create_app(overrides)
    print("🚀 Starting Deadline Tracker...")
    print(f"📍 Server running at: http://{args.host}:{args.port}")
    print(f"🔧 Debug mode: {'ON' if args.debug else 'OFF'}")
    # The reloader would start a second sweep scheduler
    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)


def sweep(args):
    from config.database import configure_database, init_database
    from config.settings import load_settings
    from webapp.services.nudge_marker import run_nudge_sweep

    settings = load_settings()
    configure_database(settings['DATABASE_URL'])
    init_database()
    marked = run_nudge_sweep(today=args.today, timezone=settings['TRACKER_TIMEZONE'])
    print(f"✅ Marked {marked} reminders")


def nudge(args):
    import requests
    from config.settings import load_settings
    from services.nudge_client import TrackerClient, NudgePoller, console_capability

    settings = load_settings()
    client = TrackerClient(args.api_url or settings['TRACKER_API_URL'])
    try:
        user = client.login(args.email, args.password)
    except requests.RequestException as e:
        print(f"❌ Login failed: {e}")
        sys.exit(1)

    print(f"👋 Hello again, {user['name']}!")
    poller = NudgePoller(client, console_capability(), timezone=settings['TRACKER_TIMEZONE'])
    if args.once:
        poller.poll()
    else:
        poller.run_forever(settings['NUDGE_POLL_MINUTES'])


def main():
    parser = argparse.ArgumentParser(description="Deadline Tracker")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the web app")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Web app host")
    serve_parser.add_argument("--port", type=int, default=5000, help="Web app port")
    serve_parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    serve_parser.add_argument("--no-sweep", action="store_true", help="Do not schedule the nudge sweep")
    serve_parser.set_defaults(func=serve)

    sweep_parser = subparsers.add_parser("sweep", help="Run one nudge sweep now")
    sweep_parser.add_argument("--today", type=day_argument, help="Day to record (YYYY-MM-DD), default today")
    sweep_parser.set_defaults(func=sweep)

    nudge_parser = subparsers.add_parser("nudge", help="Poll reminders and show notifications")
    nudge_parser.add_argument("--email", required=True)
    nudge_parser.add_argument("--password", required=True)
    nudge_parser.add_argument("--api-url", help="Tracker API base URL")
    nudge_parser.add_argument("--once", action="store_true", help="Poll once and exit")
    nudge_parser.set_defaults(func=nudge)

    args = parser.parse_args()
    if args.command is None:
        args = parser.parse_args(["serve"])
    args.func(args)


if __name__ == "__main__":
    main()
