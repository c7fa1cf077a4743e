"""
Flask web application for the deadline tracker.
"""
