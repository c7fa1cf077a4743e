"""
Configuration and persistence for the deadline tracker.
"""
