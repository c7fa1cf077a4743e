"""
Background clients that run alongside the web app.
"""
