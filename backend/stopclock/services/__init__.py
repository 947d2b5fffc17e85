"""Kiosk domain services: game rules, attempt tracking, event logging, analytics.

Everything here is importable without an HTTP request; blueprints and
socket handlers only translate between transport and these services.
"""
