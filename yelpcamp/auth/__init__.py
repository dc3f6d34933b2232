"""
Auth Blueprint

Registration, login and logout backed by Flask-Login sessions.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from yelpcamp.auth import routes  # noqa: E402, F401
