"""
Flask Extensions

The session identity is managed by Flask-Login; the database by
Flask-SQLAlchemy.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Tables for users, campgrounds and comments
db = SQLAlchemy()

# Login manager restoring the session identity on every request
login_manager = LoginManager()
