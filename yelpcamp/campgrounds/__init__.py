"""
Campgrounds Blueprint

Landing page, listing, creation and detail views.
"""

from flask import Blueprint

campgrounds_bp = Blueprint('campgrounds', __name__)

from yelpcamp.campgrounds import routes  # noqa: E402, F401
