"""
Comments Blueprint

Comment routes nested under a campground; all require a session identity.
"""

from flask import Blueprint

comments_bp = Blueprint('comments', __name__, url_prefix='/campgrounds/<int:campground_id>/comments')

from yelpcamp.comments import routes  # noqa: E402, F401
