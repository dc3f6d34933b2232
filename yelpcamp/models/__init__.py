"""
Models Package

Exports all models for easy importing.
"""

from yelpcamp.models.user import User
from yelpcamp.models.campground import Campground
from yelpcamp.models.comment import Comment

__all__ = ['User', 'Campground', 'Comment']
