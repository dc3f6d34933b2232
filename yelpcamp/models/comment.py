"""
Comment Model
"""

from datetime import datetime

from yelpcamp.extensions import db


class Comment(db.Model):
    """Free-text comment attached to exactly one campground"""
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(80))
    campground_id = db.Column(db.Integer, db.ForeignKey('campgrounds.id'),
                              nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Comment Campground:{self.campground_id} by {self.author}>'
