"""
Campground Model
"""

from datetime import datetime

from yelpcamp.extensions import db


class Campground(db.Model):
    """A listable campground with its ordered comments"""
    __tablename__ = 'campgrounds'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    image = db.Column(db.String(500), nullable=False)
    description = db.Column(db.Text, default='')
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # One-to-many: comments in insertion order
    comments = db.relationship('Comment', backref='campground', lazy=True,
                               order_by='Comment.id',
                               cascade='all, delete-orphan')
    author = db.relationship('User', lazy=True)

    @property
    def comment_ids(self):
        """Ordered identifiers of the comments owned by this campground."""
        return [comment.id for comment in self.comments]

    def __repr__(self):
        return f'<Campground {self.name}>'
