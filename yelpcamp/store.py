"""
Campground Store

Persistence operations for users, campgrounds and comments. Every
operation returns a StoreResult instead of raising, so route handlers
can answer each failure kind with its own response.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from yelpcamp.models import User, Campground, Comment

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    NOT_FOUND = 'not_found'
    DUPLICATE = 'duplicate'
    INVALID = 'invalid'
    BAD_CREDENTIALS = 'bad_credentials'
    STORE_ERROR = 'store_error'


class StoreError(Exception):
    """Raised where a failed StoreResult cannot be handled by the caller."""

    def __init__(self, result):
        super().__init__(result.message or result.error.value)
        self.result = result


@dataclass
class StoreResult:
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ''

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, error, message=''):
        return cls(error=error, message=message)

    def unwrap(self):
        """Return the value or raise StoreError."""
        if not self.ok:
            raise StoreError(self)
        return self.value


def _blank(value):
    return value is None or not str(value).strip()


class CampgroundStore:
    """Store backed by a Flask-SQLAlchemy database handle."""

    def __init__(self, db):
        self.db = db

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def register_user(self, username, password, method='pbkdf2:sha256'):
        """Create a user with a salted password hash."""
        username = (username or '').strip()
        if _blank(username) or _blank(password):
            return StoreResult.failure(ErrorKind.INVALID,
                                       'Username and password are required.')

        try:
            if User.query.filter_by(username=username).first():
                return StoreResult.failure(ErrorKind.DUPLICATE,
                                           f'A user named "{username}" is already registered.')
            user = User(username=username)
            user.set_password(password, method=method)
            self.db.session.add(user)
            self.db.session.commit()
        except IntegrityError:
            self.db.session.rollback()
            return StoreResult.failure(ErrorKind.DUPLICATE,
                                       f'A user named "{username}" is already registered.')
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception("Could not register user %s", username)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        logger.info("Registered user %s", username)
        return StoreResult.success(user)

    def authenticate(self, username, password):
        """Verify a plaintext credential against the stored hash."""
        username = (username or '').strip()
        if _blank(username) or _blank(password):
            return StoreResult.failure(ErrorKind.BAD_CREDENTIALS,
                                       'Invalid username or password.')
        try:
            user = User.query.filter_by(username=username).first()
        except SQLAlchemyError as e:
            logger.exception("User lookup failed for %s", username)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        if user is None or not user.check_password(password):
            return StoreResult.failure(ErrorKind.BAD_CREDENTIALS,
                                       'Invalid username or password.')
        return StoreResult.success(user)

    def get_user(self, user_id):
        try:
            user = self.db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return StoreResult.failure(ErrorKind.NOT_FOUND, f'Invalid user id {user_id!r}')
        except SQLAlchemyError as e:
            logger.exception("User lookup failed for id %s", user_id)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        if user is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND, f'User {user_id} not found')
        return StoreResult.success(user)

    # ------------------------------------------------------------------
    # Campgrounds
    # ------------------------------------------------------------------

    def list_campgrounds(self):
        try:
            return StoreResult.success(Campground.query.order_by(Campground.id).all())
        except SQLAlchemyError as e:
            logger.exception("Could not list campgrounds")
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

    def get_campground(self, campground_id):
        try:
            campground = self.db.session.get(Campground, campground_id)
        except SQLAlchemyError as e:
            logger.exception("Campground lookup failed for id %s", campground_id)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        if campground is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND,
                                       f'Campground {campground_id} not found')
        return StoreResult.success(campground)

    def get_campground_with_comments(self, campground_id):
        """Fetch a campground and resolve its comment references."""
        try:
            campground = Campground.query \
                .options(selectinload(Campground.comments)) \
                .filter_by(id=campground_id) \
                .first()
        except SQLAlchemyError as e:
            logger.exception("Campground lookup failed for id %s", campground_id)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        if campground is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND,
                                       f'Campground {campground_id} not found')
        return StoreResult.success(campground)

    def create_campground(self, name, image, description='', author=None):
        name = (name or '').strip()
        image = (image or '').strip()
        missing = [field for field, value in (('name', name), ('image', image)) if _blank(value)]
        if missing:
            return StoreResult.failure(ErrorKind.INVALID,
                                       'Missing required field(s): ' + ', '.join(missing))

        campground = Campground(name=name, image=image,
                                description=(description or '').strip(),
                                author=author)
        try:
            self.db.session.add(campground)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception("Could not create campground %s", name)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        logger.info("Created campground %s (id=%s)", campground.name, campground.id)
        return StoreResult.success(campground)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def add_comment(self, campground_id, text, author=None):
        """Insert a comment and attach it to its campground in one transaction."""
        result = self.get_campground(campground_id)
        if not result.ok:
            return result
        if _blank(text):
            return StoreResult.failure(ErrorKind.INVALID, 'Comment text is required.')
        campground = result.value

        comment = Comment(text=text.strip(), author=author)
        try:
            campground.comments.append(comment)
            self.db.session.add(comment)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception("Could not add comment to campground %s", campground_id)
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))

        logger.info("Added comment %s to campground %s", comment.id, campground_id)
        return StoreResult.success(comment)

    def count_campgrounds(self):
        try:
            return StoreResult.success(Campground.query.count())
        except SQLAlchemyError as e:
            logger.exception("Could not count campgrounds")
            return StoreResult.failure(ErrorKind.STORE_ERROR, str(e))
