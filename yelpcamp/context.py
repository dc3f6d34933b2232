"""
Request Context

Each request carries an explicit RequestContext on flask.g holding the
restored session identity and the injected store.
"""

from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app, g
from flask_login import current_user


@dataclass
class RequestContext:
    store: Any
    user: Optional[Any] = None

    @property
    def is_authenticated(self):
        return self.user is not None


def get_store(app=None):
    """Return the store injected into the application."""
    app = app or current_app
    return app.extensions['yelpcamp_store']


def build_request_context():
    """before_request hook: restore identity and attach the context."""
    user = current_user._get_current_object() if current_user.is_authenticated else None
    g.ctx = RequestContext(store=get_store(), user=user)


def inject_current_user():
    """Expose the restored identity to every template."""
    ctx = g.get('ctx')
    return dict(current_user=ctx.user if ctx else None)
