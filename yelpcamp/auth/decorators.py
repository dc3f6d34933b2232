"""
Authorization Gate
"""

from functools import wraps
from flask import g, request, redirect, url_for


def identity_required(f):
    """Decorator to ensure the request carries a session identity.

    Anonymous requests are redirected to the login form with the
    original path kept in ``next``; the wrapped view never runs.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        ctx = g.get('ctx')
        if ctx is None or not ctx.is_authenticated:
            return redirect(url_for('auth.login_form', next=request.path))
        return f(*args, **kwargs)
    return wrapper
