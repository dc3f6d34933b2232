"""
Auth Routes

User registration, login and logout using Flask-Login.
"""

from urllib.parse import urlsplit

from flask import current_app, render_template, request, redirect, url_for, flash, g
from flask_login import login_user, logout_user
from yelpcamp.auth import auth_bp
from yelpcamp.store import ErrorKind


def _safe_next(target):
    """Only follow relative redirect targets."""
    if not target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not target.startswith('/'):
        return None
    return target


@auth_bp.route('/register', methods=['GET'])
def register_form():
    """Show the registration form"""
    return render_template('register.html')


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create a user, start a session and go to the listing"""
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    result = g.ctx.store.register_user(
        username, password, method=current_app.config['PASSWORD_HASH_METHOD'])

    if result.error is ErrorKind.STORE_ERROR:
        current_app.logger.error("Registration failed: %s", result.message)
        return render_template('errors/500.html'), 500
    if not result.ok:
        flash(result.message, 'danger')
        return render_template('register.html', username=username), 400

    login_user(result.value)
    flash(f'Welcome to YelpCamp, {result.value.username}!', 'success')
    return redirect(url_for('campgrounds.index'))


@auth_bp.route('/login', methods=['GET'])
def login_form():
    """Show the login form"""
    return render_template('login.html', next=request.args.get('next', ''))


@auth_bp.route('/login', methods=['POST'])
def login():
    """Verify the credential and establish the session"""
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    result = g.ctx.store.authenticate(username, password)

    if result.error is ErrorKind.STORE_ERROR:
        current_app.logger.error("Login lookup failed: %s", result.message)
        return render_template('errors/500.html'), 500
    if not result.ok:
        flash(result.message, 'danger')
        next_page = _safe_next(request.form.get('next'))
        return redirect(url_for('auth.login_form', next=next_page))

    login_user(result.value)
    flash(f'Welcome back, {result.value.username}!', 'success')

    next_page = _safe_next(request.form.get('next') or request.args.get('next'))
    return redirect(next_page) if next_page else redirect(url_for('campgrounds.index'))


@auth_bp.route('/logout')
def logout():
    """Clear the session identity; safe to call when logged out"""
    if g.ctx.is_authenticated:
        flash('You have been logged out.', 'info')
    logout_user()
    return redirect(url_for('campgrounds.index'))
