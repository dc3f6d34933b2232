"""
Campground Routes
"""

from flask import abort, current_app, render_template, request, redirect, url_for, flash, g
from yelpcamp.campgrounds import campgrounds_bp
from yelpcamp.store import ErrorKind


def abort_for(result):
    """Turn a failed store result into the matching HTTP error."""
    if result.error is ErrorKind.NOT_FOUND:
        abort(404)
    current_app.logger.error("Store failure: %s", result.message)
    abort(500)


@campgrounds_bp.route('/')
def landing():
    """Landing page"""
    return render_template('landing.html')


@campgrounds_bp.route('/campgrounds')
def index():
    """List every campground"""
    result = g.ctx.store.list_campgrounds()
    if not result.ok:
        abort_for(result)
    return render_template('campgrounds/index.html', campgrounds=result.value)


@campgrounds_bp.route('/campgrounds', methods=['POST'])
def create():
    """Save a newly submitted campground"""
    name = request.form.get('name', '')
    image = request.form.get('image', '')
    description = request.form.get('description', '')

    result = g.ctx.store.create_campground(name, image, description, author=g.ctx.user)

    if result.error is ErrorKind.INVALID:
        flash(result.message, 'danger')
        return render_template('campgrounds/new.html',
                               name=name, image=image, description=description), 400
    if not result.ok:
        abort_for(result)

    flash(f'Campground "{result.value.name}" added.', 'success')
    return redirect(url_for('campgrounds.index'))


@campgrounds_bp.route('/campgrounds/new')
def new():
    """Campground creation form"""
    return render_template('campgrounds/new.html')


@campgrounds_bp.route('/campgrounds/<int:campground_id>')
def show(campground_id):
    """Campground detail with its comments resolved"""
    result = g.ctx.store.get_campground_with_comments(campground_id)
    if not result.ok:
        abort_for(result)
    return render_template('campgrounds/show.html', campground=result.value)
