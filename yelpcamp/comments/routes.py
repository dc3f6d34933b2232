"""
Comment Routes
"""

from flask import render_template, request, redirect, url_for, flash, g
from yelpcamp.auth.decorators import identity_required
from yelpcamp.campgrounds.routes import abort_for
from yelpcamp.comments import comments_bp
from yelpcamp.store import ErrorKind


@comments_bp.route('/new')
@identity_required
def new(campground_id):
    """Comment form for one campground"""
    result = g.ctx.store.get_campground(campground_id)
    if not result.ok:
        abort_for(result)
    return render_template('comments/new.html', campground=result.value)


@comments_bp.route('', methods=['POST'])
@identity_required
def create(campground_id):
    """Create a comment and attach it to the campground"""
    text = request.form.get('comment[text]', '')
    author = request.form.get('comment[author]', '').strip() or g.ctx.user.username

    result = g.ctx.store.add_comment(campground_id, text, author=author)

    if result.error is ErrorKind.NOT_FOUND:
        flash('That campground no longer exists.', 'danger')
        return redirect(url_for('campgrounds.index'))
    if result.error is ErrorKind.INVALID:
        flash(result.message, 'danger')
        lookup = g.ctx.store.get_campground(campground_id)
        if not lookup.ok:
            abort_for(lookup)
        return render_template('comments/new.html', campground=lookup.value), 400
    if not result.ok:
        abort_for(result)

    flash('Comment added.', 'success')
    return redirect(url_for('campgrounds.show', campground_id=campground_id))
