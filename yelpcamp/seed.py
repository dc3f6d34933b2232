"""
Demo data for an empty database.
"""

import logging

import click

logger = logging.getLogger(__name__)

DEMO_CAMPGROUNDS = [
    {
        'name': "Cloud's Rest",
        'image': 'https://images.unsplash.com/photo-1504280390367-361c6d9f38f4',
        'description': 'High above the valley, cold nights and clear skies.',
    },
    {
        'name': 'Desert Mesa',
        'image': 'https://images.unsplash.com/photo-1487730116645-74489c95b41b',
        'description': 'Red rock, no shade, unbeatable sunsets.',
    },
    {
        'name': 'Canyon Floor',
        'image': 'https://images.unsplash.com/photo-1496545672447-f699b503d270',
        'description': 'Sheltered sites next to the river.',
    },
]

DEMO_COMMENT = {'text': 'This place is great, but I wish there was internet', 'author': 'Homer'}


def seed_demo_data(store):
    """Insert demo campgrounds when none exist. Returns how many were added."""
    existing = store.count_campgrounds().unwrap()
    if existing:
        logger.info("Skipping seed: %d campgrounds already present", existing)
        return 0

    added = 0
    for data in DEMO_CAMPGROUNDS:
        campground = store.create_campground(**data).unwrap()
        store.add_comment(campground.id, DEMO_COMMENT['text'], author=DEMO_COMMENT['author']).unwrap()
        added += 1
    logger.info("Seeded %d demo campgrounds", added)
    return added


def register_commands(app):
    """Attach the ``flask seed`` command."""

    @app.cli.command('seed')
    def seed_command():
        """Insert demo campgrounds into an empty database."""
        from yelpcamp.context import get_store
        added = seed_demo_data(get_store(app))
        click.echo(f'Added {added} campground(s).')
