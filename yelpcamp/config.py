"""
Configuration settings for YelpCamp
"""
import os


class Config:
    """Flask application configuration"""

    # Signs the session cookie holding the logged-in user id
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # users, campgrounds and comments tables
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'yelp_camp.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Insert demo campgrounds when the database is empty
    SEED_ON_STARTUP = os.environ.get('SEED_ON_STARTUP', '').lower() in ('1', 'true', 'yes')

    # Werkzeug hashing method (salted per user)
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SEED_ON_STARTUP = False
    LOG_LEVEL = 'DEBUG'
