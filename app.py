"""
YelpCamp
Application Entry Point

Builds the YelpCamp app from Config; listens on port 3000 when
executed directly.
"""

from yelpcamp import create_app

# WSGI application used by `flask --app app run`
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=3000)
