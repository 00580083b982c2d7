"""
WSGI entry point

    gunicorn seylane.wsgi:app
    flask --app seylane.wsgi db upgrade
"""

# Local Imports
from .app import create_app


# Create app instance for Flask CLI / WSGI servers
app = create_app()
