"""
Celery worker entry point

    celery -A seylane.celery_worker worker --loglevel=info
"""

# Local Imports
from .app import create_app


flask_app = create_app()
celery_app = flask_app.extensions["celery"]
