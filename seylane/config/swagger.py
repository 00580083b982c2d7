""" Swagger configuration defined here... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





def build_api():
    """
    Build a fresh Api per application so the factory can be called
    more than once (tests, Celery worker).
    """

    if constants.APP_ENV != "production":
        doc = '/swagger/'
    else:
        doc = False

    return Api(
        title = constants.SWAGGER_APP_PROPS['name'],
        version = constants.SWAGGER_APP_PROPS['version'],
        description = constants.SWAGGER_APP_PROPS['description'],
        doc = doc
    )
