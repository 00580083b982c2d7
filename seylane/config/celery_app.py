""" Celery configuration bound to the Flask application... """

# Python Packages
from celery import Celery, Task

# Constants
from ..base import constants





def celery_init_app(app) -> Celery:
    """
    Create the Celery app for *app* and make it the default for shared_task.

    Every task body runs inside app.app_context() so Flask-SQLAlchemy
    sessions work in the worker exactly as they do in a request.
    """

    class FlaskTask(Task):
        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    app.config.setdefault("CELERY", {
        "broker_url": constants.CELERY_BROKER_URL,
        "result_backend": constants.CELERY_RESULT_BACKEND,
        "task_always_eager": constants.CELERY_TASK_ALWAYS_EAGER,
        "task_ignore_result": True,
    })

    celery_app = Celery(app.name, task_cls = FlaskTask)
    celery_app.config_from_object(app.config["CELERY"])
    celery_app.set_default()

    app.extensions["celery"] = celery_app
    return celery_app
