"""WSGI entry point for the Task Tracker."""

import os

from tracker import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
