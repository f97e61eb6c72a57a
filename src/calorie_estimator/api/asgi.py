"""ASGI entrypoint for the calorie estimator API."""

from calorie_estimator.api.app import create_app
from calorie_estimator.containers import build_container

app = create_app(build_container())
