"""ASGI entrypoint for the CalFit API."""

from calfit.api.app import create_app
from calfit.containers import build_container

app = create_app(build_container())
