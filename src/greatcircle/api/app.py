# src/greatcircle/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and mounts the routes.
The math lives in `greatcircle.calculator`.
"""

from __future__ import annotations

from fastapi import FastAPI

from greatcircle import __version__
from greatcircle.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title="greatcircle API", version=__version__)

app.include_router(router)
