"""Shared route dependencies."""

from fastapi import Request

from ... import Promptimize


def get_app_core(request: Request) -> Promptimize:
    """The Promptimize instance attached by the app factory."""
    return request.app.state.promptimize
