from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

from flask import jsonify, redirect, url_for

from ..core.exceptions import AuthenticationError, FetchError, ValidationError
from .view_state import ViewState

logger = logging.getLogger(__name__)


def view_state_response(state: ViewState, to_view: Callable[[Any], Any]):
    """Render a ViewState; failed fetches still render, with their message."""
    return jsonify(
        {
            "success": state.error is None,
            "loading": state.loading,
            "error": state.error,
            "data": to_view(state.data),
        }
    )


def api_view(view):
    """Map domain errors onto responses: 401 -> /login, bad input -> 400,
    failed API writes -> 502 with the displayable message."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except AuthenticationError as e:
            logger.info("API rejected credentials: %s", e)
            return redirect(url_for("login"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchError as e:
            return jsonify({"success": False, "message": str(e)}), 502

    return wrapper
