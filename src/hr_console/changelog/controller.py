from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_view, view_state_response
from ..container import Container
from .formatting import history_to_view


def register(app: Flask, container: Container) -> None:
    @app.route("/users/<int:user_id>/history", methods=["GET"], endpoint="user_history")
    @api_view
    def user_history(user_id: int):
        title = request.args.get("title") or None
        state = container.history_service.user_history(user_id, title=title)
        return view_state_response(state, history_to_view)

    @app.route("/tracker/history", methods=["GET"], endpoint="tracker_history")
    @api_view
    def tracker_history():
        state = container.history_service.tracker_history()
        return view_state_response(state, history_to_view)
