from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_view, view_state_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @api_view
    def dashboard():
        state = container.dashboard_service.load(request.args.get("range"))
        return view_state_response(state, lambda totals: totals.to_dict())
