from __future__ import annotations

from flask import Flask, jsonify, request

from ..changelog.formatting import change_input_payload
from ..common.responses import api_view, view_state_response
from ..core.exceptions import ValidationError
from ..container import Container
from .service import count_watchlist


def register(app: Flask, container: Container) -> None:
    @app.route("/watchlist", methods=["GET"], endpoint="watchlist")
    @api_view
    def watchlist():
        state = container.expiry_service.load_watchlist()
        return view_state_response(
            state,
            lambda wl: {**wl.to_dict(), "counts": count_watchlist(wl).to_dict()},
        )

    @app.route("/watchlist/count", methods=["GET"], endpoint="watchlist_count")
    @api_view
    def watchlist_count():
        state = container.expiry_service.load_counts()
        return view_state_response(state, lambda counts: counts.to_dict())

    @app.route("/tracker", methods=["GET"], endpoint="tracker")
    @api_view
    def tracker():
        settings = container.expiry_service.get_settings()
        return jsonify({"success": True, "data": settings.to_dict()})

    @app.route("/tracker", methods=["PUT"], endpoint="tracker_update")
    @api_view
    def tracker_update():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")

        result = container.expiry_service.update_settings(body)
        return jsonify(
            {
                "success": True,
                "message": "Expiration tracker updated successfully" if result.changes else "No changes detected",
                "data": result.settings.to_dict(),
                "changes": [change_input_payload(c) for c in result.changes],
            }
        )
