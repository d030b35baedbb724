from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..users.guards import login_required
from .payload import render_png

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/qr/image", endpoint="qr_image")
    @login_required
    def qr_image():
        """PNG rendering of a session code value."""
        code = request.args.get("code", "")
        if not code:
            return jsonify({"success": False, "message": "Missing code"}), 400

        try:
            png = render_png(code)
        except Exception as e:
            logger.exception("QR rendering failed")
            return jsonify({"success": False, "message": str(e)}), 500

        return app.response_class(png, mimetype="image/png")
