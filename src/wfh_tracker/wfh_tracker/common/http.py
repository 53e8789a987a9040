from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


def error_response(e: Exception):
    """JSON ``{"error": message}`` with the status code for the failure kind."""

    if isinstance(e, ValidationError):
        return jsonify({"error": str(e)}), 400
    if isinstance(e, AuthorizationError):
        return jsonify({"error": str(e)}), 403
    logger.exception("Request failed")
    return jsonify({"error": str(e) or e.__class__.__name__}), 500
