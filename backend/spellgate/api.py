# spellgate/api.py
"""Routes mounted under the API base path."""
from __future__ import annotations

from flask import Blueprint, current_app, jsonify

API_BASE = "/api"

api = Blueprint("api", __name__, url_prefix=API_BASE)


@api.route("/health", methods=["GET"])
def health_check():
    languages = current_app.extensions["spellgate.speller"].languages
    grammar   = bool(current_app.extensions["spellgate.grammar"].api_key)
    ok = bool(languages)
    return jsonify({
        "status": "healthy" if ok else "unhealthy",
        "grammar": "configured" if grammar else "missing api key",
        "spellcheck_languages": languages,
    }), 200 if ok else 500
