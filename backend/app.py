# backend/app.py
"""
HTTP entry point.

    python app.py                  # dev server on $PORT
    flask --app app run            # Flask CLI picks up create_app()
"""
from __future__ import annotations
import logging
from pathlib import Path

from flask import Flask, request, jsonify, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException

from spellgate.api import api
from spellgate.errors import ValidationError, status_for
from spellgate.grammar import TextGearsClient
from spellgate.session import SessionGuard
from spellgate.settings import CORS_ORIGINS, EnvironmentConfig
from spellgate.symspell import SymSpellCorrector, bundled_dictionary_path

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

BASE_DIR   = Path(__file__).parent
VIEWS_DIR  = BASE_DIR / "views"
STATIC_DIR = BASE_DIR / "public"

SPELL_LANGUAGE = "en"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
}


# ------------------------------------------------------------------
def build_speller(config: EnvironmentConfig, logger: logging.Logger) -> SymSpellCorrector:
    """Load the spelling dictionary once; an empty corrector reports unhealthy."""
    speller = SymSpellCorrector()
    try:
        if config.symspell_dictionary:
            speller.train_from_json(config.symspell_dictionary, SPELL_LANGUAGE)
        else:
            speller.load_dictionary(bundled_dictionary_path(), SPELL_LANGUAGE)
    except (OSError, ValueError) as e:
        logger.exception("Dictionary load failed: %s", e)
    logger.info("Dictionary init: %s", "success" if speller.languages else "FAILED")
    return speller


def _read_text() -> str:
    if request.is_json:
        try:
            data = request.get_json()
        except BadRequest as e:
            raise ValidationError("text", "request body is not valid JSON") from e
    else:
        data = request.form
    if not hasattr(data, "get"):
        raise ValidationError("text", "request body must be an object")
    text = data.get("text")
    if text is None:
        raise ValidationError("text")
    if not isinstance(text, str):
        raise ValidationError("text", "'text' must be a string")
    return text


# ------------------------------------------------------------------
def create_app(config: EnvironmentConfig | None = None,
               grammar: TextGearsClient | None = None,
               speller: SymSpellCorrector | None = None) -> Flask:
    config = config or EnvironmentConfig.from_env()

    app = Flask(__name__, static_folder=str(STATIC_DIR), static_url_path="")
    app.logger.setLevel(logging.DEBUG if config.is_dev else logging.INFO)
    CORS(app, origins=list(CORS_ORIGINS))

    if grammar is None:
        grammar = TextGearsClient(config.textgears_api_key,
                                  language=config.textgears_language,
                                  timeout=config.textgears_timeout)
    if speller is None:
        speller = build_speller(config, app.logger)
    guard = SessionGuard(config.cookie)

    app.config["SPELLGATE"] = config
    app.extensions["spellgate.grammar"] = grammar
    app.extensions["spellgate.speller"] = speller

    # --- middleware ---
    @app.after_request
    def _after(response):
        if config.is_dev:
            app.logger.info("%s %s %s", request.method, request.path, response.status_code)
        if config.is_production:
            for name, value in SECURITY_HEADERS.items():
                response.headers.setdefault(name, value)
        return response

    app.register_blueprint(api)

    # --- error mapping ---
    @app.errorhandler(HTTPException)
    def _http_error(err):
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def _error(err):
        if not config.is_test:
            app.logger.error("%s", err, exc_info=err)
        return jsonify({"error": str(err)}), status_for(err)

    # --- views ---
    @app.route("/", methods=["GET"])
    def login_view():
        return send_from_directory(VIEWS_DIR, "login.html")

    @app.route("/users", methods=["GET"])
    @guard.guard
    def users_view():
        return send_from_directory(VIEWS_DIR, "users.html")

    @app.route("/symspell/load/spellcheck", methods=["GET"])
    def spellcheck_view():
        return send_from_directory(VIEWS_DIR, "spellcheck.html")

    # --- gateways ---
    @app.route("/textgears/spellcheck", methods=["POST"])
    def textgears_spellcheck():
        errors = grammar.check_grammar(_read_text())
        if errors is None:
            return "", 204
        return jsonify(errors), 200

    @app.route("/symspell/spellcheck", methods=["POST"])
    def symspell_spellcheck():
        output = speller.correct(_read_text(), SPELL_LANGUAGE)
        return jsonify(output), 201

    return app


# ------------------------------------------------------------------
if __name__ == "__main__":
    config = EnvironmentConfig.from_env()
    create_app(config).run(host="0.0.0.0", port=config.port, debug=config.is_dev)
