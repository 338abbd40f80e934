"""
app.py — Flask entry point
Email capture server: Google Sheets first, local Excel file as fallback.
"""
import logging
import os

from flask import Flask, jsonify, request, send_file

from config.secrets import read_secrets
from config.settings import Settings, load_settings
from data.errors import InvalidEmail, LocalWriteFailed
from services.submission import google_configured, submit_email

logger = logging.getLogger(__name__)

DOWNLOAD_NAME = "emails.xlsx"


def create_app(settings: Settings | None = None) -> Flask:
    """Builds the Flask app around an already loaded Settings value."""
    settings = settings or load_settings()

    app = Flask(__name__, static_folder="public", static_url_path="")
    app.config["SETTINGS"] = settings

    @app.get("/")
    def index():
        return app.send_static_file("index.html")

    @app.post("/submit-email")
    def submit():
        data = request.get_json(silent=True)
        value = data.get("email") if isinstance(data, dict) else None
        try:
            result = submit_email(value, settings)
        except InvalidEmail:
            return jsonify({"error": "Invalid email"}), 400
        except LocalWriteFailed as e:
            logger.error("Failed to write local Excel fallback: %s", e.__cause__ or e)
            return jsonify({"error": "Failed to save email (sheets + fallback both failed)"}), 500
        return jsonify({"message": result.message}), 200

    @app.get("/download")
    def download():
        if not settings.local_path.exists():
            return f"No local {DOWNLOAD_NAME} file found", 404, {"Content-Type": "text/plain; charset=utf-8"}
        return send_file(settings.local_path, as_attachment=True, download_name=DOWNLOAD_NAME)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "googleConfigured": google_configured(settings)})

    return app


def main():
    """Configures logging and runs the server."""
    logging.basicConfig(
        level=str(read_secrets("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    app = create_app(settings)
    debug_mode = os.getenv("FLASK_DEBUG", "False").lower() in ["true", "1", "t"]
    logger.info("Server running on port %s", settings.port)
    app.run(host="0.0.0.0", port=settings.port, debug=debug_mode)


if __name__ == "__main__":
    main()
