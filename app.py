import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify

from src.agents.carousel_agent import get_blueprint

# ---- Flask app setup ----
load_dotenv()

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

DEFAULT_PORT = int(os.environ.get("FLASK_PORT", "5000"))
DEFAULT_HOST = os.environ.get("FLASK_HOST", "127.0.0.1")
MAX_UPLOAD_MB = int(os.environ.get("CAROUSEL_MAX_UPLOAD_MB", "20"))


def create_app() -> Flask:
    flask_app = Flask(__name__)
    flask_app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_MB * 1024 * 1024
    flask_app.register_blueprint(get_blueprint())

    @flask_app.route("/")
    def index():
        return jsonify({
            "service": "linkedin-carousel-agent",
            "status": "ok",
            "endpoints": ["/api/generate-carousel", "/api/generate-pdf"],
        })

    return flask_app


app = create_app()


if __name__ == "__main__":
    app.run(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=True)
