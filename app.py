import logging

from flask import Flask, jsonify
from flask_cors import CORS

from config.db_config import create_client, get_students_collection
from config.logging_config import setup_logging
from config.settings import load_settings
from models.student_model import StudentGateway
from routes.student_routes import GATEWAY_KEY, student_bp
from utils.errors import APIError, StorageError

logger = logging.getLogger(__name__)


def create_app(settings=None, gateway=None):
    """
    Build the Flask app.

    `gateway` is the storage gateway the handlers talk to; when omitted a
    MongoDB-backed StudentGateway is built from `settings`.
    """
    if settings is None:
        settings = load_settings()

    # ----------------------------
    # Flask App Initialization
    # ----------------------------
    app = Flask(__name__)

    CORS(
        app,
        resources={r"/*": {"origins": list(settings.cors_origins)}},
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    # ----------------------------
    # Storage Gateway
    # ----------------------------
    if gateway is None:
        client = create_client(settings)
        collection = get_students_collection(client, settings)
        gateway = StudentGateway(collection, op_timeout=settings.op_timeout)
    app.extensions[GATEWAY_KEY] = gateway

    app.register_blueprint(student_bp)

    # ----------------------------
    # Health + Root Routes
    # ----------------------------
    @app.route("/")
    def home():
        return jsonify({"data": "Hello from NexaScale"}), 200

    @app.route("/healthz")
    def healthz():
        try:
            app.extensions[GATEWAY_KEY].ping()
        except StorageError as e:
            return jsonify(status="unavailable", error=e.message), 503
        return jsonify(status="healthy"), 200

    # ----------------------------
    # Error Handlers
    # ----------------------------
    @app.errorhandler(APIError)
    def api_error(e):
        return jsonify(error=e.message), e.status_code

    @app.errorhandler(404)
    def not_found(_):
        return jsonify(error="Not found"), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify(error="Method not allowed"), 405

    # Flask has already logged the traceback by the time this runs
    @app.errorhandler(500)
    def server_error(_):
        return jsonify(error="Server error"), 500

    return app


# ----------------------------
# Run App
# ----------------------------
if __name__ == "__main__":
    settings = load_settings()
    setup_logging(settings.log_level)
    app = create_app(settings)
    logger.info("🚀 Serving on %s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=False)
