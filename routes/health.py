"""Health check route."""

from flask import jsonify

from core.exceptions import MarketplaceError
from core.logger import logger
from routes.helpers import get_backend


def register_health(app):
    """Register health check route."""

    @app.route("/health")
    def health():
        """Health check endpoint for Docker/Kubernetes."""
        try:
            backend = get_backend()
            backend.ping()
            return jsonify({"status": "healthy", "service": "freelancehub", "backend": backend.name}), 200
        except MarketplaceError as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({"status": "unhealthy", "error": str(e)}), 503
