from __future__ import annotations

"""HTTP front end: query string in, DXF attachment out."""

import argparse
import hmac
import io
import logging
from pathlib import Path

from flask import Flask, jsonify, request, send_file

from .config import GasketConfig
from .errors import ErrorKind, GeometryError
from .pipeline import generate_gasket

logger = logging.getLogger(__name__)


def create_app(config: GasketConfig) -> Flask:
    config.validate()
    app = Flask(__name__)
    app.config["GASKET_CONFIG"] = config

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/gasket")
    def gasket():
        if not _authorized(config.api_key):
            logger.warning("Rejected request from %s: bad API key", request.remote_addr)
            error = GeometryError(ErrorKind.UNAUTHORIZED, "invalid or missing API key")
            return jsonify(error.to_dict()), 401
        try:
            result = generate_gasket(request.args.to_dict(), config)
        except GeometryError as exc:
            logger.info("Rejected gasket request: %s (%s)", exc, exc.kind.value)
            return jsonify(exc.to_dict()), 400
        payload = io.BytesIO(result.dxf_text.encode("utf-8"))
        response = send_file(
            payload,
            mimetype="application/dxf",
            as_attachment=True,
            download_name=result.file_name,
        )
        response.headers["X-Hole-Count"] = str(result.hole_count)
        return response

    return app


def _authorized(api_key: str) -> bool:
    if not api_key:
        return True
    supplied = request.args.get("key") or request.headers.get("X-API-Key") or ""
    return hmac.compare_digest(supplied.encode("utf-8"), api_key.encode("utf-8"))


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve gasket DXF drawings over HTTP.")
    parser.add_argument("--config", type=Path, default=None, help="Path to gasketforge.json config")
    parser.add_argument("--host", default=None, help="Override listening host")
    parser.add_argument("--port", type=int, default=None, help="Override listening port")
    args = parser.parse_args()

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    project_root = Path.cwd()
    if args.config is not None:
        config = GasketConfig.from_json(args.config)
    else:
        config = GasketConfig.load_default(project_root)
    app = create_app(config)
    host = args.host or config.host
    port = args.port or config.port
    if not config.api_key:
        logger.warning("No API key configured; /gasket is open to every client")
    logger.info("Listening on %s:%s", host, port)
    app.run(host=host, port=port, threaded=True, use_reloader=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
