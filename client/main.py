from flask import Flask, request, jsonify, render_template
import os
import sys
from pathlib import Path

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Obtener el directorio raíz del proyecto
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from recovery.config import DEFAULT_METHOD
from recovery.errors import ReconstructionError
from recovery.formatter import render_lines, result_to_dict
from recovery.interpolation import METHODS
from recovery.pipeline import reconstruct
from client.config import API_PATH, EXAMPLE_DOCUMENT, SERVER_HOST, SERVER_PORT

app = Flask(__name__, template_folder=str(Path(__file__).parent / "templates"))
app.json.sort_keys = False

frontend_origin = os.getenv("FRONTEND_ORIGIN", "http://127.0.0.1:5000")
CORS(
    app,
    resources={"/api/*": {"origins": frontend_origin}},
    supports_credentials=False,
    expose_headers=["Content-Type"],
    allow_headers=["Content-Type"],
)

limiter_enabled = os.getenv("LIMITER_ENABLED", "true").lower() in {"1", "true", "yes"}
limiter_rate = os.getenv("LIMITER_DEFAULT_RATE", "60 per minute")
if limiter_enabled:
    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=[limiter_rate],
        storage_uri="memory://",
    )
else:
    limiter = Limiter(get_remote_address, app=app, enabled=False)


@app.errorhandler(429)
def handle_rate_limit(exc):
    return jsonify({"error": "Límite de solicitudes excedido. Intenta nuevamente más tarde."}), 429


def run_reconstruction(document, method):
    """Ejecuta el pipeline y devuelve (resultado, None) o (None, error)."""
    try:
        return reconstruct(document, method=method), None
    except ReconstructionError as exc:
        app.logger.error("Reconstrucción fallida (%s): %s", exc.kind, exc)
        return None, exc


@app.route("/", methods=["GET", "POST"])
def index():
    document = EXAMPLE_DOCUMENT
    method = DEFAULT_METHOD
    lines = None
    error = None

    if request.method == "POST":
        document = request.form.get("document", "")
        method = request.form.get("method", DEFAULT_METHOD)
        if method not in METHODS:
            method = DEFAULT_METHOD
        result, exc = run_reconstruction(document, method)
        if exc is not None:
            error = {"kind": exc.kind, "message": str(exc)}
        else:
            lines = render_lines(result)

    status = 400 if error else 200
    return render_template(
        "index.html",
        document=document,
        method=method,
        methods=sorted(METHODS),
        lines=lines,
        error=error,
    ), status


@app.route(API_PATH, methods=["POST"])
@limiter.limit("30 per minute")
def api_reconstruct():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or "document" not in payload:
        return jsonify({"error": "Falta el campo 'document'.", "kind": "malformed_input"}), 400

    method = payload.get("method") or DEFAULT_METHOD
    if method not in METHODS:
        return jsonify({"error": f"Método desconocido: {method!r}.", "kind": "invalid_method"}), 400

    result, exc = run_reconstruction(payload["document"], method)
    if exc is not None:
        return jsonify({"error": str(exc), "kind": exc.kind}), 400
    return jsonify(result_to_dict(result))


if __name__ == "__main__":
    print(f"Servidor en http://{SERVER_HOST}:{SERVER_PORT}")
    app.run(host=SERVER_HOST, port=SERVER_PORT)
