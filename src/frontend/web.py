from __future__ import annotations
import argparse
import sys
from dataclasses import asdict
from flask import Flask, request, jsonify
from wordpredict import PredictionModel
from wordpredict.errors import InitializationError, NotInitializedError

app = Flask(__name__)
_model: PredictionModel | None = None

def _flag(name: str) -> bool:
    return request.args.get(name, "0", type=str).lower() in ("1", "true", "yes")

def _require_model() -> PredictionModel:
    if _model is None:
        raise NotInitializedError()
    return _model

@app.errorhandler(NotInitializedError)
def _not_initialized(exc: NotInitializedError):
    return jsonify({"error": str(exc)}), 503

# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({
        "ok": True,
        "initialized": bool(_model and _model.is_initialized()),
        "language": _model.get_language() if _model else None,
    })

@app.get("/api/predict")
def api_predict():
    model = _require_model()
    q = request.args.get("q", "", type=str)
    if _flag("confidence"):
        return jsonify([asdict(r) for r in model.predict_next_with_confidence(q)])
    return jsonify(model.predict_next(q))

@app.get("/api/complete")
def api_complete():
    model = _require_model()
    q = request.args.get("q", "", type=str)
    if _flag("confidence"):
        return jsonify([r.to_json() for r in model.complete_with_confidence(q)])
    return jsonify(model.complete(q))

@app.get("/api/metrics")
def api_metrics():
    return jsonify(asdict(_require_model().get_metrics()))

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve the prediction model over HTTP")
    ap.add_argument("--root", default=None, help="Directory containing language-pack/<lang>/")
    ap.add_argument("--language", default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _model
    model = PredictionModel(root=args.root, debug=args.verbose or None)
    try:
        model.initialize(args.language)
    except InitializationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _model = model

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        model.reset()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
