# linkrisk/web.py
from flask import Flask, render_template, request, jsonify, make_response
import logging
import threading
import time
from typing import Optional, Dict, Any

from . import config
from .scoring import analyze
from .utils import meter_color, verdict_badge
from .validator import validate_url, iso_utc_now

app = Flask(__name__)

logger = logging.getLogger("linkrisk.web")

# Per-IP simple rate limiter (sliding window)
IP_REQS: Dict[str, Dict[str, Any]] = {}  # ip -> {"count": int, "start": float}
_IP_REQS_LOCK = threading.Lock()


def _client_key() -> str:
    """Return remote client IP (best-effort)."""
    xf = request.headers.get("X-Forwarded-For")
    if xf:
        return xf.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _purge_expired(now: float, window: float) -> None:
    """Drop clients whose window has expired. Caller holds _IP_REQS_LOCK."""
    stale = [k for k, rec in IP_REQS.items() if (now - rec["start"]) > window]
    for k in stale:
        del IP_REQS[k]


def _rate_limit_check() -> Optional[Any]:
    """Return None if allowed, or a Flask response if rate-limited."""
    key = _client_key()
    now = time.time()
    window = config.RATE_WINDOW
    with _IP_REQS_LOCK:
        rec = IP_REQS.get(key)
        if rec is None or (now - rec["start"]) > window:
            _purge_expired(now, window)
            IP_REQS[key] = {"count": 1, "start": now}
            return None
        rec["count"] += 1
        count = rec["count"]
        start = rec["start"]
    if count > config.RATE_LIMIT:
        retry_after = int(window - (now - start))
        return make_response(jsonify({"error": "rate_limited", "retry_after": retry_after}), 429)
    return None


def _input_error(url: str) -> Optional[str]:
    if not url:
        return "missing url"
    if config.STRICT_INPUT and not validate_url(url):
        return "invalid url"
    return None


@app.route("/", methods=["GET", "POST"])
def index():
    view = None
    error = None
    url = ""
    if request.method == "POST":
        rl = _rate_limit_check()
        if rl:
            return rl

        url = request.form.get("url", "").strip()
        error = _input_error(url)
        if error is None:
            result = analyze(url)
            logger.info("scanned %s -> %s (%d)", url, result.verdict.value, result.score)
            view = dict(result.to_dict())
            view["badge"] = verdict_badge(result.verdict)
            view["meter_color"] = meter_color(result.safe_percent)

    return render_template("index.html", url=url, result=view, error=error)


@app.route("/api/analyze", methods=["GET", "POST"])
def api_analyze():
    rl = _rate_limit_check()
    if rl:
        return rl

    if request.method == "GET":
        url = request.args.get("url", "").strip()
    else:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        url = str(body.get("url") or "").strip()

    error = _input_error(url)
    if error:
        return make_response(jsonify({"error": error}), 400)

    try:
        result = analyze(url)
    except Exception as e:
        logger.exception("API analyze failed for %s", url)
        return make_response(jsonify({"error": f"internal error: {e}"}), 500)
    return jsonify({"result": result.to_dict(), "scanned_at": iso_utc_now()})


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "time": int(time.time())})


def run(host: str = config.WEB_HOST, port: int = config.WEB_PORT, debug: bool = False):
    logger.info("Starting web app on %s:%s (debug=%s)", host, port, debug)
    app.run(debug=debug, host=host, port=port)


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    run()
