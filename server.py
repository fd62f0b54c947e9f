import logging
import socket
import time

import requests
from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from passguard.api_check import pwned_count
from passguard.charset_policy import CharsetPolicy
from passguard.config import Config
from passguard.errors import InvalidInput, InvalidRequest, RandomSourceFailure
from passguard.heuristic import ZxcvbnScorer
from passguard.password_utils import GenerationRequest, PasswordGenerator
from passguard.rate_limiter import RateLimiter
from passguard.strength import StrengthEvaluator, assess, report_to_dict

logger = logging.getLogger("passguard.server")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


def _query_flag(name: str) -> bool:
    # orice valoare în afară de "false" înseamnă activat
    return request.args.get(name) != "false"


def _query_length(default: int) -> int:
    try:
        length = int(request.args.get("length", ""))
    except ValueError:
        return default
    return length or default


def create_app(config=Config, scorer=None, generator=None, evaluator=None, limiter=None) -> Flask:
    app = Flask(__name__)

    scorer = scorer or ZxcvbnScorer()
    generator = generator or PasswordGenerator(
        min_length=config.MIN_PASSWORD_LENGTH, max_length=config.MAX_PASSWORD_LENGTH
    )
    evaluator = evaluator or StrengthEvaluator(
        min_length=config.POLICY_MIN_LENGTH, max_length=config.POLICY_MAX_LENGTH
    )
    limiter = limiter or RateLimiter(
        limit=config.RATE_LIMIT_MAX_REQUESTS, window_seconds=config.RATE_LIMIT_WINDOW_SECONDS
    )

    # ---------- middleware ----------
    @app.before_request
    def start_timer_and_limit():
        g.started = time.perf_counter()
        if request.method == "OPTIONS":
            return "", 204
        if not limiter.allow(request.remote_addr or "unknown"):
            return jsonify({"error": "Too many requests, please try again later."}), 429
        return None

    @app.after_request
    def add_headers_and_log(response):
        response.headers["Access-Control-Allow-Origin"] = config.CORS_ORIGINS
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        elapsed = (time.perf_counter() - g.get("started", time.perf_counter())) * 1000
        logger.info("%s %s %d %.1f ms", request.method, request.path, response.status_code, elapsed)
        return response

    # ---------- erori ----------
    @app.errorhandler(InvalidInput)
    @app.errorhandler(InvalidRequest)
    def handle_bad_request(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(RandomSourceFailure)
    def handle_random_failure(error):
        logger.critical("Secure random source failed: %s", error)
        return jsonify({"error": "Internal server error"}), 500

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error while serving %s", request.path)
        return jsonify({"error": "Internal server error"}), 500

    # ---------- rute ----------
    @app.route("/api/check-password", methods=["POST"])
    def check_password():
        data = request.get_json(silent=True) or {}
        password = data.get("password") if isinstance(data, dict) else None
        if not password or not isinstance(password, str):
            return jsonify({"error": "Password is required"}), 400

        heuristic, report = assess(password, scorer, evaluator)
        response = report_to_dict(heuristic, report)

        if config.HIBP_ENABLED:
            try:
                response["pwnedCount"] = pwned_count(password, timeout=config.HIBP_TIMEOUT)
            except requests.RequestException as e:
                logger.warning("HIBP lookup failed: %s", e)
                response["pwnedCount"] = None

        return jsonify(response)

    @app.route("/api/generate-password", methods=["GET"])
    def generate_password():
        policy = CharsetPolicy(
            use_lower=_query_flag("lowercase"),
            use_upper=_query_flag("uppercase"),
            use_digits=_query_flag("numbers"),
            use_symbols=_query_flag("symbols"),
        )
        gen_request = GenerationRequest(length=_query_length(config.DEFAULT_PASSWORD_LENGTH), policy=policy)
        return jsonify({"password": generator.generate(gen_request)})

    return app


def _port_is_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def find_free_port(host: str, start: int, retries: int) -> int:
    for port in range(start, start + retries + 1):
        if _port_is_free(host, port):
            return port
        logger.warning("Port %d is in use, trying port %d...", port, port + 1)
    raise OSError(f"No free port in range {start}..{start + retries}")


def run(config=Config):
    config.validate()
    app = create_app(config)
    port = find_free_port(config.HOST, config.PORT, config.PORT_RETRIES)
    logger.info("Server is running on port %d", port)
    app.run(host=config.HOST, port=port)


if __name__ == "__main__":
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run()
