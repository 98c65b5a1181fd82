"""HRM 模拟后端的 HTTP 外壳：任意路径转发给分发器；错误按统一格式 {code, message, details, requestId} 返回。"""
from __future__ import annotations

import time
import uuid

from flask import Flask, jsonify, request

from .core.errors import MockApiError
from .service import MockRequest, MockService, get_service

HTTP_METHODS = ["GET", "POST", "PATCH", "DELETE", "PUT"]


def _req_id() -> str:
    return (request.headers.get("X-Request-ID") or "").strip() or str(uuid.uuid4())


def create_app(service: MockService = None) -> Flask:
    svc = service or get_service()
    app = Flask(__name__)
    app.config["JSON_AS_ASCII"] = False

    @app.before_request
    def _start():
        request._start_time = time.time()

    @app.after_request
    def _resp(r):
        if "X-Response-Time" not in r.headers:
            r.headers["X-Response-Time"] = f"{time.time() - getattr(request, '_start_time', time.time()):.3f}"
        return r

    @app.route("/health")
    def health():
        return jsonify({"status": "up", "cell": "hrm-mock"}), 200

    @app.route("/", defaults={"path": ""}, methods=HTTP_METHODS)
    @app.route("/<path:path>", methods=HTTP_METHODS)
    def dispatch(path):
        req = MockRequest(
            method=request.method,
            url=path,
            data=request.get_json(silent=True),
            params=request.args.to_dict(),
        )
        try:
            result = svc.request(req)
        except MockApiError as e:
            return jsonify(e.to_body(_req_id())), e.status
        if result is None:
            return "", 204
        return jsonify(result), 200

    return app
