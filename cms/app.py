# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from cms.infrastructure.container import Container
from cms.infrastructure.db import init_db
from cms.infrastructure.seeder import seed_users
from cms.shared.config import AppConfig
from cms.shared.logging import logger, setup_logging
from cms.shared.middleware.error_handler import configure_error_handling
from cms.shared.middleware.request_logger import configure_request_logging


def _install_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return resp


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config

    setup_logging(config.log_level, debug_mode=config.debug_logging, log_file=config.log_file)
    init_db(container.engine)

    if config.should_seed_users():
        seed_users(container.user_repository, container.password_hasher)

    app = Flask(__name__)
    app.json.sort_keys = False
    hops = config.security.trusted_proxy_hops
    if hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops)  # type: ignore[method-assign]
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    for controller in container.controllers():
        app.register_blueprint(controller.as_blueprint())

    _install_security_headers(app, config)

    logger.info(f"{config.app_name} {config.app_version} initialized (env={config.app_env})")
    return app
