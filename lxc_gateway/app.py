# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit

from flask import Flask
from flask_cors import CORS

from lxc_gateway.infrastructure.container import Container
from lxc_gateway.shared.config import AppConfig, load_config
from lxc_gateway.shared.logging import logger, setup_logging
from lxc_gateway.shared.middleware.error_handler import configure_error_handling
from lxc_gateway.shared.middleware.request_logger import configure_request_logging
from lxc_gateway.shared.middleware.security_headers import configure_security_headers

EXTENSION_KEY = "lxc_gateway"


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.extensions[EXTENSION_KEY] = container

    configure_error_handling(app, config)
    configure_request_logging(app, config)
    configure_security_headers(app, config)

    cors_kwargs: dict[str, object] = {"origins": config.security.allowed_origins}
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.containers_controller.as_blueprint())

    logger.info(
        f"{config.observability.service_name} initialized (env={config.app_env}, "
        f"store={config.users_file}, node={config.proxmox.node_url})"
    )
    return app


def main() -> None:
    config = load_config()
    container = Container(config)
    app = create_app(config, container)
    atexit.register(container.close)
    logger.info(f"Server is running on http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
