# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from cms.app import create_app
from cms.infrastructure.container import Container


def main() -> None:
    container = Container()
    app = create_app(container)
    app.run(host=container.config.http_host, port=container.config.http_port)


if __name__ == "__main__":
    main()
