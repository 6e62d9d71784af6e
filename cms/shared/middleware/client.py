# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import request


def client_address() -> str:
    """Socket peer of the request.

    Forwarding headers are client-controlled and never read here. Behind a
    reverse proxy, ``TRUSTED_PROXY_HOPS`` makes werkzeug's ``ProxyFix``
    rewrite ``remote_addr`` from the hops the proxies appended.
    """
    return request.remote_addr or "unknown"
