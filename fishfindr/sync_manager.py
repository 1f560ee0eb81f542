"""Sync manager for sending location reports to the FishFindr server."""

import base64
import json
import logging
import threading
from http.client import HTTPException
from typing import Any, Dict
from urllib import request as urllib_request
from urllib.error import HTTPError, URLError

from .config import ReporterConfig

logger = logging.getLogger(__name__)


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_request(config: ReporterConfig, body: Dict[str, Any]) -> urllib_request.Request:
    credentials = config.credentials()
    if credentials is None:
        raise ValueError("No credentials configured")
    username, password = credentials
    return urllib_request.Request(
        url=config.endpoint_url,
        data=json.dumps(body).encode("utf-8"),
        headers={
            "Authorization": basic_auth_header(username, password),
            "Content-Type": "application/json",
        },
        method="POST",
    )


def send_location(config: ReporterConfig, body: Dict[str, Any]) -> int:
    """POST ``body`` to the location endpoint and return the HTTP status.

    Error statuses are returned like any other response. Transport failures
    raise ``URLError``/``OSError`` or ``HTTPException`` for a broken reply;
    an endpoint urllib cannot parse raises ``ValueError``.
    """
    req = build_request(config, body)
    try:
        with urllib_request.urlopen(req, timeout=config.timeout) as resp:  # nosec B310
            payload = resp.read()
            status = resp.status
    except HTTPError as e:
        payload = e.read() or b""
        status = e.code
    logger.info("POST %s -> %s (%d bytes)", config.endpoint_url, status, len(payload))
    return status


def _send_and_log(config: ReporterConfig, body: Dict[str, Any]) -> None:
    try:
        send_location(config, body)
    except (URLError, OSError, HTTPException, ValueError) as e:
        logger.error("Location report %s failed: %s", body.get("id"), e)


def dispatch(config: ReporterConfig, body: Dict[str, Any]) -> threading.Thread:
    """Send ``body`` on a background thread; the caller does not wait."""
    thread = threading.Thread(
        target=_send_and_log,
        args=(config, body),
        name=f"report-{body.get('id')}",
        daemon=True,
    )
    thread.start()
    return thread
