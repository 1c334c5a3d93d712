"""Line-framed JSON requests to the shop server over TCP."""

from __future__ import annotations

import json
import logging
import socket
from typing import Any, Mapping

log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
REQUEST_TERMINATOR = "\nEND_REQUEST\n"
RESPONSE_TERMINATOR = "\nEND_RESPONCE\n"

_CHUNK = 4096


def encode_request(data: Mapping[str, Any], request: int, request_key: str) -> bytes:
    """Serialise ``data`` with the request code under ``request_key`` and frame it."""
    payload = dict(data)
    payload[request_key] = str(int(request))
    body = json.dumps(payload, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return (body + REQUEST_TERMINATOR).encode("utf-8")


def decode_response(raw: bytes | str) -> Any:
    """Parse a response, ignoring the terminator and anything after it."""
    text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
    body, _, _ = text.partition(RESPONSE_TERMINATOR)
    return json.loads(body)


class NetworkManager:
    """Sends one request per connection and reads the matching response."""

    def __init__(
        self,
        request_key: str,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: float | None = None,
    ) -> None:
        self.request_key = request_key
        self.host = host
        self.port = port
        self.timeout = timeout
        self._sock: socket.socket | None = None

    def send_request(self, data: Mapping[str, Any], request: int) -> None:
        """Open a connection and send the framed request."""
        self.close()
        message = encode_request(data, request, self.request_key)
        try:
            self._sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
            self._sock.sendall(message)
        except OSError as exc:
            self.close()
            raise ConnectionError(f"failed to send request: {exc}") from exc
        log.debug("client sent request")

    def read_response(self) -> Any:
        """Read until the response terminator or end of stream, then close."""
        if self._sock is None:
            raise RuntimeError("no request has been sent")
        terminator = RESPONSE_TERMINATOR.encode("utf-8")
        buffer = bytearray()
        try:
            while terminator not in buffer:
                chunk = self._sock.recv(_CHUNK)
                if not chunk:
                    break
                buffer.extend(chunk)
        except OSError as exc:
            raise ConnectionError(f"failed to receive response: {exc}") from exc
        finally:
            self.close()
        if not buffer:
            raise ConnectionError("connection closed without a response")
        log.debug("client received response")
        return decode_response(bytes(buffer))

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "NetworkManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()