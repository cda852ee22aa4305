"""A small XML-RPC client that calls the demonstration server."""

from __future__ import annotations

import http.client
import sys
import xmlrpc.client
from collections.abc import Sequence
from typing import Any, TextIO

DEFAULT_URL = "http://0.0.0.0:3000/"
USER_AGENT = "dxr-client-example"


class _Transport(xmlrpc.client.Transport):
    user_agent = USER_AGENT


class _SafeTransport(xmlrpc.client.SafeTransport):
    user_agent = USER_AGENT


def _proxy(url: str) -> xmlrpc.client.ServerProxy:
    transport = _SafeTransport() if url.startswith("https:") else _Transport()
    return xmlrpc.client.ServerProxy(url, transport=transport)


def run(
    url: str = DEFAULT_URL, out: TextIO | None = None
) -> tuple[str, dict[str, bool], dict[str, Any]]:
    """Call each server method, report the results on ``out`` and return them."""
    out = out if out is not None else sys.stdout
    proxy = _proxy(url)

    message = proxy.hello("DXR")
    print(f"Server message: {message}", file=out)

    flags = proxy.map_h()
    print(f"Server counter: {flags!r}", file=out)

    record = proxy.person()
    print(f"Server counter: {record!r}", file=out)

    return message, flags, record


def main(argv: Sequence[str] | None = None) -> int:
    """Call the server at the URL given, or the default one."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("Usage: rpcclient [url]", file=sys.stderr)
        return 2
    url = args[0] if args else DEFAULT_URL
    try:
        run(url)
    except (xmlrpc.client.Error, OSError, http.client.HTTPException) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())