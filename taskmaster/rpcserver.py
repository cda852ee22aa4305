"""A small XML-RPC server exposing a few demonstration methods."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any
from xmlrpc.server import SimpleXMLRPCRequestHandler, SimpleXMLRPCServer

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass
class Person:
    """A person record sent to clients as an XML-RPC struct."""

    name: str
    age: int
    jobs: list[str] = field(default_factory=list)

    def to_value(self) -> dict[str, Any]:
        """Return the struct sent over the wire."""
        return asdict(self)

    @classmethod
    def from_value(cls, value: dict[str, Any]) -> Person:
        """Rebuild a person from a struct; raise ValueError if malformed."""
        try:
            name, age, jobs = value["name"], value["age"], value["jobs"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"not a person struct: {value!r}") from exc
        if not isinstance(name, str) or not isinstance(age, int):
            raise ValueError(f"not a person struct: {value!r}")
        if not isinstance(jobs, list) or not all(isinstance(j, str) for j in jobs):
            raise ValueError(f"not a person struct: {value!r}")
        return cls(name=name, age=age, jobs=list(jobs))


def hello(name: str) -> str:
    """Greet ``name``."""
    if not isinstance(name, str):
        raise TypeError(f"expected a string, got {type(name).__name__}")
    return f"Handler function says: Hello, {name}!"


def map_h() -> dict[str, bool]:
    """Return a fixed mapping of names to flags."""
    return {"rust": True, "test": False}


def person() -> dict[str, Any]:
    """Return a sample person, checking that it survives a round trip."""
    sample = Person(name="p1", age=30, jobs=["engineer", "sales"])
    restored = Person.from_value(sample.to_value())
    print(f"person: {restored!r}")
    return sample.to_value()


class _RootPathHandler(SimpleXMLRPCRequestHandler):
    rpc_paths = ("/",)


def make_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> SimpleXMLRPCServer:
    """Create a server bound to ``host``:``port`` with every method registered."""
    server = SimpleXMLRPCServer(
        (host, port),
        requestHandler=_RootPathHandler,
        logRequests=False,
        allow_none=True,
    )
    server.register_function(hello, "hello")
    server.register_function(map_h, "map_h")
    server.register_function(person, "person")
    return server


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve requests until interrupted with Ctrl-C."""
    with make_server(host, port) as server:
        print(f"Server is running on {server.server_address[1]}...")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server from the command line."""
    parser = argparse.ArgumentParser(description="Run the XML-RPC demo server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    serve(args.host, args.port)
    print("Hello, world!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())