"""HTTP sidecar server for word-diff.

Runs as a lightweight stdlib HTTP server on localhost.  An editor calls
this over HTTP instead of spawning a process per diff, and reads edit
scripts back through opaque handles.

Endpoints:
    POST /diff     — Diff texts, store the script, return handle + edits
    POST /len      — Number of entries behind a handle
    POST /entry    — start/end/data of one entry (nulls when absent)
    POST /release  — Drop a stored script
    GET  /health   — Health check

All endpoints expect/return JSON.
Body format for /diff: {"old": "...", "new": "...", "offset": 0}
Body format for the rest: {"handle": 1, "index": 0}
"""

from __future__ import annotations
import json
import logging
import os
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Any

from .config import create_differ, load_from_yaml
from .differ import WordDiffer
from .store import ScriptStore

logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("WORD_DIFF_PORT", "18792"))
DEFAULT_CONFIG = os.environ.get("WORD_DIFF_CONFIG", "")

# Shared state
_differ: WordDiffer | None = None
_store = ScriptStore()
_config_path: str = DEFAULT_CONFIG


def _get_differ() -> WordDiffer:
    global _differ
    if _differ is None:
        _differ = create_differ(load_from_yaml(_config_path) if _config_path else None)
    return _differ


class DiffHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the word-diff sidecar."""

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        data = json.loads(body) if body else {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok", "scripts": _store.size})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()

            if self.path == "/diff":
                offset = int(body.get("offset", 0))
                script = _get_differ().diff(body.get("old", ""), body.get("new", ""), offset)
                handle = _store.put(script)
                self._respond(200, {
                    "handle": handle,
                    "len": len(script),
                    "unit": script.unit,
                    "edits": script.to_list(),
                })

            elif self.path == "/len":
                self._respond(200, {"len": _store.length(int(body["handle"]))})

            elif self.path == "/entry":
                handle, index = int(body["handle"]), int(body.get("index", 0))
                self._respond(200, {
                    "start": _store.start(handle, index),
                    "end": _store.end(handle, index),
                    "data": _store.data(handle, index),
                })

            elif self.path == "/release":
                self._respond(200, {"released": _store.release(int(body["handle"]))})

            else:
                self._respond(404, {"error": "not found"})

        except (ValueError, KeyError, TypeError) as e:
            self._respond(400, {"error": f"bad request: {e}"})
        except Exception as e:
            logger.exception("request to %s failed", self.path)
            self._respond(500, {"error": str(e)})


def serve(port: int = DEFAULT_PORT, config_path: str = DEFAULT_CONFIG) -> None:
    """Start the word-diff HTTP sidecar."""
    global _config_path, _differ
    _config_path = config_path
    _differ = None
    differ = _get_differ()

    server = HTTPServer(("127.0.0.1", port), DiffHandler)
    print(f"word-diff sidecar listening on http://127.0.0.1:{port}")
    print(f"  config: {config_path or '(defaults)'}")
    print(f"  unit: {differ.config.unit}, ignore punctuation: {differ.config.ignore_punctuation}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down...")
        server.shutdown()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="word-diff HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--config", default=DEFAULT_CONFIG)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    serve(port=args.port, config_path=args.config)
