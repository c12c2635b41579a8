from __future__ import annotations

"""
Simple TCP REPL server for minilisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(def x 1) x"}
- Response: {"ok": true, "result": <printed value>} or {"ok": false, "error": <message>}

A single Interpreter is kept alive so that definitions persist across
evaluations; client threads take turns on it behind a lock.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from minilisp.errors import MiniLispError
from minilisp.interpreter import Interpreter
from minilisp.printer import to_string

logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 8765


class ReplServer:
    def __init__(self, host: str = HOST, port: int = PORT, interp: Interpreter | None = None):
        self.host = host
        self.port = port
        self.interp = interp if interp is not None else Interpreter()
        self._lock = threading.Lock()

    def handle_request(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": f"Invalid request: code must be a string, not {type(code).__name__}"}
        try:
            with self._lock:
                result = self.interp.eval(code, name="<repl>")
        except MiniLispError as ex:
            return {"ok": False, "error": str(ex)}
        except Exception as ex:
            # host primitives may raise anything; the client still gets a reply
            logger.exception("evaluation failed")
            return {"ok": False, "error": f"{type(ex).__name__}: {ex}"}
        return {"ok": True, "result": to_string(result)}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected from %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()
