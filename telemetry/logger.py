from __future__ import annotations

import json
import os
import threading
import time
from typing import Any, Dict, Optional, TextIO


class TelemetryLogger:
    """Structured JSONL logger for rover command telemetry.

    Thread-safe, append-only logging of dict records, one JSON object per
    line. A single logger may be shared by several rovers.
    """

    def __init__(self, path: str, timestamps: bool = True) -> None:
        self.path = path
        self.timestamps = timestamps
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")
        self.records_written = 0

    @property
    def closed(self) -> bool:
        return self._fp is None

    def log_step(self, record: Dict[str, Any]) -> None:
        """Append a single telemetry record to the JSONL file."""
        if self.timestamps and "t" not in record:
            record = {"t": time.time(), **record}
        line = json.dumps(record, separators=(",", ":"))
        with self._lock:
            if self._fp is None:
                return
            self._fp.write(line + "\n")
            self._fp.flush()
            self.records_written += 1

    def close(self) -> None:
        with self._lock:
            if self._fp is not None:
                self._fp.close()
                self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
