# util/timing.py
import time
from contextlib import contextmanager
from typing import Any, Iterator
import logging


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[dict[str, Any]]:
    """
    Usage:
      with timed(logger, "listing.namespaces", account=account_id) as fields:
          ...
          fields["count"] = len(items)
    Emits one line on exit:
      INFO    "<name>.done ms=<int> key=val ..." on success
      WARNING "<name>.failed ms=<int> err=<type> key=val ..." when the block raises
    Keys added to the yielded dict are appended to the line.
    """
    fields: dict[str, Any] = dict(kv)
    t0 = time.perf_counter()
    try:
        yield fields
    except Exception as e:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in fields.items())
        logger.warning("%s.failed ms=%d err=%s%s", name, dt_ms, type(e).__name__, suffix)
        raise
    dt_ms = int((time.perf_counter() - t0) * 1000)
    suffix = "".join(f" {k}={v}" for k, v in fields.items())
    logger.info("%s.done ms=%d%s", name, dt_ms, suffix)
