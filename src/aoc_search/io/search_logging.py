# io/search_logging.py
import json
import logging
import sys

from aoc_search.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def default_json_logger(name="aoc_search", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for one or more A* runs.
    Per-state records (expand/relax/stale) only appear with debug=True and are
    sampled once every `sample_every` expansions.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or default_json_logger(level=level)
        self._expanded = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _sampled(self) -> bool:
        return self.debug and (self._expanded % self.sample_every) == 0

    # search lifecycle

    def run_start(self, *, start, h0, qsize):
        self._expanded = 0
        self._emit("INFO", "search_start", state=type(start).__name__, h0=h0, qsize=qsize)

    def run_end(self, *, outcome: str, **extra):
        self._emit("INFO", "search_end", outcome=outcome, **extra)

    def expand(self, state, *, g, f, qsize, expanded):
        self._expanded = expanded
        if self._sampled():
            self._emit("DEBUG", "expand", g=g, f=f, qsize=qsize, expanded=expanded)

    def relax(self, state, *, old, new, qsize):
        if self._sampled():
            self._emit("DEBUG", "relax", old=old, new=new, qsize=qsize)

    def stale(self, state, *, cost, best):
        if self._sampled():
            self._emit("DEBUG", "stale", cost=cost, best=best)
