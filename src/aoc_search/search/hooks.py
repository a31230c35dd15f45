# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, start, h0, qsize): ...
    def run_end(self, *, outcome, cost, expanded, stale, discovered, wall_ms): ...
    def expand(self, state, *, g, f, qsize, expanded): ...
    def relax(self, state, *, old, new, qsize): ...
    def stale(self, state, *, cost, best): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def relax(self, *_, **__):
        pass

    def stale(self, *_, **__):
        pass
