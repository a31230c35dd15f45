# aoc_search/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from aoc_search.config.models import RunModel
from aoc_search.io.search_logging import SearchLogging
from aoc_search.runtime.registries import Answers, make_heuristic, solve_puzzle
from aoc_search.search.hooks import NoopHooks, SearchHooks
from aoc_search.search.state import Heuristic


@dataclass
class App:
    model: RunModel
    heuristic: Heuristic
    hooks: SearchHooks

    def read_input(self) -> str:
        return Path(self.model.puzzle.resolved_input).read_text()

    def solve(self, text: str | None = None) -> Answers:
        p = self.model.puzzle
        return solve_puzzle(
            p.year,
            p.day,
            self.read_input() if text is None else text,
            p.parts,
            heuristic=self.heuristic,
            hooks=self.hooks,
        )


def build(cfg: RunModel | Mapping, *, use_logging: bool = True) -> App:
    model = cfg if isinstance(cfg, RunModel) else RunModel.model_validate(cfg)
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    return App(model=model, heuristic=make_heuristic(model.search.heuristic), hooks=hooks)
