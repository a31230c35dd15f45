import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1000, ge=1)


# ----------------- HEURISTICS ---------------------


class ZeroHeuristicModel(BaseModel):
    """Plain Dijkstra ordering."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["zero"] = "zero"


class AmphipodHeuristicModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["amphipod"] = "amphipod"


HeuristicUnion = Annotated[
    ZeroHeuristicModel | AmphipodHeuristicModel,
    Field(discriminator="kind"),
]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: HeuristicUnion = Field(default_factory=AmphipodHeuristicModel)


# ----------------- PUZZLES ---------------------


class PuzzleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    year: int = Field(ge=2015)
    day: int = Field(ge=1, le=25)
    input_path: str | None = None  # defaults to "<year>_<day>.txt"
    parts: tuple[int, ...] = (1, 2)

    @field_validator("input_path")
    @classmethod
    def _expand(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return os.path.expandvars(os.path.expanduser(v))

    @field_validator("parts")
    @classmethod
    def _known_parts(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v:
            raise ValueError("parts must not be empty")
        bad = [p for p in v if p not in (1, 2)]
        if bad:
            raise ValueError(f"parts must be 1 or 2, got {bad}")
        return tuple(sorted(set(v)))

    @property
    def resolved_input(self) -> str:
        return self.input_path or f"{self.year}_{self.day}.txt"


# ------------------------------------------------------------------


class RunModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    puzzle: PuzzleModel
    search: SearchModel = SearchModel()
    log: LogModel = LogModel()
