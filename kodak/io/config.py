from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from kodak.colour import BLACK, WHITE, Colour
from kodak.coords import Dimension, Location, Region

_NAMED_COLOURS = {"black": BLACK, "white": WHITE}


@dataclass(frozen=True)
class Step:
    op: str
    region: Optional[Region] = None
    colour: Optional[Colour] = None
    at: Optional[Location] = None
    size: Optional[Dimension] = None
    path: Optional[str] = None       # overlay source PNG, instead of size + colour
    amount: Optional[int] = None     # border width for "expand"


@dataclass(frozen=True)
class PipelineConfig:
    input: str
    output: str
    steps: tuple[Step, ...] = ()


def parse_colour(value) -> Colour:
    if isinstance(value, str):
        try:
            return _NAMED_COLOURS[value.lower()]
        except KeyError:
            raise ValueError(f"Unknown colour name: {value!r}") from None
    return Colour.from_bytes([int(v) for v in value])


def _location(data: dict) -> Location:
    return Location(int(data["x"]), int(data["y"]))


def _dimension(data: dict) -> Dimension:
    return Dimension(int(data["width"]), int(data["height"]))


def parse_step(data: dict, base_dir: Path | None = None) -> Step:
    op = data["op"]
    if not isinstance(op, str):
        raise TypeError(f"op must be a string, got {op!r}")
    region = None
    if "region" in data:
        region = Region(_location(data["region"]), _dimension(data["region"]))
    path = data.get("path")
    if path is not None and base_dir is not None:
        path = str(base_dir / path)
    return Step(
        op=op,
        region=region,
        colour=parse_colour(data["colour"]) if "colour" in data else None,
        at=_location(data["at"]) if "at" in data else None,
        size=_dimension(data["size"]) if "size" in data else None,
        path=path,
        amount=int(data["amount"]) if "amount" in data else None,
    )


def parse_steps(items: list, base_dir: Path | None = None) -> tuple[Step, ...]:
    steps = []
    for i, item in enumerate(items):
        try:
            steps.append(parse_step(item, base_dir))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed step #{i}: {exc!r}") from exc
    return tuple(steps)


def load_config(path: str | Path) -> PipelineConfig:
    """Load a pipeline JSON file; relative paths resolve against its folder."""
    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    base = p.parent
    return PipelineConfig(
        input=str(base / data["input"]),
        output=str(base / data["output"]),
        steps=parse_steps(data.get("steps", []), base),
    )
