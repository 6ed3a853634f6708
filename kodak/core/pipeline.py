from __future__ import annotations

import logging
from typing import Iterable

from kodak.colour import BLACK
from kodak.coords import Location
from kodak.core.image import Image
from kodak.io.config import Step
from kodak.io.png import load_png

logger = logging.getLogger(__name__)


def _require(step: Step, *fields: str) -> None:
    missing = [f for f in fields if getattr(step, f) is None]
    if missing:
        raise ValueError(f"Step {step.op!r} needs: {', '.join(missing)}")


def _fill(image: Image, step: Step) -> Image:
    _require(step, "colour")
    return image.fill(step.colour)


def _fill_region(image: Image, step: Step) -> Image:
    _require(step, "region", "colour")
    return image.fill_region(step.region, step.colour)


def _crop(image: Image, step: Step) -> Image:
    _require(step, "region")
    return image.crop(step.region)


def _overlay(image: Image, step: Step) -> Image:
    if step.path is not None:
        other = load_png(step.path)
    else:
        _require(step, "size", "colour")
        other = Image.blank_with_colour(step.size, step.colour)
    return image.overlay(other, step.at or Location(0, 0))


def _expand(image: Image, step: Step) -> Image:
    _require(step, "amount")
    return image.expand(step.amount, step.colour or BLACK)


OPERATIONS = {
    'fill': _fill,
    'fill_region': _fill_region,
    'crop': _crop,
    'overlay': _overlay,
    'expand': _expand,
}


def apply_step(image: Image, step: Step) -> Image:
    try:
        op = OPERATIONS[step.op.lower()]
    except KeyError:
        raise ValueError(f"Unknown step: {step.op}") from None
    return op(image, step)


def run_steps(image: Image, steps: Iterable[Step]) -> Image:
    """Apply steps in order, each to the image produced by the previous one."""
    for i, step in enumerate(steps):
        image = apply_step(image, step)
        logger.debug("Step #%d %s -> %dx%d", i, step.op, image.width, image.height)
    return image
