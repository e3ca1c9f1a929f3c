"""Defaults for the hull builders, the animator and the random point generator."""
from dataclasses import dataclass
from typing import Tuple

# Rightward nudge that seeds the first sweep direction of Jarvis March.
JARVIS_NUDGE = 0.001

# Delay choices (ms) offered for stepping through an animation.
INTERVAL_CHOICES = (100, 300, 500, 700, 1000, 1500)


@dataclass(frozen=True)
class HullConfig:
    nudge: float = JARVIS_NUDGE
    strict: bool = False  # raise on degenerate input instead of returning a degenerate hull


@dataclass(frozen=True)
class AnimationConfig:
    interval_ms: int = 700
    figsize: Tuple[float, float] = (8, 8)
    repeat: bool = False
    # canvas the random points are drawn on, also the default axis extent
    canvas_width: int = 700
    canvas_height: int = 500


@dataclass(frozen=True)
class RandomPointsConfig:
    min_count: int = 8
    max_count: int = 18
    margin: int = 40
    width: int = 700
    height: int = 500
