"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

Smoothing = Literal["forward", "symmetric"]
OutputFormat = Literal["plain", "terminal", "json"]

SMOOTHING_MODES: Tuple[str, ...] = ("forward", "symmetric")
OUTPUT_FORMATS: Tuple[str, ...] = ("plain", "terminal", "json")


@dataclass
class RenderConfig:
    # forward: only BOTTOM runs are joined; symmetric: TOP runs as well
    smoothing: Smoothing = "forward"


@dataclass
class OutputConfig:
    format: OutputFormat = "plain"
    show_summary: bool = True


@dataclass
class PicomapConfig:
    version: str = "1.0"
    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
