# drawgraph/config.py

import logging
from dataclasses import dataclass, field
from typing import Optional

from drawgraph.model.drawable.drawable import Color


@dataclass
class CanvasConfig:
    width: int = 640
    height: int = 480
    background: Color = (255, 255, 255)  # White
    thickness: int = 2  # fallback when a drawable's style has none
    font_scale: float = 0.5


@dataclass
class DrawGraphConfig:
    log_level: int = logging.INFO
    log_file: Optional[str] = None
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
