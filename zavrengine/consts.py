"""Engine-wide constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


STANDARD_SCREEN_WIDTH = 1920
STANDARD_SCREEN_HEIGHT = 1080
BACKGROUND_COLOR = Color(255, 255, 255)
PROJECT_NAME = "engine"
USE_LOG_FILE = True
USE_OPEN_GL = False
SHOW_DEBUG_INFO = False
SHOW_FPS_COUNTER = False

PI = 3.14159265358979323846264338327950288
EPS = 0.000001

EPA_EPS = 0.0001

RAY_CAST_MAX_DISTANCE = 10000.0

THIN_FONT = "engine/fonts/Roboto-Thin.ttf"
MEDIUM_FONT = "engine/fonts/Roboto-Medium.ttf"

LARGEST_TIME_STEP = 1.0 / 15.0
TAP_DELAY = 0.2

# Control points of the easing curve, as (x, y) pairs.
BEZIER = ((0.8, 0.0), (0.2, 1.0))

NETWORK_VERSION = 3
NETWORK_TIMEOUT = 5
NETWORK_WORLD_UPDATE_RATE = 30
NETWORK_RELIABLE_RETRY_TIME = 1.0 / 20
NETWORK_MAX_CLIENTS = 64

WHITE_COLORS = (
    Color(137, 135, 222),  # blue
    Color(195, 155, 209),  # pink
    Color(201, 137, 137),  # red
    Color(116, 204, 135),  # green
    Color(201, 171, 137),  # orange
)

DARK_COLORS = (
    Color(16, 18, 69),  # blue
    Color(77, 0, 62),  # pink
    Color(99, 20, 20),  # red
    Color(12, 46, 9),  # green
    Color(97, 70, 51),  # orange
)