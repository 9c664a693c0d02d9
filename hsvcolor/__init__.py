"""
hsvcolor

HSV color value type with color theory derivations: complementary,
split-complementary, triadic, tetradic, monochromatic and analogous schemes.
"""

from loguru import logger

from .color import Color, InvalidArgumentError, hue_remainder
from .config import config as _config
from .harmony import HARMONY_SCHEMES, generate_harmonies, get_hue_separation

__version__ = "1.0.0"

__all__ = [
    "Color",
    "InvalidArgumentError",
    "HARMONY_SCHEMES",
    "generate_harmonies",
    "get_hue_separation",
    "hue_remainder",
]

logger.disable(__name__)

# Sink installed when HSVCOLOR_LOG_ENABLED=1, else None
log_sink_id = None

if _config.LOG_ENABLED:
    from .utils.logging import configure_logging
    log_sink_id = configure_logging()
