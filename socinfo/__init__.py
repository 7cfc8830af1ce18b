from .errors import (
    CommandIOError,
    ParseError,
    ParseIntError,
    SocInfoError,
    Utf8ConversionError,
)
from .soc import SocInfo, get_soc_info
from .soc_profiles import Chip, ChipSpecs, classify_chip, get_chip_specs

__version__ = "0.1.0"

__all__ = [
    "Chip",
    "ChipSpecs",
    "CommandIOError",
    "ParseError",
    "ParseIntError",
    "SocInfo",
    "SocInfoError",
    "Utf8ConversionError",
    "classify_chip",
    "get_chip_specs",
    "get_soc_info",
]
