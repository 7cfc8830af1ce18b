import re
from collections import namedtuple

from .errors import ParseError, ParseIntError, Utf8ConversionError

GPU_CORES_LABEL = "Total Number of Cores"
GPU_CORES_SEPARATOR = ": "

# sysctl and system_profiler report core counts well inside 16 bits
MAX_CORE_COUNT = 0xFFFF

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")

CpuInfo = namedtuple(
    "CpuInfo",
    ["brand_name", "num_cores", "num_performance_cores", "num_efficiency_cores"],
)


def _decode(buffer):
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8ConversionError(e) from e


def _parse_uint(value):
    if not _UNSIGNED_PATTERN.fullmatch(value):
        raise ParseIntError(value)
    number = int(value)
    if number > MAX_CORE_COUNT:
        raise ParseIntError(value)
    return number


def _next_line(lines, text):
    try:
        return next(lines)
    except StopIteration:
        raise ParseError(text) from None


def parse_cpu_info(buffer):
    """Parse value-only sysctl output for brand string and core counts.

    Fields are strictly positional: brand, total cores, performance cores,
    efficiency cores. The counts are not checked against each other.
    """
    text = _decode(buffer)
    lines = iter(text.split("\n"))

    brand_name = _next_line(lines, text)
    if not brand_name:
        raise ParseError(text)

    num_cores = _parse_uint(_next_line(lines, text))
    num_performance_cores = _parse_uint(_next_line(lines, text))
    num_efficiency_cores = _parse_uint(_next_line(lines, text))
    return CpuInfo(brand_name, num_cores, num_performance_cores, num_efficiency_cores)


def parse_gpu_info(buffer):
    text = _decode(buffer)
    for line in text.splitlines():
        if line.lstrip().startswith(GPU_CORES_LABEL):
            return _parse_uint(line.split(GPU_CORES_SEPARATOR)[-1])
    raise ParseError(text)
