from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Chip(Enum):
    M1 = "Apple M1"
    M1_PRO = "Apple M1 Pro"
    M1_MAX = "Apple M1 Max"
    M1_ULTRA = "Apple M1 Ultra"
    M2 = "Apple M2"
    M2_PRO = "Apple M2 Pro"
    M2_MAX = "Apple M2 Max"
    M2_ULTRA = "Apple M2 Ultra"
    M3 = "Apple M3"
    M3_PRO = "Apple M3 Pro"
    M3_MAX = "Apple M3 Max"
    M3_ULTRA = "Apple M3 Ultra"
    M4 = "Apple M4"
    M4_PRO = "Apple M4 Pro"
    M4_MAX = "Apple M4 Max"
    M4_ULTRA = "Apple M4 Ultra"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ChipSpecs:
    cpu_max_power: int = 0
    gpu_max_power: int = 0
    cpu_max_bw: int = 0
    gpu_max_bw: int = 0


# Tiered labels must come before the bare generation label, otherwise
# "Apple M1 Pro" would match "M1" first.
CHIP_LABELS = (
    ("M1 Ultra", Chip.M1_ULTRA),
    ("M1 Max", Chip.M1_MAX),
    ("M1 Pro", Chip.M1_PRO),
    ("M1", Chip.M1),
    ("M2 Ultra", Chip.M2_ULTRA),
    ("M2 Max", Chip.M2_MAX),
    ("M2 Pro", Chip.M2_PRO),
    ("M2", Chip.M2),
    ("M3 Ultra", Chip.M3_ULTRA),
    ("M3 Max", Chip.M3_MAX),
    ("M3 Pro", Chip.M3_PRO),
    ("M3", Chip.M3),
    ("M4 Ultra", Chip.M4_ULTRA),
    ("M4 Max", Chip.M4_MAX),
    ("M4 Pro", Chip.M4_PRO),
    ("M4", Chip.M4),
)

UNMODELED_SPECS = ChipSpecs()

_MODELED_SPECS = {
    Chip.M1: ChipSpecs(cpu_max_power=20, gpu_max_power=20, cpu_max_bw=70, gpu_max_bw=70),
    Chip.M1_PRO: ChipSpecs(cpu_max_power=30, gpu_max_power=30, cpu_max_bw=200, gpu_max_bw=200),
    Chip.M1_MAX: ChipSpecs(cpu_max_power=30, gpu_max_power=60, cpu_max_bw=250, gpu_max_bw=400),
    Chip.M1_ULTRA: ChipSpecs(cpu_max_power=60, gpu_max_power=120, cpu_max_bw=500, gpu_max_bw=800),
    Chip.M2: ChipSpecs(cpu_max_power=25, gpu_max_power=15, cpu_max_bw=100, gpu_max_bw=100),
}

CHIP_SPECS = MappingProxyType(
    {chip: _MODELED_SPECS.get(chip, UNMODELED_SPECS) for chip in Chip}
)


def classify_chip(brand_name):
    for label, chip in CHIP_LABELS:
        if label in brand_name:
            return chip
    return Chip.UNKNOWN


def get_chip_specs(chip):
    return CHIP_SPECS[chip]
