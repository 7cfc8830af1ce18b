import logging
from dataclasses import asdict, dataclass
from typing import Optional

from .executor import SubprocessExecutor
from .parsers import parse_cpu_info, parse_gpu_info
from .soc_profiles import Chip, classify_chip, get_chip_specs

logger = logging.getLogger(__name__)

SYSCTL_PATH = "/usr/sbin/sysctl"
SYSCTL_ARGS = (
    # value only, no variable names
    "-n",
    "machdep.cpu.brand_string",
    "machdep.cpu.core_count",
    "hw.perflevel0.logicalcpu",
    "hw.perflevel1.logicalcpu",
)

SYSTEM_PROFILER_PATH = "/usr/sbin/system_profiler"
SYSTEM_PROFILER_ARGS = ("-detailLevel", "basic", "SPDisplaysDataType")


@dataclass(frozen=True)
class SocInfo:
    """Hardware summary of the host SoC.

    The power (W) and bandwidth (GB/s) figures are nominal values from a
    static table and are None for chips without a published entry.
    """

    cpu_brand_name: str
    num_cpu_cores: int
    num_gpu_cores: int
    num_performance_cores: int
    num_efficiency_cores: int
    chip: Chip = Chip.UNKNOWN
    cpu_max_power: Optional[int] = None
    gpu_max_power: Optional[int] = None
    cpu_max_bw: Optional[int] = None
    gpu_max_bw: Optional[int] = None

    def to_dict(self):
        data = asdict(self)
        data["chip"] = self.chip.value
        return data


def _modeled(value):
    return value if value > 0 else None


def get_cpu_info(executor):
    output = executor.run(SYSCTL_PATH, SYSCTL_ARGS)
    return parse_cpu_info(output.stdout)


def get_gpu_cores(executor):
    output = executor.run(SYSTEM_PROFILER_PATH, SYSTEM_PROFILER_ARGS)
    return parse_gpu_info(output.stdout)


def get_soc_info(executor=None):
    if executor is None:
        executor = SubprocessExecutor()

    cpu_info = get_cpu_info(executor)
    num_gpu_cores = get_gpu_cores(executor)

    chip = classify_chip(cpu_info.brand_name)
    specs = get_chip_specs(chip)
    logger.debug("classified %r as %s", cpu_info.brand_name, chip.name)

    return SocInfo(
        cpu_brand_name=cpu_info.brand_name,
        num_cpu_cores=cpu_info.num_cores,
        num_gpu_cores=num_gpu_cores,
        num_performance_cores=cpu_info.num_performance_cores,
        num_efficiency_cores=cpu_info.num_efficiency_cores,
        chip=chip,
        cpu_max_power=_modeled(specs.cpu_max_power),
        gpu_max_power=_modeled(specs.gpu_max_power),
        cpu_max_bw=_modeled(specs.cpu_max_bw),
        gpu_max_bw=_modeled(specs.gpu_max_bw),
    )
