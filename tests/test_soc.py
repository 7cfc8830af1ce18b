import pytest

from socinfo.errors import CommandIOError, ParseError, ParseIntError
from socinfo.executor import CannedExecutor
from socinfo.soc import (
    SYSCTL_ARGS,
    SYSCTL_PATH,
    SYSTEM_PROFILER_ARGS,
    SYSTEM_PROFILER_PATH,
    SocInfo,
    get_soc_info,
)
from socinfo.soc_profiles import Chip


def test_get_soc_info_merges_cpu_gpu_and_specs(m1_pro_executor):
    soc_info = get_soc_info(m1_pro_executor)

    assert soc_info == SocInfo(
        cpu_brand_name="Apple M1 Pro",
        num_cpu_cores=10,
        num_gpu_cores=16,
        num_performance_cores=8,
        num_efficiency_cores=2,
        chip=Chip.M1_PRO,
        cpu_max_power=30,
        gpu_max_power=30,
        cpu_max_bw=200,
        gpu_max_bw=200,
    )


def test_get_soc_info_invokes_both_programs_in_order(m1_pro_executor):
    get_soc_info(m1_pro_executor)
    assert m1_pro_executor.calls == [
        (SYSCTL_PATH, SYSCTL_ARGS),
        (SYSTEM_PROFILER_PATH, SYSTEM_PROFILER_ARGS),
    ]
    assert SYSCTL_ARGS[0] == "-n"


def test_get_soc_info_is_repeatable(m1_pro_executor):
    assert get_soc_info(m1_pro_executor) == get_soc_info(m1_pro_executor)


def test_get_soc_info_result_is_immutable(m1_pro_executor):
    soc_info = get_soc_info(m1_pro_executor)
    with pytest.raises(AttributeError):
        soc_info.num_cpu_cores = 1


def test_get_soc_info_unmodeled_chip_has_no_figures():
    executor = CannedExecutor(
        {
            SYSCTL_PATH: b"Apple M3 Max\n16\n12\n4\n",
            SYSTEM_PROFILER_PATH: b"      Total Number of Cores: 40\n",
        }
    )
    soc_info = get_soc_info(executor)

    assert soc_info.chip is Chip.M3_MAX
    assert soc_info.num_gpu_cores == 40
    assert soc_info.cpu_max_power is None
    assert soc_info.gpu_max_power is None
    assert soc_info.cpu_max_bw is None
    assert soc_info.gpu_max_bw is None


def test_get_soc_info_cpu_failure_skips_gpu_probe():
    executor = CannedExecutor(
        {SYSCTL_PATH: b"Apple M2\n", SYSTEM_PROFILER_PATH: b"Total Number of Cores: 10\n"}
    )
    with pytest.raises(ParseIntError):
        get_soc_info(executor)
    assert [program for program, _ in executor.calls] == [SYSCTL_PATH]


def test_get_soc_info_gpu_parse_failure_propagates():
    executor = CannedExecutor(
        {SYSCTL_PATH: b"Apple M2\n8\n4\n4\n", SYSTEM_PROFILER_PATH: b"Graphics/Displays:\n"}
    )
    with pytest.raises(ParseError):
        get_soc_info(executor)


def test_get_soc_info_missing_program_is_io_error():
    executor = CannedExecutor({SYSCTL_PATH: b"Apple M2\n8\n4\n4\n"})
    with pytest.raises(CommandIOError):
        get_soc_info(executor)


def test_soc_info_to_dict_uses_chip_label(m1_pro_executor):
    data = get_soc_info(m1_pro_executor).to_dict()
    assert data["chip"] == "Apple M1 Pro"
    assert data["num_gpu_cores"] == 16
    assert data["cpu_brand_name"] == "Apple M1 Pro"
