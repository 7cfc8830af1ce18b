import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from socinfo.executor import CannedExecutor  # noqa: E402
from socinfo.soc import SYSCTL_PATH, SYSTEM_PROFILER_PATH  # noqa: E402

M1_PRO_SYSCTL = b"Apple M1 Pro\n10\n8\n2\n"

M1_PRO_DISPLAYS = b"""Graphics/Displays:

    Apple M1 Pro:

      Chipset Model: Apple M1 Pro
      Type: GPU
      Bus: Built-In
      Total Number of Cores: 16
      Vendor: Apple (0x106b)
      Metal Support: Metal 3
"""


@pytest.fixture
def m1_pro_executor():
    return CannedExecutor(
        {SYSCTL_PATH: M1_PRO_SYSCTL, SYSTEM_PROFILER_PATH: M1_PRO_DISPLAYS}
    )
