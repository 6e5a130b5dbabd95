import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from geospatial.coordinate_models import EllipsoidModel  # noqa: E402


def dms(degrees, minutes=0, seconds=0.0):
    """Signed degrees-minutes-seconds to radians; the sign of `degrees` applies."""
    sign = -1.0 if degrees < 0 else 1.0
    return float(np.radians(sign * (abs(degrees) + minutes / 60.0 + seconds / 3600.0)))


@pytest.fixture
def int24():
    """International 1924 as used in DMA TM 8358.2 Table 2-11."""
    return EllipsoidModel(a=6378388.0, e2=0.006722670022, name="IN")


@pytest.fixture
def wgs84_dma():
    """WGS84 as used in DMA TM 8358.2 Table 3-7."""
    return EllipsoidModel(a=6378137.0, e2=0.006694379990, name="WE")
