import numpy as np
import pytest

from rtriangulate.core.config import TriangulationConfig
from rtriangulate.core.points import Point
from rtriangulate.core.triangulation import triangulate


def test_defaults():
    cfg = TriangulationConfig()
    assert cfg.dtype is np.float64
    assert cfg.check_sorted is False
    assert cfg.log_summary is True


@pytest.mark.parametrize("bits,dtype", [(32, np.float32), (64, np.float64)])
def test_for_precision(bits, dtype):
    assert TriangulationConfig.for_precision(bits).dtype is dtype


def test_for_precision_overrides():
    cfg = TriangulationConfig.for_precision(32, check_sorted=True)
    assert cfg.check_sorted is True


@pytest.mark.parametrize("bits", [8, 16, 128])
def test_for_precision_unknown(bits):
    with pytest.raises(ValueError):
        TriangulationConfig.for_precision(bits)


def test_dtype_normalized():
    assert TriangulationConfig(dtype='float32').dtype is np.float32
    assert TriangulationConfig(dtype=float).dtype is np.float64
    with pytest.raises(ValueError):
        TriangulationConfig(dtype=np.int64)


def test_dtype_keyword_overrides_config():
    points = [Point(10.0, 10.0), Point(15.0, 25.0), Point(25.0, 15.0)]
    cfg = TriangulationConfig.for_precision(32)
    assert triangulate(points, cfg) == triangulate(points, cfg, dtype=np.float64) == [(0, 1, 2)]
