from pathlib import Path

import pytest

from one_euro.utils.config import (
    DemoConfig, FilterConfig, build_filter, load_filter_config, load_yaml,
)
from one_euro.utils.errors import InvalidParameter

ROOT = Path(__file__).resolve().parents[1]


def test_shipped_config_loads():
    fcfg, dcfg = load_filter_config(str(ROOT / "config" / "filter.yaml"))
    assert fcfg.frequency == 120.0
    assert fcfg.beta == 1.0
    assert dcfg.duration == 10.0
    assert dcfg.seed is None


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_yaml(str(p)) == {}
    fcfg, dcfg = load_filter_config(str(p))
    assert fcfg == FilterConfig()
    assert dcfg == DemoConfig()


def test_partial_section(tmp_path):
    p = tmp_path / "f.yaml"
    p.write_text("filter:\n  min_cutoff: 0.5\n  strict: true\n")
    fcfg, _ = load_filter_config(str(p))
    assert fcfg.min_cutoff == 0.5
    assert fcfg.strict is True
    assert fcfg.frequency == 120.0


def test_unknown_key_rejected(tmp_path):
    p = tmp_path / "f.yaml"
    p.write_text("filter:\n  mincutoff: 0.5\n")
    with pytest.raises(InvalidParameter, match="mincutoff"):
        load_filter_config(str(p))


def test_build_filter_validates():
    f = build_filter(FilterConfig(frequency=60.0, beta=0.3, strict=True))
    assert f.frequency == 60.0
    assert f.beta == 0.3
    assert f.strict
    with pytest.raises(InvalidParameter):
        build_filter(FilterConfig(min_cutoff=0.0))
