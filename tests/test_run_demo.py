import csv

import pytest

from one_euro.apps.run_demo import main, run
from one_euro.filters.one_euro import OneEuroFilter
from one_euro.utils.config import DemoConfig, FilterConfig


def test_run_emits_header_and_rows():
    lines = []
    v_noisy, v_filt = run(FilterConfig(frequency=50.0, beta=1.0),
                          DemoConfig(duration=2.0, seed=1), emit=lines.append)
    assert lines[0] == "#SRC one_euro"
    assert lines[1].startswith("#CFG ")
    assert lines[2] == "#LOG timestamp, signal, noisy, filtered"
    assert len(lines) == 3 + 100
    assert v_filt < v_noisy


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "demo.csv"
    rc = main(["--config", str(tmp_path / "missing.yaml"), "--out", str(out),
               "--duration", "1", "--frequency", "60", "--beta", "0.5", "--seed", "5"])
    assert rc == 0
    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 60
    assert set(rows[0]) == {"timestamp", "signal", "noisy", "filtered"}
    printed = capsys.readouterr().out
    assert "not found" in printed
    assert "step variance" in printed


def test_missing_config_falls_back_to_adaptive_demo(tmp_path, capsys):
    out = tmp_path / "demo.csv"
    main(["--config", str(tmp_path / "missing.yaml"), "--out", str(out),
          "--duration", "1", "--frequency", "60", "--seed", "9"])
    assert "'beta': 1.0" in capsys.readouterr().out
    ref = OneEuroFilter(60.0, min_cutoff=1.0, beta=1.0, derivate_cutoff=1.0)
    with open(out, newline="") as f:
        for row in csv.DictReader(f):
            expected = ref.filter(float(row["noisy"]), float(row["timestamp"]))
            assert float(row["filtered"]) == pytest.approx(expected, abs=1e-9)
