"""Filter a noisy sine wave and print or log the result.

Output format (stdout):
  #SRC one_euro
  #CFG {...}
  #LOG timestamp, signal, noisy, filtered
  <rows>

With --out the rows go to a CSV file instead and only the summary is printed.
"""
import argparse
from dataclasses import asdict, replace
from pathlib import Path

from one_euro.utils.config import load_filter_config, build_filter, FilterConfig, DemoConfig
from one_euro.utils.logging import CsvLogger
from one_euro.utils.signals import noisy_sine, step_variance
from one_euro.utils.time_sync import Rate

FIELDS = ["timestamp", "signal", "noisy", "filtered"]
# Used when the config file is missing; same values as config/filter.yaml.
DEMO_FILTER = FilterConfig(frequency=120.0, min_cutoff=1.0, beta=1.0, derivate_cutoff=1.0)


def apply_overrides(fcfg: FilterConfig, dcfg: DemoConfig, args):
    fcfg = replace(
        fcfg,
        frequency=fcfg.frequency if args.frequency is None else args.frequency,
        min_cutoff=fcfg.min_cutoff if args.min_cutoff is None else args.min_cutoff,
        beta=fcfg.beta if args.beta is None else args.beta,
        derivate_cutoff=fcfg.derivate_cutoff if args.dcutoff is None else args.dcutoff,
    )
    dcfg = replace(
        dcfg,
        duration=dcfg.duration if args.duration is None else args.duration,
        noise=dcfg.noise if args.noise is None else args.noise,
        seed=dcfg.seed if args.seed is None else args.seed,
    )
    return fcfg, dcfg


def run(fcfg: FilterConfig, dcfg: DemoConfig, out=None, realtime=False, emit=print):
    """Run the demo; returns (noisy_step_var, filtered_step_var)."""
    f = build_filter(fcfg)
    ts, signal, noisy = noisy_sine(dcfg.duration, fcfg.frequency, dcfg.noise, dcfg.seed)

    log = CsvLogger(out, FIELDS) if out else None
    if log is None:
        emit("#SRC one_euro")
        emit(f"#CFG {asdict(fcfg)}")
        emit("#LOG " + ", ".join(FIELDS))

    rate = Rate(fcfg.frequency) if realtime else None
    filtered = []
    try:
        for t, s, n in zip(ts, signal, noisy):
            y = f.filter(float(n), float(t))
            filtered.append(y)
            if log is not None:
                log.write({"timestamp": t, "signal": s, "noisy": n, "filtered": y})
            else:
                emit(f"{t}, {s}, {n}, {y}")
            if rate is not None:
                rate.sleep()
    finally:
        if log is not None:
            log.close()

    return step_variance(noisy), step_variance(filtered)


def main(argv=None):
    ap = argparse.ArgumentParser()
    # Go up to project root (run this as a module from project root)
    root = Path(__file__).resolve().parents[3]
    ap.add_argument("--config", default=str(root / "config" / "filter.yaml"))
    ap.add_argument("--out", default=None, help="Write rows to this CSV instead of stdout.")
    ap.add_argument("--frequency", type=float, default=None)
    ap.add_argument("--min-cutoff", type=float, default=None)
    ap.add_argument("--beta", type=float, default=None)
    ap.add_argument("--dcutoff", type=float, default=None)
    ap.add_argument("--duration", type=float, default=None)
    ap.add_argument("--noise", type=float, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--realtime", action="store_true",
                    help="Pace the loop at the sampling frequency.")
    args = ap.parse_args(argv)

    if Path(args.config).exists():
        fcfg, dcfg = load_filter_config(args.config)
    else:
        fcfg, dcfg = DEMO_FILTER, DemoConfig()
        print(f"[demo] config {args.config} not found, using built-in demo settings {asdict(fcfg)}")
    fcfg, dcfg = apply_overrides(fcfg, dcfg, args)

    v_noisy, v_filt = run(fcfg, dcfg, out=args.out, realtime=args.realtime)
    if args.out:
        print(f"[demo] wrote {args.out}")
    print(f"[demo] step variance noisy={v_noisy:.6g} filtered={v_filt:.6g}")
    return 0


if __name__ == "__main__":
    main()
