"""
1-Euro filter (Casiez et al., https://gery.casiez.net/1euro/).

Adaptive low-pass for noisy scalar streams:
- a derivative estimate is smoothed with a fixed cutoff (derivate_cutoff)
- the signal cutoff grows with speed: min_cutoff + beta * |dx|
- slow/noisy input gets heavy smoothing, fast motion gets little lag

Timestamps are optional. When two consecutive calls both carry one, the
sampling frequency is re-estimated from their difference; otherwise the last
known frequency is used.

Default mode keeps the historic behaviour for degenerate timing: a zero or
negative timestamp delta gives an inf/negative frequency and the resulting
inf/nan flows silently into the output. strict=True rejects it instead.
"""
import math
from typing import Optional

from one_euro.filters.low_pass import LowPassFilter, check_alpha
from one_euro.utils.errors import InvalidParameter


def _div(num: float, den: float) -> float:
    # IEEE-754 division: x/0 -> +-inf, 0/0 -> nan
    try:
        return num / den
    except ZeroDivisionError:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)


def compute_alpha(frequency: float, cutoff: float) -> float:
    te = _div(1.0, frequency)
    tau = _div(1.0, 2.0 * math.pi * cutoff)
    return _div(1.0, 1.0 + _div(tau, te))


def _check_positive(name: str, value: float) -> float:
    value = float(value)
    if not value > 0.0:
        raise InvalidParameter(f"{name} should be >0, got {value}")
    return value


class OneEuroFilter:
    """
    Args:
      frequency: initial sampling rate in Hz (>0)
      min_cutoff: cutoff in Hz when the signal is still (>0)
      beta: speed coefficient, no constraint
      derivate_cutoff: cutoff in Hz for the derivative filter (>0)
      strict: raise InvalidParameter on non-finite/non-positive frequency or
              out-of-range alpha instead of propagating inf/nan
    """
    def __init__(
        self,
        frequency: float,
        min_cutoff: float = 1.0,
        beta: float = 0.0,
        derivate_cutoff: float = 1.0,
        strict: bool = False,
    ):
        self.frequency = frequency
        self.min_cutoff = min_cutoff
        self.beta = beta
        self.derivate_cutoff = derivate_cutoff
        self._strict = bool(strict)

        self._x = LowPassFilter(compute_alpha(self._frequency, self._min_cutoff))
        self._dx = LowPassFilter(compute_alpha(self._frequency, self._derivate_cutoff))
        self._last_timestamp: Optional[float] = None

    # ---- Parameters

    @property
    def frequency(self) -> float:
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._frequency = _check_positive("frequency", value)

    @property
    def min_cutoff(self) -> float:
        return self._min_cutoff

    @min_cutoff.setter
    def min_cutoff(self, value: float) -> None:
        self._min_cutoff = _check_positive("min_cutoff", value)

    @property
    def beta(self) -> float:
        return self._beta

    @beta.setter
    def beta(self, value: float) -> None:
        self._beta = float(value)

    @property
    def derivate_cutoff(self) -> float:
        return self._derivate_cutoff

    @derivate_cutoff.setter
    def derivate_cutoff(self, value: float) -> None:
        self._derivate_cutoff = _check_positive("derivate_cutoff", value)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def last_timestamp(self) -> Optional[float]:
        return self._last_timestamp

    # ---- Filtering

    def filter(self, value: float, timestamp: Optional[float] = None) -> float:
        value = float(value)
        freq = self._frequency
        if self._last_timestamp is not None and timestamp is not None:
            freq = _div(1.0, timestamp - self._last_timestamp)

        # FIXME: cold-start derivative is 0.0; using the value itself is the other candidate
        if self._x.has_last_raw_value():
            dvalue = (value - self._x.last_raw_value()) * freq
        else:
            dvalue = 0.0
        a_d = compute_alpha(freq, self._derivate_cutoff)

        if self._strict:
            # validate everything before touching state
            if not (math.isfinite(freq) and freq > 0.0):
                raise InvalidParameter(
                    f"timestamp {timestamp} after {self._last_timestamp} gives frequency {freq}"
                )
            check_alpha(a_d)
            cutoff = self._min_cutoff + self._beta * abs(self._dx.predict(dvalue, a_d))
            check_alpha(compute_alpha(freq, cutoff))

        # bypasses the setter: degenerate frequencies propagate in lenient mode
        self._frequency = freq
        self._last_timestamp = timestamp

        edvalue = self._dx.filter_with_alpha(dvalue, a_d, check=self._strict)
        cutoff = self._min_cutoff + self._beta * abs(edvalue)
        return self._x.filter_with_alpha(value, compute_alpha(freq, cutoff), check=self._strict)

    __call__ = filter

    def __repr__(self):
        return (
            f"OneEuroFilter(frequency={self._frequency!r}, min_cutoff={self._min_cutoff!r}, "
            f"beta={self._beta!r}, derivate_cutoff={self._derivate_cutoff!r}, strict={self._strict!r})"
        )
