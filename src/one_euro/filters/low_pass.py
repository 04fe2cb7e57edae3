"""
Single-pole exponential smoother.

The first sample after construction is passed through unchanged (cold start);
every later sample is blended with the previous output:

    s_k = alpha * x_k + (1 - alpha) * s_{k-1}

alpha is kept in (0.0, 1.0]. Setting it outside that range raises
InvalidParameter, it is never clamped. filter_with_alpha(..., check=False)
is the one way to store an unvalidated alpha.
"""
from one_euro.utils.errors import InvalidParameter


def check_alpha(alpha: float) -> float:
    alpha = float(alpha)
    if not 0.0 < alpha <= 1.0:
        raise InvalidParameter(f"alpha should be in (0.0, 1.0], got {alpha}")
    return alpha


class LowPassFilter:
    def __init__(self, alpha: float, initial_value: float = 0.0):
        self._alpha = check_alpha(alpha)
        self._raw = float(initial_value)
        self.last_filtered_value = float(initial_value)
        self._initialized = False

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._alpha = check_alpha(value)

    def set_alpha(self, alpha: float) -> None:
        self.alpha = alpha

    def filter(self, value: float) -> float:
        if self._initialized:
            result = self._alpha * value + (1.0 - self._alpha) * self.last_filtered_value
        else:
            result = value
            self._initialized = True
        self._raw = value
        self.last_filtered_value = result
        return result

    def filter_with_alpha(self, value: float, alpha: float, check: bool = True) -> float:
        """
        Set alpha, then filter. With check=False alpha is stored as given,
        nan, 0 or out of (0.0, 1.0] included, and whatever it produces flows
        into the output. OneEuroFilter uses that outside strict mode.
        """
        if check:
            self.set_alpha(alpha)
        else:
            self._alpha = float(alpha)
        return self.filter(value)

    def predict(self, value: float, alpha: float) -> float:
        """Result filter_with_alpha(value, alpha) would give, without changing state."""
        if not self._initialized:
            return value
        return alpha * value + (1.0 - alpha) * self.last_filtered_value

    def has_last_raw_value(self) -> bool:
        return self._initialized

    def last_raw_value(self) -> float:
        # Meaningless until has_last_raw_value() is True (holds initial_value).
        return self._raw

    def __repr__(self):
        return f"LowPassFilter(alpha={self._alpha!r}, last={self.last_filtered_value!r})"
