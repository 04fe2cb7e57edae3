from typing import Optional, Tuple
import numpy as np

def noisy_sine(duration: float, frequency: float, noise: float = 0.2,
               seed: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample sin(t) at `frequency` Hz over [0, duration) and add uniform noise
    in [-noise/2, noise/2). Returns (timestamps, signal, noisy).
    """
    rng = np.random.default_rng(seed)
    n = int(np.ceil(duration * frequency))
    t = np.arange(n) / frequency
    signal = np.sin(t)
    noisy = signal + (rng.random(n) - 0.5) * noise
    return t, signal, noisy

def step_variance(values) -> float:
    """Variance of sample-to-sample differences."""
    v = np.asarray(values, dtype=float)
    if v.size < 2:
        return 0.0
    return float(np.var(np.diff(v)))
