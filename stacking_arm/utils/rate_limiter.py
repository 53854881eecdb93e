"""Rate limiter utility for controlling the animation frequency."""

from loop_rate_limiters import RateLimiter as LoopRateLimiter


class RateLimiter:
    """Wrapper around loop_rate_limiters.RateLimiter."""

    def __init__(self, frequency: float = 60.0, warn: bool = False):
        if frequency <= 0:
            raise ValueError(f"frequency must be positive, got {frequency}")
        self.rate_limiter = LoopRateLimiter(frequency=frequency, warn=warn)
        self.frequency = frequency
        self.dt = 1.0 / frequency

    def sleep(self):
        self.rate_limiter.sleep()
