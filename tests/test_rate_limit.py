"""Unit tests for app.services.rate_limit.LoginRateLimiter."""

import unittest

from app.core.errors import RateLimitExceededError
from app.services.rate_limit import LoginRateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestLoginRateLimiter(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.limiter = LoginRateLimiter(max_attempts=5, window_sec=900, clock=self.clock)

    def test_allows_up_to_limit(self) -> None:
        for _ in range(5):
            self.limiter.hit("10.0.0.1")

    def test_sixth_hit_in_window_is_rejected(self) -> None:
        for _ in range(5):
            self.limiter.hit("10.0.0.1")
        with self.assertRaises(RateLimitExceededError) as ctx:
            self.limiter.hit("10.0.0.1")
        self.assertIn("Too many login attempts", ctx.exception.message)
        self.assertEqual(ctx.exception.status_code, 403)

    def test_keys_are_independent(self) -> None:
        for _ in range(5):
            self.limiter.hit("10.0.0.1")
        self.limiter.hit("10.0.0.2")

    def test_window_expiry_resets_count(self) -> None:
        for _ in range(5):
            self.limiter.hit("10.0.0.1")
        self.clock.now += 900
        self.limiter.hit("10.0.0.1")

    def test_reset(self) -> None:
        for _ in range(5):
            self.limiter.hit("10.0.0.1")
        self.limiter.reset()
        self.limiter.hit("10.0.0.1")


if __name__ == "__main__":
    unittest.main()
