from jobboard.core.rate_limiter import InMemoryRateLimiter


def test_allows_until_limit_then_blocks():
    limiter = InMemoryRateLimiter()
    assert limiter.allow("k", limit=2, window_seconds=60) == (True, 0)
    assert limiter.allow("k", limit=2, window_seconds=60) == (True, 0)
    allowed, retry_after = limiter.allow("k", limit=2, window_seconds=60)
    assert allowed is False
    assert 1 <= retry_after <= 60


def test_keys_are_independent_and_reset_clears():
    limiter = InMemoryRateLimiter()
    limiter.allow("a", limit=1, window_seconds=60)
    assert limiter.allow("a", limit=1, window_seconds=60)[0] is False
    assert limiter.allow("b", limit=1, window_seconds=60)[0] is True
    limiter.reset()
    assert limiter.allow("a", limit=1, window_seconds=60)[0] is True


def test_window_expiry(monkeypatch):
    import jobboard.core.rate_limiter as rl

    now = [1000.0]
    monkeypatch.setattr(rl.time, "time", lambda: now[0])
    limiter = InMemoryRateLimiter()
    limiter.allow("k", limit=1, window_seconds=60)
    assert limiter.allow("k", limit=1, window_seconds=60)[0] is False
    now[0] += 60
    assert limiter.allow("k", limit=1, window_seconds=60)[0] is True


def test_expired_keys_are_dropped(monkeypatch):
    import jobboard.core.rate_limiter as rl

    now = [1000.0]
    monkeypatch.setattr(rl.time, "time", lambda: now[0])
    limiter = InMemoryRateLimiter(prune_interval_seconds=60)
    for i in range(50):
        limiter.allow(f"10.0.0.{i}:apply", limit=5, window_seconds=60)
    assert len(limiter) == 50

    now[0] += 61
    limiter.allow("10.0.0.99:apply", limit=5, window_seconds=60)
    assert len(limiter) == 1
