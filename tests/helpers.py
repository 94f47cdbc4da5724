from datetime import datetime, timedelta, timezone

from hrscore.models.workout import HeartRateSample

START = datetime(2025, 7, 14, 15, 34, 0, tzinfo=timezone.utc)


def make_samples(points: list[tuple[float, float]], start: datetime = START) -> list[HeartRateSample]:
    """Build samples from (seconds offset, heart rate) pairs."""
    return [
        HeartRateSample(timestamp=start + timedelta(seconds=offset), heart_rate=hr)
        for offset, hr in points
    ]
