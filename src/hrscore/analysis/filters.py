import logging

from hrscore.models.workout import HeartRateSample

logger = logging.getLogger(__name__)


def filter_heart_rate_samples(samples: list[HeartRateSample]) -> int:
    """
    Drop the tail of a heart rate series from its first timestamp regression.

    The first sample whose timestamp is not strictly after its predecessor
    marks the rest of the stream as untrustworthy (device restart or resync),
    so everything from that sample on is removed. The list is truncated in place.

    Args:
        samples: Heart rate samples, nominally in ascending timestamp order

    Returns:
        Number of samples removed
    """
    if len(samples) <= 1:
        return 0

    for i in range(len(samples) - 1):
        if samples[i + 1].timestamp <= samples[i].timestamp:
            removed = len(samples) - (i + 1)
            logger.debug(
                f"Dropping {removed} HR samples from index {i + 1}: "
                f"{samples[i + 1].timestamp.isoformat()} <= {samples[i].timestamp.isoformat()}"
            )
            del samples[i + 1:]
            return removed

    return 0
