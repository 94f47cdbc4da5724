import pytest

from hrscore.analysis.zones import ZoneModel
from hrscore.models.health import HealthProfile
from hrscore.models.workout import HeartRateSample
from helpers import make_samples


@pytest.fixture
def profile() -> HealthProfile:
    """Resting 60, max 200: zone floors at 144/158/172/186 bpm."""
    return HealthProfile(age=30, resting_heart_rate=60, max_heart_rate=200)


@pytest.fixture
def zones(profile: HealthProfile) -> ZoneModel:
    return ZoneModel.from_profile(profile)


@pytest.fixture
def mixed_workout() -> list[HeartRateSample]:
    """Four samples visiting zones 1, 2, 3 and 5 under the default profile."""
    return make_samples([(0, 100), (60, 150), (180, 160), (240, 190)])
