import httpx
import pytest

from hrscore.clients.classifier import ClassifierClient
from hrscore.exceptions import ExternalServiceError
from hrscore.models.health import HealthProfile
from hrscore.scoring import ExternallyAssistedScoring, StatsCalculator, ZoneBasedScoring
from hrscore.services.workout_scoring import WorkoutScoringService
from helpers import make_samples


class StaticProfiles:
    def __init__(self, profile: HealthProfile):
        self.profile = profile
        self.requested: list[str] = []

    async def get_health_profile(self, user_id: str) -> HealthProfile:
        self.requested.append(user_id)
        return self.profile


class RecordingSink:
    def __init__(self):
        self.records = []

    async def store_stat_change(self, record) -> bool:
        self.records.append(record)
        return True


def unreachable_calculator() -> StatsCalculator:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    classifier = ClassifierClient("http://classifier.test", transport=httpx.MockTransport(handler))
    return StatsCalculator(ExternallyAssistedScoring(classifier))


async def test_scores_and_persists(profile):
    sink = RecordingSink()
    profiles = StaticProfiles(profile)
    service = WorkoutScoringService(profiles, StatsCalculator(ZoneBasedScoring()), sink=sink)

    change = await service.score_workout("u1", make_samples([(0, 110), (120, 110)]), workout_id="w1")

    assert change.stamina_delta == 8
    assert profiles.requested == ["u1"]
    assert len(sink.records) == 1
    assert sink.records[0].user_id == "u1"
    assert sink.records[0].workout_id == "w1"
    assert sink.records[0].stat_change == change


async def test_samples_are_sanitized_without_mutating_input(profile):
    samples = make_samples([(0, 110), (120, 110), (60, 190), (600, 190)])
    service = WorkoutScoringService(StaticProfiles(profile), StatsCalculator(ZoneBasedScoring()))

    change = await service.score_workout("u1", samples)

    # Only the first two samples survive; the zone 5 tail is discarded
    assert change.stamina_delta == 8
    assert change.strength_delta == 0
    assert len(samples) == 4


async def test_falls_back_when_classifier_unreachable(profile, mixed_workout):
    service = WorkoutScoringService(
        StaticProfiles(profile),
        unreachable_calculator(),
        fallback_calculator=StatsCalculator(ZoneBasedScoring()),
    )

    change = await service.score_workout("u1", mixed_workout)

    assert change.scoring_method == "zone_based"
    assert change.stamina_delta == 16


async def test_classifier_failure_without_fallback_propagates(profile, mixed_workout):
    sink = RecordingSink()
    service = WorkoutScoringService(StaticProfiles(profile), unreachable_calculator(), sink=sink)

    with pytest.raises(ExternalServiceError):
        await service.score_workout("u1", mixed_workout)
    assert sink.records == []
