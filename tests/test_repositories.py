from hrscore.database.health_profile_repository import HealthProfileRepository
from hrscore.database.stat_change_repository import StatChangeRepository
from hrscore.models.health import Gender, HealthProfile, StoredZoneBoundaries
from hrscore.models.stats import StatChange, StatChangeRecord
from fakes import FakeDatabase


async def test_missing_profile_returns_defaults():
    repo = HealthProfileRepository(FakeDatabase())

    profile = await repo.get_health_profile("nobody")

    assert profile.age == 30
    assert profile.gender == Gender.OTHER
    assert profile.resting_heart_rate == 60
    assert profile.max_heart_rate is None
    assert profile.stored_zone_boundaries is None


async def test_profile_document_is_parsed():
    db = FakeDatabase()
    db["health_profiles"].docs.append({
        "user_id": "u1",
        "age": 41,
        "gender": "F",
        "resting_heart_rate": None,
        "max_heart_rate": 185,
        "zone1_max": 130, "zone2_max": 140, "zone3_max": 150, "zone4_max": 165, "zone5_max": 185,
    })
    repo = HealthProfileRepository(db)

    profile = await repo.get_health_profile("u1")

    assert profile.age == 41
    assert profile.gender == Gender.FEMALE
    assert profile.resting_heart_rate == 60
    assert profile.stored_zone_boundaries == StoredZoneBoundaries(
        zone1_max=130, zone2_max=140, zone3_max=150, zone4_max=165, zone5_max=185
    )


async def test_partial_zone_columns_are_ignored():
    db = FakeDatabase()
    db["health_profiles"].docs.append({"user_id": "u1", "age": 25, "zone1_max": 130})
    profile = await HealthProfileRepository(db).get_health_profile("u1")
    assert profile.stored_zone_boundaries is None


async def test_save_profile_stores_computed_zones():
    db = FakeDatabase()
    repo = HealthProfileRepository(db)

    saved = await repo.save_health_profile("u1", HealthProfile(resting_heart_rate=60, max_heart_rate=200))

    assert saved.stored_zone_boundaries.as_tuple() == (143, 157, 171, 185, 200)
    loaded = await repo.get_health_profile("u1")
    assert loaded == saved

    await repo.save_health_profile("u1", HealthProfile(age=40, resting_heart_rate=50, max_heart_rate=190))
    assert len(db["health_profiles"].docs) == 1
    assert (await repo.get_health_profile("u1")).age == 40


async def test_stat_changes_are_stored_and_listed():
    repo = StatChangeRepository(FakeDatabase())
    record = StatChangeRecord(
        user_id="u1", workout_id="w1", stat_change=StatChange(stamina_delta=8, strength_delta=2)
    )

    assert await repo.store_stat_change(record) is True

    records = await repo.get_stat_changes("u1")
    assert len(records) == 1
    assert records[0].workout_id == "w1"
    assert records[0].stat_change.total_points == 10
