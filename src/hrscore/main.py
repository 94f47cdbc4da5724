import logging

from hrscore.clients.classifier.client import ClassifierClient
from hrscore.config import ScoringConfig, Settings
from hrscore.database.health_profile_repository import HealthProfileRepository
from hrscore.database.mongodb import DatabaseManager, get_database
from hrscore.database.stat_change_repository import StatChangeRepository
from hrscore.scoring import ExternallyAssistedScoring, StatsCalculator, ZoneBasedScoring
from hrscore.services.workout_scoring import WorkoutScoringService

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the service's format."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Keep driver and HTTP client chatter out of debug logs
    logging.getLogger("pymongo").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def create_stats_calculator(
    settings: Settings,
    scoring_config: ScoringConfig | None = None,
) -> tuple[StatsCalculator, ClassifierClient | None]:
    """
    Select the scoring method at startup.

    The classifier is probed once. When it is not configured or not reachable
    the service runs with zone-based scoring only.

    Returns:
        The stats calculator and the classifier client in use (None when zone-based).
        The caller owns the client and must close it on shutdown.
    """
    scoring_config = scoring_config or settings.load_scoring_config()

    if not settings.classifier_url:
        logger.info("No classifier configured, using zone-based scoring")
        return StatsCalculator(ZoneBasedScoring(scoring_config)), None

    classifier = ClassifierClient(
        settings.classifier_url,
        api_key=settings.classifier_api_key,
        timeout=settings.classifier_timeout_seconds,
    )
    if await classifier.ping():
        logger.info(f"Classifier reachable at {settings.classifier_url}, using externally assisted scoring")
        return StatsCalculator(ExternallyAssistedScoring(classifier, scoring_config)), classifier

    logger.warning(f"Classifier at {settings.classifier_url} is not reachable, using zone-based scoring")
    await classifier.close()
    return StatsCalculator(ZoneBasedScoring(scoring_config)), None


async def create_workout_scoring_service(
    settings: Settings,
    db_manager: DatabaseManager,
    scoring_config: ScoringConfig | None = None,
) -> tuple[WorkoutScoringService, ClassifierClient | None]:
    """
    Wire the workout scoring service to MongoDB and the selected scoring method.

    With externally assisted scoring, zone-based scoring is kept as the
    fallback for classifier outages.
    """
    scoring_config = scoring_config or settings.load_scoring_config()
    calculator, classifier = await create_stats_calculator(settings, scoring_config)
    fallback = StatsCalculator(ZoneBasedScoring(scoring_config)) if classifier is not None else None

    async with get_database(db_manager) as db:
        service = WorkoutScoringService(
            HealthProfileRepository(db),
            calculator,
            fallback_calculator=fallback,
            sink=StatChangeRepository(db),
        )
    return service, classifier
