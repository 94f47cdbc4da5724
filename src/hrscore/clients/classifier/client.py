"""
Async client for the external workout classification service.
"""
import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from hrscore.exceptions import ExternalServiceError
from hrscore.models.classification import ActivityClassification, ClassificationRequest
from hrscore.models.workout import HeartRateSample

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class ClassifierClient:
    """Client for the workout classifier's /classify and /health endpoints."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the classifier client.

        Args:
            base_url: Base URL of the classifier service
            api_key: Value sent in the X-API-Key header
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the service in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"X-API-Key": api_key},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ClassifierClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def ping(self) -> bool:
        """
        Check if the classifier service is reachable.

        Returns:
            True if the health endpoint answered with a success status, False otherwise
        """
        try:
            response = await self.client.get("/health")
            return response.is_success
        except httpx.HTTPError as e:
            logger.error(f"Classifier health probe at {self.base_url} failed: {e}")
            return False

    async def classify_workout(
        self,
        samples: Sequence[HeartRateSample],
        user_resting_hr: int,
        user_max_hr: int,
        activity_type: str | None = None,
    ) -> ActivityClassification:
        """
        Classify a workout from its heart rate series.

        Args:
            samples: Heart rate samples of the workout
            user_resting_hr: User's resting heart rate
            user_max_hr: User's maximum heart rate
            activity_type: Activity type reported by the device, if any

        Returns:
            ActivityClassification with prediction and confidence

        Raises:
            ExternalServiceError: On timeout, transport error, error status or malformed response
        """
        request = ClassificationRequest(
            heart_rate_samples=list(samples),
            user_resting_hr=user_resting_hr,
            user_max_hr=user_max_hr,
            activity_type=activity_type,
        )

        logger.debug(f"Calling classifier at {self.base_url}/classify with {len(samples)} samples")

        try:
            response = await self.client.post("/classify", json=request.to_payload())
        except httpx.TimeoutException as e:
            logger.error(f"Classifier request timed out: {e}")
            raise ExternalServiceError(f"Classifier request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Classifier request failed: {e}")
            raise ExternalServiceError(f"Classifier request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Classifier returned error {response.status_code}: {response.text}")
            raise ExternalServiceError(
                f"Classifier error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        try:
            classification = ActivityClassification.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Classifier returned a malformed response: {e}")
            raise ExternalServiceError(
                f"Classifier returned a malformed response: {e}", status_code=response.status_code
            ) from e

        logger.info(
            f"Classification: {classification.prediction} "
            f"(confidence: {classification.confidence * 100:.2f}%)"
        )
        return classification
