import structlog
from typing import Sequence

from bloodwise.core.config import settings
from bloodwise.schemas.prediction import Prediction
from bloodwise.schemas.report import VerificationResult, VerificationStatus
from bloodwise.services.simulation.base import Simulator

logger = structlog.get_logger()

# Display-only values. Nothing here is checked cryptographically.
MOCK_SIGNATURE = "VALID_SIGNATURE_73a4b8c92d11e9"
MOCK_HASH = "e7c6e9b23226f89a123d8c81a362e691"

VERIFIED_MESSAGE = (
    "Report Authentication Successful\n\n"
    f"Digital signature verified: {MOCK_SIGNATURE}\n"
    "Hash integrity check: PASSED\n"
    "Certificate authority: Medical Lab Security Alliance\n\n"
    "Your blood test report has been cryptographically verified as authentic and unmodified. "
    "The data integrity is confirmed."
)

FAILED_MESSAGE = (
    "Report Verification Failed\n\n"
    "Issues detected:\n"
    "- Digital signature mismatch\n"
    f"- Hash verification failed: {MOCK_HASH}\n"
    "- Certificate chain incomplete\n\n"
    "We could not verify the authenticity of this report. Please ensure you're using an "
    "official lab report with proper digital signatures."
)

class ReportVerifier:
    """
    Simulated authenticity check of a lab report: waits, then passes with
    probability VERIFICATION_SUCCESS_RATE.
    """

    def __init__(self, simulator: Simulator):
        self.simulator = simulator

    async def verify(self, predictions: Sequence[Prediction]) -> VerificationResult:
        if not predictions:
            raise ValueError("No report to verify")

        await self.simulator.pause(settings.VERIFICATION_DELAY_SECONDS)

        if self.simulator.chance(settings.VERIFICATION_SUCCESS_RATE):
            logger.info("report_verified", predictions=len(predictions))
            return VerificationResult(
                status=VerificationStatus.VERIFIED,
                message=VERIFIED_MESSAGE,
                signature=MOCK_SIGNATURE,
            )

        logger.warning("report_verification_failed", predictions=len(predictions))
        return VerificationResult(
            status=VerificationStatus.FAILED,
            message=FAILED_MESSAGE,
            report_hash=MOCK_HASH,
        )
