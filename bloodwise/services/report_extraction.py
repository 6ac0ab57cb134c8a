import structlog

from bloodwise.core.config import settings
from bloodwise.schemas.lab import Gender, LabValues
from bloodwise.schemas.report import ExtractionResult
from bloodwise.services.simulation.base import Simulator

logger = structlog.get_logger()

# Stand-in for OCR output. Every accepted upload "extracts" this panel.
MOCK_REPORT_VALUES = LabValues(
    hemoglobin=11.2,
    glucose=140,
    creatinine=1.4,
    urea=25,
    cholesterol=220,
    wbc=8500,
    rbc=4.1,
    platelets=250000,
    hematocrit=38,
    mcv=85,
    mch=28,
    mchc=33,
    age=45,
    gender=Gender.MALE,
)


UPLOAD_CHUNK_BYTES = 64 * 1024


class ReportRejectedError(ValueError):
    pass


class ReportTooLargeError(ReportRejectedError):
    pass


class UnsupportedReportTypeError(ReportRejectedError):
    pass


async def measure_upload(upload, limit: int) -> int:
    """
    Byte size of an uploaded file without buffering it. Uses the size the
    multipart parser recorded when there is one; otherwise reads in chunks
    and stops one byte past ``limit``, which is enough to reject it.
    """
    if upload.size is not None:
        return upload.size

    total = 0
    while total <= limit:
        chunk = await upload.read(min(UPLOAD_CHUNK_BYTES, limit + 1 - total))
        if not chunk:
            break
        total += len(chunk)
    return total


class ReportExtractor:
    """
    Accepts a lab report file and returns blood values for the form.
    No document parsing happens: after the processing delay the fixed
    MOCK_REPORT_VALUES are returned.
    """

    def __init__(self, simulator: Simulator):
        self.simulator = simulator

    @staticmethod
    def validate(filename: str, content_type: str, size: int):
        if size > settings.MAX_UPLOAD_BYTES:
            raise ReportTooLargeError(
                f"'{filename}' is {size} bytes; the limit is {settings.MAX_UPLOAD_BYTES} bytes"
            )
        if content_type not in settings.ALLOWED_UPLOAD_TYPES:
            raise UnsupportedReportTypeError(
                f"'{content_type}' is not supported. Please upload a PDF, JPG, or PNG file"
            )

    async def extract(self, filename: str, content_type: str, size: int) -> ExtractionResult:
        self.validate(filename, content_type, size)

        logger.info("report_processing_start", filename=filename, content_type=content_type, size=size)
        await self.simulator.pause(settings.PROCESSING_DELAY_SECONDS)

        values = MOCK_REPORT_VALUES.model_copy()
        result = ExtractionResult(
            filename=filename,
            values=values,
            extracted_count=values.measured_count(),
        )
        logger.info("report_processing_done", filename=filename, extracted=result.extracted_count)
        return result
