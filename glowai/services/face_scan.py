"""
Face-scan analyzer — the image-capture collaborator.

Validates the uploaded photo and returns a skin estimate. There is no
trained classifier behind this: every readable photo gets the same fixed
estimate, which the user then corrects through FaceScanReview.
"""

import logging
from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

from glowai.config import Settings, get_settings
from glowai.errors import AnalysisFailed
from glowai.schemas import FaceScanEstimate, SkinTone, SkinType

logger = logging.getLogger(__name__)

FIXED_ESTIMATE = FaceScanEstimate(
    skin_tone=SkinTone.MEDIUM,
    skin_type=SkinType.COMBINATION,
    confidence=0.87,
)


class FaceScanAnalyzer:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.valid_formats = {'JPEG', 'PNG'}
        self.min_size = (64, 64)

    def validate_image(self, image_data: bytes) -> Image.Image:
        """Open and sanity-check an uploaded photo."""
        if not image_data:
            raise AnalysisFailed("No image was uploaded. Please take or upload a photo.")

        max_bytes = self.settings.scan_max_image_mb * 1024 * 1024
        if len(image_data) > max_bytes:
            raise AnalysisFailed(
                f"Image is larger than {self.settings.scan_max_image_mb} MB. Please use a smaller photo."
            )

        try:
            image = Image.open(BytesIO(image_data))
            image.verify()
            # verify() leaves the image unusable, reopen for size checks
            image = Image.open(BytesIO(image_data))
        except (UnidentifiedImageError, OSError) as e:
            raise AnalysisFailed("Could not read the image. Please try another photo.") from e

        if image.format not in self.valid_formats:
            raise AnalysisFailed(
                f"Invalid image format. Supported formats: {', '.join(sorted(self.valid_formats))}"
            )

        if image.size[0] < self.min_size[0] or image.size[1] < self.min_size[1]:
            raise AnalysisFailed("Image is too small to analyze. Please move closer to the camera.")

        return image

    async def analyze(self, image_data: bytes) -> FaceScanEstimate:
        """Analyze a face photo and return the skin estimate."""
        try:
            image = self.validate_image(image_data)
        except AnalysisFailed as e:
            logger.warning(f"Face scan rejected: {e}")
            raise

        logger.info(f"Face scan analyzed | Format: {image.format} | Size: {image.size}")
        return FIXED_ESTIMATE
