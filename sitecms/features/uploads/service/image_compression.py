"""
Image Compression
=================

Downscales oversized uploads before they are sent to storage:

- larger than 2MB   -> longest side capped at 800px, JPEG quality 60
- between 1MB-2MB   -> longest side capped at 1200px, JPEG quality 70
- 1MB or smaller    -> untouched

Aspect ratio is preserved and images are never upscaled. Transparent
images are flattened onto white since the output is always JPEG. When the
re-encoded image is not smaller than the original, the original is kept.
"""
import io
import os
from dataclasses import dataclass
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from sitecms.features.uploads.domain.upload_entity import UploadFile
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

MB = 1024 * 1024

# Raster formats Pillow can re-encode safely; GIF (animation) and SVG pass through
COMPRESSIBLE_CONTENT_TYPES = {
    'image/jpeg', 'image/jpg', 'image/pjpeg', 'image/png',
    'image/webp', 'image/bmp', 'image/tiff',
}


@dataclass(frozen=True)
class CompressionPlan:
    max_dimension: int
    quality: int


# Ordered largest threshold first: (size must exceed, plan)
COMPRESSION_TIERS = (
    (2 * MB, CompressionPlan(max_dimension=800, quality=60)),
    (1 * MB, CompressionPlan(max_dimension=1200, quality=70)),
)


def select_compression(size_bytes: int) -> Optional[CompressionPlan]:
    """Return the compression plan for a file size, or None when no compression applies."""
    for threshold, plan in COMPRESSION_TIERS:
        if size_bytes > threshold:
            return plan
    return None


def _flatten_to_rgb(image: Image.Image) -> Image.Image:
    has_alpha = image.mode in ('RGBA', 'LA') or (image.mode == 'P' and 'transparency' in image.info)
    if has_alpha:
        rgba = image.convert('RGBA')
        background = Image.new('RGB', rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.split()[3])
        return background
    if image.mode != 'RGB':
        return image.convert('RGB')
    return image


def _jpeg_filename(filename: str) -> str:
    stem, _ = os.path.splitext(filename)
    return f"{stem or 'image'}.jpg"


def compress_image(upload: UploadFile) -> UploadFile:
    """
    Apply the size-tiered compression policy to an upload.

    Args:
        upload: The original file

    Returns:
        A new JPEG UploadFile when compression made it smaller, otherwise the original
    """
    plan = select_compression(upload.size)
    if plan is None:
        return upload

    content_type = (upload.content_type or '').lower()
    if content_type not in COMPRESSIBLE_CONTENT_TYPES:
        logger.debug("Skipping compression for non-raster content",
                     extra={"content_type": content_type, "file_name": upload.filename})
        return upload

    try:
        with Image.open(io.BytesIO(upload.content)) as source:
            source.load()
            image = ImageOps.exif_transpose(source)
            image = _flatten_to_rgb(image)
            original_dimensions = image.size
            image.thumbnail((plan.max_dimension, plan.max_dimension), Image.Resampling.LANCZOS)

            buffer = io.BytesIO()
            image.save(buffer, format='JPEG', quality=plan.quality, optimize=True)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        logger.warning("Image could not be decoded, uploading original",
                       extra={"file_name": upload.filename, "error": str(e)})
        return upload

    compressed = buffer.getvalue()
    if len(compressed) >= upload.size:
        logger.info("Compression did not reduce size, keeping original",
                    extra={"file_name": upload.filename, "original_size": upload.size,
                           "compressed_size": len(compressed)})
        return upload

    logger.info(
        "Image compressed",
        extra={
            "file_name": upload.filename,
            "original_size": upload.size,
            "compressed_size": len(compressed),
            "original_dimensions": list(original_dimensions),
            "compressed_dimensions": list(image.size),
            "quality": plan.quality,
        }
    )
    return UploadFile(
        filename=_jpeg_filename(upload.filename),
        content=compressed,
        content_type='image/jpeg',
    )
