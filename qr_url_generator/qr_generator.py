"""Generate QR code images and save them to disk."""

from dataclasses import dataclass

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image

from qr_url_generator import DEFAULT_OUTPUT_FILE, DEFAULT_PIXEL_SIZE, QR_BORDER
from qr_url_generator.image_utils import save_image


@dataclass
class GeneratorConfig:
    """Settings for a single QR code generation run."""

    url: str = ""
    pixel_size: int = DEFAULT_PIXEL_SIZE
    output_file: str = DEFAULT_OUTPUT_FILE


@dataclass(frozen=True)
class RenderResult:
    """Outcome of :func:`render_qr_code`.

    On success ``output_path`` holds the absolute path of the saved image;
    on failure ``error`` holds a human-readable reason.
    """

    url: str
    output_path: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output_path is not None


def generate_qr_code(
    data: str,
    pixel_size: int = DEFAULT_PIXEL_SIZE,
    error_correction: int = qrcode.constants.ERROR_CORRECT_Q,
) -> Image.Image:
    """Encode *data* as a black-on-white QR code image.

    Uses error correction level Q (~25% recoverable) by default. The symbol
    version is chosen automatically to fit the data.

    Args:
        data: The text or URL to encode.
        pixel_size: Pixels per QR module.
        error_correction: One of the ``qrcode.constants.ERROR_CORRECT_*`` levels.

    Returns:
        PIL Image of the QR code including a 4-module quiet zone.

    Raises:
        ValueError: If the data is empty or exceeds QR code capacity.
    """
    if not data.strip():
        raise ValueError("QR data cannot be empty.")

    try:
        data.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError("QR data is not valid text.") from None

    qr = qrcode.QRCode(
        version=None,
        error_correction=error_correction,
        box_size=pixel_size,
        border=QR_BORDER,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError):
        # Newer qrcode releases report overflow as an invalid version number
        raise ValueError(
            f"QR data too long ({len(data)} chars) to fit in a QR code "
            f"at this error correction level."
        ) from None

    img = qr.make_image(fill_color="black", back_color="white")
    # qrcode returns a PilImage wrapper; get actual PIL Image
    return img.get_image() if hasattr(img, "get_image") else img


def render_qr_code(config: GeneratorConfig) -> RenderResult:
    """Render the configured URL as a QR code and save it to disk.

    Nothing is printed about the outcome; the caller decides how to report
    the returned :class:`RenderResult`.
    """
    qr_image = None
    try:
        qr_image = generate_qr_code(config.url, pixel_size=config.pixel_size)
        output_path = save_image(qr_image, config.output_file)
        return RenderResult(url=config.url, output_path=output_path)
    except (ValueError, OSError) as e:
        return RenderResult(url=config.url, error=str(e) or e.__class__.__name__)
    finally:
        if qr_image is not None:
            qr_image.close()
