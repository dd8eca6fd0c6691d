"""QR URL Generator — turn a URL into a QR code image from the command line."""

__version__ = "1.0.0"

# Shared constants
DEFAULT_OUTPUT_FILE = "qrcode.png"
DEFAULT_PIXEL_SIZE = 20
MIN_PIXEL_SIZE = 10
MAX_PIXEL_SIZE = 100
QR_BORDER = 4  # Quiet zone in modules, the minimum the QR standard allows
VALID_EXTENSIONS = (".png", ".jpg")
