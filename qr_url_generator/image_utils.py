"""Image file utilities: output filename handling and saving."""

import os

from PIL import Image

from qr_url_generator import DEFAULT_OUTPUT_FILE, VALID_EXTENSIONS

# Pillow format name per supported extension
_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
}


def ensure_image_extension(filename: str) -> str:
    """Return *filename* with a supported raster image extension.

    ``.png`` and ``.jpg`` (any case) are kept as-is. Any other extension,
    or none at all, is replaced with ``.png``. Directory components and the
    base name are preserved. A blank name falls back to ``qrcode.png``.

    Examples:
        >>> ensure_image_extension("foo")
        'foo.png'
        >>> ensure_image_extension("foo.PNG")
        'foo.PNG'
        >>> ensure_image_extension("out/code.gif")
        'out/code.png'
    """
    if not filename or not filename.strip():
        return DEFAULT_OUTPUT_FILE

    # Unlike os.path.splitext, a leading dot starts an extension (".gif")
    base = os.path.basename(filename)
    dot = base.rfind(".")
    if dot == -1:
        return filename + ".png"

    ext = base[dot:]
    if ext.lower() in VALID_EXTENSIONS:
        return filename

    return filename[: len(filename) - len(base) + dot] + ".png"


def save_image(img: Image.Image, output_path: str) -> str:
    """Save an image, creating any missing parent directories.

    The file format follows the extension of *output_path* (PNG unless it
    ends in ``.jpg``). Existing files are overwritten.

    Args:
        img: Image to write.
        output_path: Destination path, already passed through
            :func:`ensure_image_extension`.

    Returns:
        The absolute path of the written file.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    ext = os.path.splitext(output_path)[1].lower()
    fmt = _FORMATS.get(ext, "PNG")
    if fmt == "JPEG" and img.mode not in ("L", "RGB"):
        # JPEG has no 1-bit mode
        with img.convert("L") as grey:
            grey.save(output_path, fmt)
    else:
        img.save(output_path, fmt)

    return os.path.abspath(output_path)
