"""Image decoding, encoding and a block-copy drawing surface."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
import requests

from .errors import DecodeError

try:
    import cv2  # type: ignore
except ImportError:  # pragma: no cover
    cv2 = None

FETCH_TIMEOUT = 30.0

_CONTENT_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
}


def content_type(fmt: str) -> str:
    """Return the MIME type for an output format name."""
    try:
        return _CONTENT_TYPES[fmt.lower()]
    except KeyError as exc:
        raise ValueError(f"unsupported image format: {fmt}") from exc


def _normalize(image: np.ndarray) -> np.ndarray:
    """Coerce a decoded array into HxWx3 or HxWx4 uint8."""
    if image.dtype != np.uint8:
        image = np.clip(np.rint(image * 255.0), 0, 255).astype(np.uint8)
    if image.ndim == 2:
        image = np.repeat(image[:, :, None], 3, axis=2)
    return image


def decode_image(data: bytes) -> np.ndarray:
    """Decode encoded image bytes into an RGB or RGBA uint8 array."""
    if not data:
        raise DecodeError("image data is empty")

    if cv2 is not None:
        image = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
        if image is None:
            raise DecodeError("image data could not be decoded")
        if image.ndim == 2:
            return cv2.cvtColor(_normalize_depth(image), cv2.COLOR_GRAY2RGB)
        image = _normalize_depth(image)
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    import matplotlib.image as mpimg

    try:
        image = mpimg.imread(io.BytesIO(data))
    except (OSError, ValueError, SyntaxError) as exc:
        raise DecodeError("image data could not be decoded") from exc
    return _normalize(image)


def _normalize_depth(image: np.ndarray) -> np.ndarray:
    """Reduce 16-bit decodes to 8 bits per channel."""
    if image.dtype == np.uint16:
        return (image >> 8).astype(np.uint8)
    return image


def encode_image(image: np.ndarray, fmt: str = "png") -> bytes:
    """Encode an RGB(A) uint8 array."""
    content_type(fmt)
    if cv2 is not None:
        if image.ndim == 3 and image.shape[2] == 4:
            native = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
        elif image.ndim == 3:
            native = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
        else:
            native = image
        ok, buffer = cv2.imencode(f".{fmt.lower()}", native)
        if not ok:
            raise ValueError(f"failed to encode image as {fmt}")
        return buffer.tobytes()

    import matplotlib.image as mpimg

    out = io.BytesIO()
    mpimg.imsave(out, image.astype(np.uint8), format=fmt.lower())
    return out.getvalue()


def load_image(locator: Union[str, Path]) -> np.ndarray:
    """Fetch an http(s) URL or read a local path, then decode it."""
    text = str(locator)
    if text.startswith(("http://", "https://")):
        try:
            response = requests.get(text, timeout=FETCH_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DecodeError(f"failed to fetch image from {text}: {exc}") from exc
        return decode_image(response.content)

    try:
        data = Path(text).read_bytes()
    except OSError as exc:
        raise DecodeError(f"failed to load image from path: {text}") from exc
    return decode_image(data)


class Canvas:
    """Drawing surface that receives verbatim pixel-block copies."""

    def __init__(self, width: int, height: int, channels: int = 3, dtype=np.uint8) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, channels), dtype=dtype)

    @classmethod
    def create(cls, width: int, height: int, channels: int = 3) -> "Canvas":
        return cls(width, height, channels=channels)

    @classmethod
    def like(cls, image: np.ndarray) -> "Canvas":
        """Blank canvas with the size, channel count and dtype of `image`."""
        height, width = image.shape[:2]
        channels = image.shape[2] if image.ndim == 3 else 1
        canvas = cls(width, height, channels=channels, dtype=image.dtype)
        if image.ndim == 2:
            canvas.pixels = canvas.pixels[:, :, 0]
        return canvas

    def copy_block(
        self,
        source: np.ndarray,
        sx: int,
        sy: int,
        sw: int,
        sh: int,
        dx: int,
        dy: int,
        dw: int,
        dh: int,
    ) -> None:
        """Copy the ``sw x sh`` block at (sx, sy) of `source` to (dx, dy)."""
        if (sw, sh) != (dw, dh):
            raise ValueError("source and destination blocks must have the same size")
        src_h, src_w = source.shape[:2]
        if sx < 0 or sy < 0 or sx + sw > src_w or sy + sh > src_h:
            raise ValueError(f"source block ({sx}, {sy}, {sw}, {sh}) is outside the image")
        if dx < 0 or dy < 0 or dx + dw > self.width or dy + dh > self.height:
            raise ValueError(f"destination block ({dx}, {dy}, {dw}, {dh}) is outside the canvas")
        self.pixels[dy : dy + dh, dx : dx + dw] = source[sy : sy + sh, sx : sx + sw]

    def to_array(self) -> np.ndarray:
        return self.pixels

    def encode(self, fmt: str = "png") -> bytes:
        return encode_image(self.pixels, fmt)
