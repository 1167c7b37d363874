"""Persist decoded images to disk."""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union, Tuple

from PyQt5.QtCore import QBuffer, QByteArray, QIODevice, QPointF, QRect, Qt
from PyQt5.QtGui import QColor, QImage, QPainter, QPen

from .paths import PathArg, is_blank
from .entries import ensure_file
from ..utils.logging import get_logger

logger = get_logger(__name__)

LOSSLESS_FORMAT = "PNG"
LOSSY_FORMAT = "JPEG"
MAX_QUALITY = 100
# Qt reads a PNG "quality" as a compression level; -1 is the default level
DEFAULT_QUALITY = -1

BOX_COLOR = QColor(255, 0, 0)
BOX_STROKE_WIDTH = 2.0
LABEL_TEXT_SIZE = 14

RectArg = Union[QRect, Tuple[int, int, int, int]]


@dataclass
class SaveResult:
    """Result of an image save."""
    success: bool
    path: Optional[str]
    format: Optional[str] = None
    error: Optional[str] = None


def choose_format(image: QImage) -> str:
    """PNG for images with an alpha channel, JPEG for the rest."""
    return LOSSLESS_FORMAT if image.hasAlphaChannel() else LOSSY_FORMAT


def encode_image(image: QImage, fmt: str, quality: int = MAX_QUALITY) -> bytes:
    """Encode ``image`` in memory.

    Raises:
        ValueError: If Qt cannot encode the image in ``fmt``
    """
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.WriteOnly)
    try:
        encoded = image.save(buffer, fmt, quality)
    finally:
        buffer.close()
    if not encoded:
        raise ValueError(f"{fmt} encoding failed")
    return data.data()


def save_image(image: Optional[QImage], path: Optional[PathArg], quality: int = MAX_QUALITY) -> SaveResult:
    """Save an image, picking the format from its alpha channel.

    The image is encoded before the target is touched, so a failed encode
    leaves the file system as it was. The target file is created if needed
    and always overwritten.

    Args:
        image: Decoded image
        path: Target file
        quality: Encoder quality, 0-100; only affects JPEG output

    Returns:
        SaveResult describing what was written or why it was not
    """
    if image is None or image.isNull() or is_blank(path):
        logger.error("save_image fail: image is empty or path is empty")
        return SaveResult(
            success=False,
            path=None if path is None else os.fspath(path),
            error="image and path are required"
        )

    target = os.fspath(path)
    fmt = choose_format(image)
    try:
        payload = encode_image(image, fmt, quality if fmt == LOSSY_FORMAT else DEFAULT_QUALITY)
        ensure_file(target)
        with open(target, "wb") as f:
            f.write(payload)
            f.flush()
    except Exception as e:
        logger.log_failure("save_image", target, e, level=logging.ERROR, exc_info=True)
        return SaveResult(success=False, path=target, format=fmt, error=str(e))

    return SaveResult(success=True, path=target, format=fmt)


def draw_boxes_with_labels(
    image: Optional[QImage],
    rects: Sequence[RectArg],
    labels: Sequence[str],
    color: QColor = BOX_COLOR
) -> Optional[QImage]:
    """Draw labelled boxes on a copy of ``image``.

    Each label is written just above the top-left corner of its box. Text
    rendering needs a ``QGuiApplication`` instance.

    Args:
        image: Source image, left unchanged
        rects: Boxes as ``QRect`` or ``(x, y, width, height)``
        labels: One label per box
        color: Pen color for boxes and text

    Returns:
        The annotated copy, or None if the arguments are invalid
    """
    if image is None or image.isNull():
        logger.warning("draw_boxes_with_labels fail: image is empty")
        return None
    if len(rects) != len(labels):
        logger.warning(
            f"draw_boxes_with_labels fail: {len(rects)} boxes but {len(labels)} labels"
        )
        return None

    annotated = image.copy()
    painter = QPainter(annotated)
    try:
        painter.setRenderHint(QPainter.Antialiasing)
        pen = QPen(color)
        pen.setWidthF(BOX_STROKE_WIDTH)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        font = painter.font()
        font.setPixelSize(LABEL_TEXT_SIZE)
        painter.setFont(font)

        for rect, label in zip(rects, labels):
            if not isinstance(rect, QRect):
                rect = QRect(*rect)
            painter.drawRect(rect)
            painter.drawText(QPointF(rect.left(), rect.top() - BOX_STROKE_WIDTH), label)
    finally:
        painter.end()
    return annotated
