"""Tests for saving images."""

import logging

from PyQt5.QtCore import QRect
from PyQt5.QtGui import QImage, QColor

import filekit.fs.images as images_module
from filekit.fs.images import (
    save_image, choose_format, encode_image, draw_boxes_with_labels, SaveResult
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8"


def _image(fmt, color=QColor(200, 40, 40, 255)):
    image = QImage(16, 16, fmt)
    image.fill(color)
    return image


def test_choose_format():
    assert choose_format(_image(QImage.Format_ARGB32)) == "PNG"
    assert choose_format(_image(QImage.Format_RGB32)) == "JPEG"


def test_alpha_image_saved_as_png(tmp_path):
    target = tmp_path / "shots" / "overlay.png"

    result = save_image(_image(QImage.Format_ARGB32, QColor(0, 0, 255, 128)), target)

    assert result == SaveResult(success=True, path=str(target), format="PNG")
    assert target.read_bytes().startswith(PNG_SIGNATURE)
    assert not QImage(str(target)).isNull()


def test_opaque_image_saved_as_jpeg(tmp_path):
    target = tmp_path / "frame.jpg"

    result = save_image(_image(QImage.Format_RGB32), str(target))

    assert result.success is True
    assert result.format == "JPEG"
    assert target.read_bytes().startswith(JPEG_SIGNATURE)


def test_save_image_overwrites(tmp_path):
    target = tmp_path / "out.png"
    target.write_bytes(b"stale" * 10000)

    assert save_image(_image(QImage.Format_ARGB32), target).success
    data = target.read_bytes()
    assert data.startswith(PNG_SIGNATURE)
    assert b"stale" not in data


def test_save_image_invalid_arguments(tmp_path, caplog):
    target = tmp_path / "nothing.png"

    with caplog.at_level(logging.ERROR, logger="filekit"):
        assert save_image(None, target).success is False
        assert save_image(QImage(), target).success is False
        result = save_image(_image(QImage.Format_ARGB32), "")

    assert result.success is False
    assert result.error
    assert not target.exists()
    assert "save_image fail" in caplog.text


def test_save_image_reports_encoder_failure(tmp_path, monkeypatch, caplog):
    target = tmp_path / "broken.jpg"

    def fail_encode(image, fmt, quality=100):
        raise ValueError(f"{fmt} encoding failed")

    monkeypatch.setattr(images_module, "encode_image", fail_encode)

    with caplog.at_level(logging.ERROR, logger="filekit"):
        result = save_image(_image(QImage.Format_RGB32), target)

    assert result.success is False
    assert result.format == "JPEG"
    assert result.error == "JPEG encoding failed"
    assert "save_image fail" in caplog.text


def test_encoder_failure_leaves_no_file(tmp_path, monkeypatch):
    target = tmp_path / "new" / "frame.jpg"

    def fail_encode(image, fmt, quality=100):
        raise ValueError("encoder unavailable")

    monkeypatch.setattr(images_module, "encode_image", fail_encode)

    assert save_image(_image(QImage.Format_RGB32), target).success is False
    assert not target.exists()
    assert not target.parent.exists()


def _gradient(size=128):
    image = QImage(size, size, QImage.Format_ARGB32)
    for y in range(size):
        for x in range(size):
            image.setPixelColor(x, y, QColor(x * 2 % 256, y * 2 % 256, 90, 200))
    return image


def test_png_uses_default_compression(tmp_path):
    image = _gradient()
    target = tmp_path / "gradient.png"

    assert save_image(image, target).success

    size = target.stat().st_size
    assert size == len(encode_image(image, "PNG", -1))
    assert size < len(encode_image(image, "PNG", 100))


def test_jpeg_honours_quality(tmp_path):
    image = _gradient().convertToFormat(QImage.Format_RGB32)
    best = tmp_path / "best.jpg"
    rough = tmp_path / "rough.jpg"

    assert save_image(image, best).success
    assert save_image(image, rough, quality=10).success
    assert rough.stat().st_size < best.stat().st_size


def _is_red(color):
    return color.red() > 200 and color.green() < 80 and color.blue() < 80


def test_draw_boxes_with_labels():
    source = QImage(40, 40, QImage.Format_RGB32)
    source.fill(QColor(255, 255, 255))

    annotated = draw_boxes_with_labels(source, [QRect(5, 20, 10, 10), (20, 5, 10, 10)], ["cat", "dog"])

    assert annotated is not None
    assert annotated.size() == source.size()
    assert any(_is_red(annotated.pixelColor(x, 25)) for x in range(3, 8))
    assert any(_is_red(annotated.pixelColor(25, y)) for y in range(3, 8))
    # Source stays untouched
    assert all(
        source.pixelColor(x, y) == QColor(255, 255, 255)
        for x in range(40) for y in range(40)
    )


def test_draw_boxes_with_labels_invalid_arguments(caplog):
    image = _image(QImage.Format_RGB32)

    with caplog.at_level(logging.WARNING, logger="filekit"):
        assert draw_boxes_with_labels(image, [QRect(0, 0, 4, 4)], []) is None
        assert draw_boxes_with_labels(None, [], []) is None
        assert draw_boxes_with_labels(QImage(), [], []) is None

    assert "1 boxes but 0 labels" in caplog.text


def test_draw_boxes_with_no_boxes_copies_image():
    image = _image(QImage.Format_ARGB32)

    annotated = draw_boxes_with_labels(image, [], [])

    assert annotated == image
