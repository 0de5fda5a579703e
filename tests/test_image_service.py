"""Tests for manycolor.services.image_service."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from manycolor.models.color_model import ImageSize
from manycolor.models.errors import OutputIOError
from manycolor.services.color_service import parse_hex
from manycolor.services.image_service import ImageService


def test_render_is_flat_fill() -> None:
    image = ImageService().render(parse_hex("1a2b3c"), ImageSize(5, 3))
    assert image.mode == "RGBA"
    assert image.size == (5, 3)
    arr = np.asarray(image)
    assert arr.shape == (3, 5, 4)
    assert (arr == np.array([0x1A, 0x2B, 0x3C, 255], dtype=np.uint8)).all()


def test_generate_writes_png(tmp_path: Path) -> None:
    service = ImageService(output_dir=tmp_path)
    path = service.generate(parse_hex("0f0"), ImageSize(4, 2))

    assert path == tmp_path / "00ff00.png"
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.mode == "RGBA"
        assert img.size == (4, 2)
        assert (np.asarray(img) == (0, 255, 0, 255)).all()


def test_generate_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "ffffff.png"
    target.write_bytes(b"stale contents that are not a png" * 100)

    ImageService(output_dir=tmp_path).generate(parse_hex("fff"), ImageSize(1, 1))

    with Image.open(target) as img:
        assert img.getpixel((0, 0)) == (255, 255, 255, 255)


def test_generate_defaults_to_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = ImageService().generate(parse_hex("abc"), ImageSize(1, 1))
    assert path == Path("aabbcc.png")
    assert (tmp_path / "aabbcc.png").is_file()


def test_unwritable_destination_raises_output_error(tmp_path: Path) -> None:
    # каталог с именем файла не открывается на запись
    (tmp_path / "000000.png").mkdir()
    with pytest.raises(OutputIOError):
        ImageService(output_dir=tmp_path).generate(parse_hex("000"), ImageSize(1, 1))


def test_missing_output_dir_raises_output_error(tmp_path: Path) -> None:
    service = ImageService(output_dir=tmp_path / "nope")
    with pytest.raises(OutputIOError):
        service.generate(parse_hex("000"), ImageSize(1, 1))


def test_oversized_raster_raises_output_error(tmp_path: Path) -> None:
    huge = ImageSize(2**31 - 1, 2**31 - 1)
    with pytest.raises(OutputIOError):
        ImageService(output_dir=tmp_path).generate(parse_hex("fff"), huge)
    assert list(tmp_path.iterdir()) == []


def test_encode_failure_removes_partial_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_save(self, fp, *args, **kwargs):
        fp.write(b"\x89PNG partial")
        raise OSError("encoder failed")

    monkeypatch.setattr(Image.Image, "save", broken_save)
    with pytest.raises(OutputIOError):
        ImageService(output_dir=tmp_path).generate(parse_hex("f00"), ImageSize(2, 2))
    assert not (tmp_path / "ff0000.png").exists()
