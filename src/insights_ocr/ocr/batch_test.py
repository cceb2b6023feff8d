"""Tests for concurrent OCR of screenshot batches."""

from pathlib import Path

import pytest
from PIL import Image as PILImage

from insights_ocr.errors import OCRError
from insights_ocr.ocr.batch import ImageText, combine_texts, ocr_image, ocr_images
from insights_ocr.ocr.ocr import OCR


class FakeOCR(OCR):
    """OCR stand-in that returns canned text per image width."""

    def __init__(self, texts: dict[int, str]) -> None:
        self.texts = texts

    def extract_text(self, image: PILImage.Image, source: str = "<image>") -> str:
        if image.width not in self.texts:
            raise OCRError(source, "OCR failed: unreadable")
        return self.texts[image.width]


def _save_png(path: Path, width: int) -> Path:
    PILImage.new("RGB", (width, 10), "white").save(path)
    return path


class TestOcrImage:
    """Tests for ocr_image function."""

    def test_success(self, tmp_path: Path) -> None:
        path = _save_png(tmp_path / "a.png", 10)

        result = ocr_image(FakeOCR({10: "Views 100"}), 0, path)

        assert result == ImageText(index=0, source=str(path), text="Views 100")

    def test_ocr_failure_becomes_error_note(self, tmp_path: Path) -> None:
        path = _save_png(tmp_path / "a.png", 10)

        result = ocr_image(FakeOCR({}), 3, path)

        assert result.index == 3
        assert result.text is None
        assert result.error == f"{path}: OCR failed: unreadable"

    def test_unreadable_image(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.png"
        path.write_text("not an image")

        result = ocr_image(FakeOCR({}), 0, path)

        assert result.text is None
        assert result.error is not None
        assert "cannot read image" in result.error

    def test_missing_file(self, tmp_path: Path) -> None:
        result = ocr_image(FakeOCR({}), 0, tmp_path / "missing.png")

        assert result.error is not None

    def test_decompression_bomb(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = _save_png(tmp_path / "huge.png", 30)
        monkeypatch.setattr(PILImage, "MAX_IMAGE_PIXELS", 50)

        result = ocr_image(FakeOCR({30: "never"}), 0, path)

        assert result.text is None
        assert result.error is not None
        assert "cannot read image" in result.error

    @pytest.mark.filterwarnings("error::PIL.Image.DecompressionBombWarning")
    def test_decompression_bomb_warning_as_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = _save_png(tmp_path / "large.png", 8)
        monkeypatch.setattr(PILImage, "MAX_IMAGE_PIXELS", 50)

        result = ocr_image(FakeOCR({8: "never"}), 0, path)

        assert result.text is None
        assert result.error is not None


class TestOcrImages:
    """Tests for ocr_images function."""

    def test_preserves_order_and_isolates_failures(self, tmp_path: Path) -> None:
        paths = [
            _save_png(tmp_path / "1.png", 10),
            _save_png(tmp_path / "2.png", 20),
            _save_png(tmp_path / "3.png", 30),
        ]
        ocr = FakeOCR({10: "first", 30: "third"})

        results = ocr_images(paths, ocr, max_workers=3, progress=False)

        assert [r.index for r in results] == [0, 1, 2]
        assert [r.text for r in results] == ["first", None, "third"]
        assert results[1].error is not None

    def test_oversized_image_does_not_abort_batch(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        paths = [_save_png(tmp_path / "1.png", 30), _save_png(tmp_path / "2.png", 2)]
        monkeypatch.setattr(PILImage, "MAX_IMAGE_PIXELS", 50)

        results = ocr_images(paths, FakeOCR({2: "small"}), progress=False)

        assert results[0].error is not None
        assert results[1].text == "small"

    def test_empty(self) -> None:
        assert ocr_images([], FakeOCR({}), progress=False) == []


class TestCombineTexts:
    """Tests for combine_texts function."""

    def test_joins_in_index_order(self) -> None:
        results = [
            ImageText(index=1, source="b", text="second"),
            ImageText(index=2, source="c", error="boom"),
            ImageText(index=0, source="a", text="first"),
        ]
        assert combine_texts(results) == "first\n\nsecond"

    def test_empty(self) -> None:
        assert combine_texts([]) == ""

    def test_serialization_omits_missing_text(self) -> None:
        result = ImageText(index=0, source="a.png", error="boom")
        assert result.to_dict() == {"index": 0, "source": "a.png", "error": "boom"}
