"""Tests for main.py using real temp files and a fake OCR engine."""

import json
from pathlib import Path

import pytest
from PIL import Image as PILImage

from insights_ocr.errors import OCRError
from insights_ocr.main import _validate_input_path, main
from insights_ocr.ocr import OCR


class TestValidateInputPath:
    """Test _validate_input_path function."""

    def test_exists(self, tmp_path: Path) -> None:
        path = tmp_path / "shot.png"
        path.touch()

        assert _validate_input_path(path) is True

    def test_not_exists(self) -> None:
        assert _validate_input_path(Path("/nonexistent/shot.png")) is False


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestMainTextInput:
    """Test main() with OCR text files as input."""

    def test_single_file(self, tmp_path: Path) -> None:
        source = _write(tmp_path / "a.txt", "Interactions\n1,234\ngrowth")
        output = tmp_path / "result.json"

        exit_code = main([str(source), "--text", "--output", str(output)])

        assert exit_code == 0
        assert json.loads(output.read_text()) == {"record": {"interactions": 1234}}

    def test_relative_date_uses_today(self, tmp_path: Path) -> None:
        source = _write(tmp_path / "a.txt", "Last 7 days")
        output = tmp_path / "result.json"

        exit_code = main(
            [str(source), "--text", "--today", "2024-03-10", "--output", str(output)]
        )

        assert exit_code == 0
        data = json.loads(output.read_text())
        assert data["record"]["dateRange"] == "Mar 4 - Mar 10, 2024"

    def test_combined_vs_per_image(self, tmp_path: Path) -> None:
        first = _write(tmp_path / "a.txt", "Views 100\nInteractions 512")
        second = _write(tmp_path / "b.txt", "Views 300")
        output = tmp_path / "result.json"

        main([str(first), str(second), "--text", "--output", str(output)])
        combined = json.loads(output.read_text())["record"]

        main(
            [str(first), str(second), "--text", "--per-image", "--output", str(output)]
        )
        merged = json.loads(output.read_text())["record"]

        assert combined == {"views": 100, "interactions": 512}
        assert merged == {"views": 300, "interactions": 512}

    def test_include_raw(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = _write(tmp_path / "a.txt", "Views 100")

        exit_code = main([str(source), "--text", "--include-raw"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["images"] == [
            {"index": 0, "source": str(source), "text": "Views 100"}
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.txt"), "--text"]) == 2

    def test_invalid_today(self, tmp_path: Path) -> None:
        source = _write(tmp_path / "a.txt", "Views 100")
        assert main([str(source), "--text", "--today", "yesterday"]) == 2


class _FakeOCR(OCR):
    def __init__(self) -> None:
        pass

    def extract_text(self, image: PILImage.Image, source: str = "<image>") -> str:
        if image.width == 10:
            return "Views 100"
        raise OCRError(source, "OCR failed: unreadable")


class TestMainImageInput:
    """Test main() with screenshots, OCR replaced by a fake engine."""

    def test_failed_image_does_not_block_others(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("insights_ocr.ocr.batch.OCR", _FakeOCR)
        good = tmp_path / "good.png"
        bad = tmp_path / "bad.png"
        PILImage.new("RGB", (10, 10)).save(good)
        PILImage.new("RGB", (20, 10)).save(bad)
        output = tmp_path / "result.json"

        exit_code = main(
            [
                str(good),
                str(bad),
                "--no-progress",
                "--include-raw",
                "--output",
                str(output),
            ]
        )

        assert exit_code == 0
        data = json.loads(output.read_text())
        assert data["record"] == {"views": 100}
        assert data["images"][1]["error"] == f"{bad}: OCR failed: unreadable"
