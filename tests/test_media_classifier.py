from pathlib import Path

from fastpicker.domain.models import MediaType
from fastpicker.media_classifier import VIDEO_EXTENSIONS, classify_path, is_media


def test_classify_handles_uppercase_extension() -> None:
    assert classify_path(Path("CLIP_0001.MP4")) is MediaType.VIDEO
    assert classify_path(Path("IMG_0001.JPG")) is MediaType.IMAGE


def test_classify_supports_additional_video_extensions() -> None:
    for extension in {".avi", ".wmv", ".mkv"}:
        assert classify_path(Path(f"clip{extension}")) is MediaType.VIDEO
        assert extension in VIDEO_EXTENSIONS


def test_heic_is_an_image() -> None:
    assert classify_path(Path("photo.heic")) is MediaType.IMAGE


def test_non_media_files() -> None:
    assert classify_path(Path("notes.txt")) is MediaType.OTHER
    assert not is_media(Path("archive"))
    assert is_media(Path("movie.mov"))
