import pytest

from tubefetch.core.exceptions import NoAudioFormatException
from tubefetch.helpers import FileNameHelper, FormatSelector
from tubefetch.schemas import VideoFormat


def fmt(format_id, height, has_audio):
    return VideoFormat(format_id=format_id, height=height, has_audio=has_audio)


def test_best_audio_format_skips_formats_without_audio():
    formats = [fmt("a", 240, True), fmt("b", 720, True), fmt("c", 1080, False)]

    best = FormatSelector.best_audio_format(formats)

    assert best.format_id == "b"
    assert best.height == 720


def test_best_audio_format_first_seen_wins_ties():
    formats = [fmt("first", 360, True), fmt("second", 360, True)]
    assert FormatSelector.best_audio_format(formats).format_id == "first"


def test_best_audio_format_without_audio_raises():
    with pytest.raises(NoAudioFormatException) as exc_info:
        FormatSelector.best_audio_format([fmt("v", 1080, False)])
    assert exc_info.value.status_code == 500


def test_best_audio_format_empty_list_raises():
    with pytest.raises(NoAudioFormatException):
        FormatSelector.best_audio_format([])


def test_download_filename_replaces_spaces_only():
    assert FileNameHelper.download_filename("My Cool Video!") == "My_Cool_Video!.mp4"
    assert FileNameHelper.download_filename("clip", ".webm") == "clip.webm"


def test_sanitize_filename_ascii():
    assert FileNameHelper.sanitize_filename_ascii("Canción_día.mp4") == "Cancion_dia.mp4"
    assert FileNameHelper.sanitize_filename_ascii('a"b.mp4') == "ab.mp4"
    assert FileNameHelper.sanitize_filename_ascii("") == "file"
