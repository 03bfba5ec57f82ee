import pytest

from tubefetch.core.exceptions import InvalidURLException
from tubefetch.validators import URLValidator


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://youtu.be/abc123", "abc123"),
        ("https://youtu.be/abc123?t=42", "abc123"),
        ("https://www.youtube.com/watch?v=abc123", "abc123"),
        ("https://youtube.com/watch?v=abc123&list=PL1", "abc123"),
        ("https://m.youtube.com/watch?v=abc123", "abc123"),
    ],
)
def test_extract_video_id_supported_shapes(url, expected):
    assert URLValidator.extract_video_id(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://vimeo.com/12345",
        "https://www.youtube.com/embed/abc123",
        "https://www.youtube.com/watch",
        "https://youtu.be/",
        "not a url",
        "",
    ],
)
def test_extract_video_id_unknown_shapes_return_empty(url):
    assert URLValidator.extract_video_id(url) == ""


def test_require_video_id_raises_bad_request():
    with pytest.raises(InvalidURLException) as exc_info:
        URLValidator.require_video_id("https://example.com/video")
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("url", ["", "   ", "\t\n"])
def test_validate_url_rejects_blank(url):
    with pytest.raises(InvalidURLException):
        URLValidator.validate_url(url)


def test_validate_url_strips_whitespace():
    assert URLValidator.validate_url("  https://youtu.be/abc123 ") == "https://youtu.be/abc123"
