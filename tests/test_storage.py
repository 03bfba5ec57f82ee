import os
import stat
from datetime import datetime

import pytest

from tubefetch.core.exceptions import (
    DownloadFailedException,
    FileNotFoundException,
    TokenNotFoundException,
    TokenStoreException,
    UnauthorizedPathException,
)
from tubefetch.schemas import StoredToken
from tubefetch.storage.media import MediaStore
from tubefetch.storage.token_store import TokenStore


def current_umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


# === TokenStore ===

def test_token_round_trip(tmp_path):
    store = TokenStore(tmp_path / "token.json")
    token = StoredToken(
        access_token="ya29.access",
        refresh_token="1//refresh",
        expiry=datetime(2030, 1, 2, 3, 4, 5),
    )

    store.save(token)
    loaded = store.load()

    assert loaded == token
    assert loaded.expiry == datetime(2030, 1, 2, 3, 4, 5)


def test_token_load_normalizes_aware_expiry(tmp_path):
    path = tmp_path / "token.json"
    path.write_text('{"access_token": "ya29.access", "expiry": "2099-01-01T02:00:00+02:00"}')

    loaded = TokenStore(path).load()

    assert loaded.expiry == datetime(2099, 1, 1, 0, 0, 0)
    assert loaded.expiry.tzinfo is None


def test_token_save_overwrites(tmp_path):
    store = TokenStore(tmp_path / "token.json")
    store.save(StoredToken(access_token="old"))
    store.save(StoredToken(access_token="new"))
    assert store.load().access_token == "new"


def test_token_load_missing_file(tmp_path):
    store = TokenStore(tmp_path / "missing.json")
    assert not store.exists()
    with pytest.raises(TokenNotFoundException):
        store.load()


def test_token_load_corrupt_file(tmp_path):
    path = tmp_path / "token.json"
    path.write_text("{not json")
    with pytest.raises(TokenStoreException):
        TokenStore(path).load()


def test_token_save_failure(tmp_path):
    # La ruta es un directorio: la escritura falla
    with pytest.raises(TokenStoreException):
        TokenStore(tmp_path).save(StoredToken(access_token="x"))


# === MediaStore ===

def test_ensure_directory_creates_with_mode(tmp_path):
    store = MediaStore(tmp_path / "downloads")
    store.ensure_directory()

    assert store.directory.is_dir()
    mode = stat.S_IMODE(store.directory.stat().st_mode)
    assert mode == 0o755 & ~current_umask()
    assert store.is_writable()


def test_ensure_directory_fails_when_path_is_file(tmp_path):
    blocker = tmp_path / "downloads"
    blocker.write_text("")
    with pytest.raises(OSError):
        MediaStore(blocker).ensure_directory()


def test_save_stream_writes_all_chunks(tmp_path):
    store = MediaStore(tmp_path)

    result = store.save_stream("clip.mp4", lambda: iter([b"abc", b"", b"def"]))

    assert (tmp_path / "clip.mp4").read_bytes() == b"abcdef"
    assert result.filename == "clip.mp4"
    assert result.size_bytes == 6


def test_save_stream_leaves_truncated_file_on_failure(tmp_path):
    store = MediaStore(tmp_path)

    def broken_stream():
        yield b"partial"
        raise IOError("connection reset")

    with pytest.raises(DownloadFailedException):
        store.save_stream("clip.mp4", broken_stream)

    assert (tmp_path / "clip.mp4").read_bytes() == b"partial"


def test_save_stream_creates_file_before_opening_stream(tmp_path):
    store = MediaStore(tmp_path)

    def failing_open():
        raise DownloadFailedException(reason="403")

    with pytest.raises(DownloadFailedException):
        store.save_stream("clip.mp4", failing_open)

    assert (tmp_path / "clip.mp4").exists()


def test_save_stream_cannot_create_file(tmp_path):
    store = MediaStore(tmp_path / "missing-dir")
    with pytest.raises(DownloadFailedException):
        store.save_stream("clip.mp4", lambda: iter([b"x"]))


def test_path_for_rejects_escape(tmp_path):
    store = MediaStore(tmp_path / "downloads")
    with pytest.raises(UnauthorizedPathException):
        store.path_for("../token.json")


def test_existing_path_missing_file(tmp_path):
    with pytest.raises(FileNotFoundException):
        MediaStore(tmp_path).existing_path("nope.mp4")
