# tests/records/test_files.py
import datetime as dt

import pytest

from genai_wire import File, FileState, FileStatus, FormatError, decode, encode

UTC = dt.timezone.utc

FULL_FILE = (
    b'{"name":"files/test-file","displayName":"Test File","mimeType":"image/jpeg","sizeBytes":"1024",'
    b'"sha256Hash":"test-hash","uri":"https://example.com/test-file",'
    b'"downloadUri":"https://example.com/download/test-file","state":"ACTIVE","source":"UPLOADED",'
    b'"videoMetadata":{"test":"test"},"error":{"message":"test error"},'
    b'"expirationTime":"2025-12-31T23:59:59Z","createTime":"2024-12-31T23:59:59Z",'
    b'"updateTime":"2025-01-01T00:00:00Z"}'
)


def _full_file() -> File:
    return File(
        name="files/test-file",
        display_name="Test File",
        mime_type="image/jpeg",
        size_bytes=1024,
        create_time=dt.datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC),
        expiration_time=dt.datetime(2025, 12, 31, 23, 59, 59, tzinfo=UTC),
        update_time=dt.datetime(2025, 1, 1, tzinfo=UTC),
        sha256_hash="test-hash",
        uri="https://example.com/test-file",
        download_uri="https://example.com/download/test-file",
        state="ACTIVE",
        source="UPLOADED",
        video_metadata={"test": "test"},
        error=FileStatus(message="test error"),
    )


def test_encode_empty():
    assert encode(File()) == b"{}"


def test_encode_all_fields():
    assert encode(_full_file()) == FULL_FILE


def test_decode_all_fields():
    assert decode(File, FULL_FILE) == _full_file()


def test_unset_times_are_omitted():
    assert encode(File(name="files/test-file", size_bytes=1024)) == b'{"name":"files/test-file","sizeBytes":"1024"}'


def test_zero_size_is_emitted():
    assert encode(File(size_bytes=0)) == b'{"sizeBytes":"0"}'


def test_state_accepts_enum_member():
    f = File(state=FileState.ACTIVE)
    assert f.state == "ACTIVE"


def test_invalid_size_bytes():
    with pytest.raises(FormatError) as exc:
        decode(File, b'{"sizeBytes": "1kb"}')
    assert exc.value.field == "sizeBytes"


def test_invalid_timestamp():
    with pytest.raises(FormatError) as exc:
        decode(File, b'{"createTime": "2024-13-01T00:00:00Z"}')
    assert exc.value.field == "createTime"


def test_file_status_round_trip():
    status = FileStatus(code=3, message="bad input", details=[{"@type": "type.googleapis.com/x"}])
    wire = encode(status)
    assert wire == b'{"details":[{"@type":"type.googleapis.com/x"}],"message":"bad input","code":3}'
    assert decode(FileStatus, wire) == status


def test_empty_strings_round_trip():
    f = File(name="", mime_type="")
    wire = encode(f)
    assert wire == b'{"name":"","mimeType":""}'
    assert decode(File, wire) == f
