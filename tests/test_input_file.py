import io

import pytest

from telegram_bot_sdk import CouldNotUploadInputFile, InputFile


def test_path_source(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.7")

    input_file = InputFile(str(path))

    assert input_file.filename == "report.pdf"
    assert input_file.get_contents() == b"%PDF-1.7"


def test_explicit_filename_wins(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"x")

    assert InputFile(path, filename="renamed.pdf").get_filename() == "renamed.pdf"


def test_bytes_source_needs_a_filename():
    assert InputFile(b"abc", filename="a.txt").get_contents() == b"abc"

    with pytest.raises(CouldNotUploadInputFile, match="Filename not provided"):
        InputFile(b"abc").filename


def test_stream_source_uses_stream_name(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00\x01")

    with open(path, "rb") as stream:
        input_file = InputFile(stream)

        assert input_file.filename == "clip.mp4"
        assert input_file.get_contents() == b"\x00\x01"


def test_anonymous_stream():
    input_file = InputFile(io.BytesIO(b"data"), filename="data.bin")

    assert input_file.get_contents() == b"data"


def test_missing_path():
    with pytest.raises(CouldNotUploadInputFile, match="does not exist"):
        InputFile("/no/such/file.txt").get_contents()


def test_unsupported_source():
    with pytest.raises(CouldNotUploadInputFile):
        InputFile(12345)  # type: ignore[arg-type]


def test_repr_hides_raw_bytes():
    assert (
        repr(InputFile(b"secret", filename="s.txt"))
        == "InputFile(<6 bytes>, filename='s.txt')"
    )
