import pytest

from md_to_slack.services.input_layer import decode_markdown, read_markdown_file


def test_read_markdown_file(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# v1.0.0\nCafé", encoding="utf-8")
    assert read_markdown_file(path) == "# v1.0.0\nCafé"
    assert read_markdown_file(str(path)) == "# v1.0.0\nCafé"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_markdown_file(tmp_path / "missing.md")


def test_read_directory_raises(tmp_path):
    with pytest.raises(OSError):
        read_markdown_file(tmp_path)


def test_decode_markdown():
    assert decode_markdown("already text") == "already text"
    assert decode_markdown(b"plain") == "plain"
    assert decode_markdown(b"bad\xff") == "bad\ufffd"


def test_decode_drops_byte_order_mark():
    assert decode_markdown(b"\xef\xbb\xbf# v1.0.0") == "# v1.0.0"
