from secretsift.binary import is_binary_content


def test_empty():
    assert not is_binary_content(b"")


def test_text():
    assert not is_binary_content(b"Hello, world!\n")
    assert not is_binary_content(b"line1\nline2\tindented")


def test_binary_null():
    assert is_binary_content(b"Hello\x00World")


def test_binary_ratio():
    assert is_binary_content(bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 65]))


def test_crlf_is_text():
    assert not is_binary_content(b"a\r\nb\r\nc\r\n")


def test_few_control_bytes_is_text():
    assert not is_binary_content(b"\x01" + b"a" * 20)