import re
from pathlib import Path

import pytest

from secretsift.allowlist import Allowlist, AllowlistEntry
from secretsift.schema import AllowlistEntryConfig


def test_allowlist_entry_matches():
    entry = AllowlistEntry("EXAMPLE|example")
    assert entry.matches("AKIAEXAMPLE1234", Path("config.py"))
    assert entry.matches("example_key", Path("config.py"))
    assert not entry.matches("AKIAREALKEY1234", Path("config.py"))


def test_allowlist_entry_with_files():
    entry = AllowlistEntry("test", files=["tests/"])
    assert entry.matches("test_key", "tests/config.py")
    assert not entry.matches("test_key", "src/config.py")


def test_allowlist_entry_keeps_reason():
    entry = AllowlistEntry("abc", reason="sample values")
    assert entry.reason == "sample values"
    assert entry.pattern.pattern == "abc"


def test_allowlist():
    allowlist = Allowlist()
    allowlist.add_pattern("EXAMPLE")
    allowlist.add_pattern("test_")
    assert allowlist.is_allowed("AKIAEXAMPLE", Path("config.py"))
    assert allowlist.is_allowed("test_api_key", Path("config.py"))
    assert not allowlist.is_allowed("AKIAREALKEY", Path("config.py"))


def test_empty_allowlist():
    allowlist = Allowlist()
    assert not allowlist.is_allowed("anything", Path("file.py"))


def test_add_invalid_pattern_raises():
    allowlist = Allowlist()
    with pytest.raises(re.error):
        allowlist.add_pattern("(unclosed")


def test_fingerprint_allowlist():
    allowlist = Allowlist()
    allowlist.add_fingerprint("abc123def4")
    assert allowlist.is_fingerprint_allowed("abc123def4")
    assert not allowlist.is_fingerprint_allowed("other12345")


def test_is_finding_allowed():
    allowlist = Allowlist()
    allowlist.add_pattern("EXAMPLE")
    allowlist.add_fingerprint("fp12345678")
    assert allowlist.is_finding_allowed("AKIAEXAMPLE", Path("config.py"), "other")
    assert allowlist.is_finding_allowed("AKIAREALKEY", Path("config.py"), "fp12345678")
    assert not allowlist.is_finding_allowed("AKIAREALKEY", Path("config.py"), "other")


def test_from_config_skips_invalid_patterns():
    entries = [
        AllowlistEntryConfig(pattern="(broken"),
        AllowlistEntryConfig(pattern="DUMMY", files=["fixtures/"], reason="fixtures"),
    ]
    allowlist = Allowlist.from_config(entries, ["fp1"])
    assert len(allowlist.entries) == 1
    assert allowlist.entries[0].files == ["fixtures/"]
    assert allowlist.is_allowed("DUMMY_VALUE", "fixtures/a.txt")
    assert not allowlist.is_allowed("DUMMY_VALUE", "src/a.txt")
    assert allowlist.is_fingerprint_allowed("fp1")


def test_from_config_empty_files_means_any_file():
    allowlist = Allowlist.from_config([AllowlistEntryConfig(pattern="DUMMY")], [])
    assert allowlist.entries[0].files is None
    assert allowlist.is_allowed("DUMMY", "anywhere/else.py")