import pytest

from secretsift.pathfilter import PathFilter, glob_to_regex


def test_default_excludes(tmp_path):
    path_filter = PathFilter(tmp_path)
    assert not path_filter.should_scan("project/.git/config")
    assert not path_filter.should_scan("app/node_modules/pkg/index.js")
    assert not path_filter.should_scan("target/debug/binary")
    assert not path_filter.should_scan("bundle.min.js")
    assert not path_filter.should_scan("package-lock.json")
    assert path_filter.should_scan("src/main.rs")
    assert path_filter.should_scan("config.yaml")


def test_custom_excludes(tmp_path):
    path_filter = PathFilter(tmp_path, ["**/secrets/**"])
    assert not path_filter.should_scan("config/secrets/api.key")
    assert path_filter.should_scan("config/settings.yaml")


def test_includes(tmp_path):
    path_filter = PathFilter(tmp_path, [], ["**/*.py"])
    assert path_filter.should_scan("src/main.py")
    assert not path_filter.should_scan("src/main.rs")


def test_invalid_includes_match_nothing(tmp_path):
    path_filter = PathFilter(tmp_path, [], ["[unclosed"])
    assert not path_filter.should_scan("src/main.py")


def test_invalid_exclude_is_ignored(tmp_path):
    path_filter = PathFilter(tmp_path, ["{broken"])
    assert path_filter.should_scan("src/main.py")


def test_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("*.secret\nprivate/**\n")
    (tmp_path / "private").mkdir()
    (tmp_path / "api.secret").write_text("test")
    (tmp_path / "private" / "data.txt").write_text("test")

    path_filter = PathFilter(tmp_path)
    assert not path_filter.should_scan(tmp_path / "api.secret")
    assert not path_filter.should_scan(tmp_path / "private" / "data.txt")
    assert path_filter.should_scan(tmp_path / "config.yaml")


def test_gitignore_negation_and_comments(tmp_path):
    (tmp_path / ".gitignore").write_text("# comment\n*.log\n!keep.log\n")
    path_filter = PathFilter(tmp_path)
    assert not path_filter.should_scan(tmp_path / "debug.log")
    assert path_filter.should_scan(tmp_path / "keep.log")


def test_gitignore_dir_only(tmp_path):
    (tmp_path / ".gitignore").write_text("cache/\n")
    (tmp_path / "cache").mkdir()
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "cache").write_text("file, not a directory")
    path_filter = PathFilter(tmp_path)
    assert not path_filter.should_scan(tmp_path / "cache")
    assert path_filter.should_scan(tmp_path / "sub" / "cache")


@pytest.mark.parametrize(
    "pattern, path",
    [
        ("**/*.py", "main.py"),
        ("**/*.py", "a/b/main.py"),
        ("*.py", "a/b/main.py"),
        ("src/**", "src/a/b.txt"),
        ("a/**/b", "a/b"),
        ("a/**/b", "a/x/y/b"),
        ("file.?s", "file.js"),
        ("[a-c]at", "bat"),
        ("[!a-c]at", "rat"),
        ("*.{js,ts}", "index.ts"),
        ("**", "anything/at/all"),
    ],
)
def test_glob_matches(pattern, path):
    assert glob_to_regex(pattern).fullmatch(path)


@pytest.mark.parametrize(
    "pattern, path",
    [
        ("**/*.py", "main.rs"),
        ("src/**", "lib/a.txt"),
        ("[a-c]at", "rat"),
        ("[!a-c]at", "bat"),
        ("*.{js,ts}", "index.py"),
        ("a/**/b", "a/bc"),
        ("file.txt", "fileXtxt"),
    ],
)
def test_glob_rejects(pattern, path):
    assert glob_to_regex(pattern).fullmatch(path) is None


@pytest.mark.parametrize("pattern", ["[abc", "{a,b", "trailing\\"])
def test_glob_invalid(pattern):
    with pytest.raises(ValueError):
        glob_to_regex(pattern)