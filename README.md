# secretsift

Building blocks for finding secrets that have leaked into source code:
Shannon-entropy checks, binary-content detection, allowlists,
gitignore-aware path filtering, line-by-line file reading, a YAML
configuration schema with a search order for config files, and checks of a
credential against its provider's API.

## Installation

```
pip install secretsift
```

For running the test suite:

```
pip install "secretsift[test]"
```

## Command line

Create a configuration file:

```
secretsift init
secretsift init --full --output .secretscanner.yaml --force
```

The default output path is `.secretscanner.yaml`. `--full` writes a
configuration with sample values filled in (two exclude globs, an allowlist
entry and a custom rule); otherwise every option takes its default. Without
`--force` an existing file is left untouched and the command exits with
status 1; a failure to write the file exits with status 2.

Check whether a credential is still live with its provider:

```
secretsift verify token --secret-type github --timeout 10
secretsift verify token --format json
```

When `--secret-type` is not given, the type is guessed from the value's
prefix (`aws`, `github`, `slack`, `stripe`, `npm`, `pypi`). GitHub, Slack,
Stripe and npm values are checked over HTTPS; AWS access keys and PyPI tokens
cannot be checked on their own, and the result says so. Output is text by
default or a single JSON object with `--format json`. The exit status is 1
when the credential is valid and 0 when it is not. Running `secretsift` with
no subcommand prints the help and exits with status 2.

## Configuration

`secretsift.schema.Config` holds the `scan`, `output`, `rules` and `git`
sections. `Config.from_yaml` and `Config.from_dict` fill in defaults for
anything missing and raise `ConfigError` for data that does not fit;
`Config.to_yaml` writes it back out.

`secretsift.loader.load_config(explicit_path, scan_path)` returns the first
usable config from:

1. `explicit_path`, if given,
2. `.secretscanner.yaml`, `.secretscanner.yml` or `.secretscannerignore` in `scan_path`,
3. the same names at the root of the enclosing git repository (`find_git_root`),
4. `~/.config/secretscanner/config.yaml` or `config.yml`,
5. built-in defaults.

Files that are missing, unreadable or invalid are passed over.

```python
from secretsift.loader import load_config
from secretsift.schema import Config

config = load_config(None, ".")
print(config.output.format)          # "text" unless configured otherwise
print(Config.full().to_yaml())
```

`secretsift.env.EnvConfig.load()` reads `SECRET_SCANNER_MIN_SEVERITY`,
`SECRET_SCANNER_NO_COLOR` (`1` or `true` mean on) and `SECRET_SCANNER_CONFIG`;
`EnvConfig.no_color_env()` is true when `NO_COLOR` or
`SECRET_SCANNER_NO_COLOR` is set. Both accept a mapping in place of
`os.environ`.

## Library use

Entropy and charset detection:

```python
from secretsift.entropy import Charset, calculate_entropy, exceeds_threshold, is_high_entropy

calculate_entropy("aabb")            # 1.0
Charset.detect("deadbeef1234")       # Charset.HEX
is_high_entropy("xxxxxxxxxxxxxxxx")  # False
exceeds_threshold("aabb", 1.0)       # True
```

Binary content and file reading:

```python
from secretsift.binary import is_binary_content
from secretsift.stream import StreamReader

is_binary_content(b"Hello\x00World")   # True

reader = StreamReader()
if not reader.should_skip("config.py", 1024 * 1024):
    for number, line in reader.read_file("config.py"):
        ...
```

`should_skip` is true for files above the size limit or whose first 512 bytes
look binary. `read_file` yields lines numbered from 1 without their line
endings, cuts lines longer than 65536 bytes, and stops at the first line that
is not valid UTF-8.

Allowlists:

```python
from pathlib import Path
from secretsift.allowlist import Allowlist

allowlist = Allowlist()
allowlist.add_pattern("EXAMPLE|example")
allowlist.add_fingerprint("abc123def4")
allowlist.is_allowed("example_value", Path("config.py"))                 # True
allowlist.is_finding_allowed("other", Path("config.py"), "abc123def4")   # True
```

`Allowlist.from_config` builds one from the configuration's allowlist entries
and fingerprints, skipping entries whose pattern is not a valid regex.

Path filtering skips `.git`, `node_modules`, `vendor`, build output, lock
files, minified assets and compiled objects by default, honours a `.gitignore`
at the root, and accepts extra exclude and include globs:

```python
from secretsift.pathfilter import PathFilter, glob_to_regex

path_filter = PathFilter(".", ["**/secrets/**"], [])
path_filter.should_scan("src/app.py")             # True
path_filter.should_scan("app/node_modules/x.js")  # False

glob_to_regex("**/*.py").fullmatch("src/main.py") is not None  # True
```

Verification from code:

```python
from secretsift.verify import detect_secret_type, verify_secret

detect_secret_type("ghp_placeholder")   # "github"
result = verify_secret("token", "pypi")
result.is_valid, result.message
```

## What this package does not do

secretsift provides the pieces listed above but no scanner that ties them
together: there is no built-in set of detection rules, no command that walks a
directory, reads standard input or git history and reports findings, no
report formatters, no baseline files and no redaction or fingerprinting of
findings. The configuration's `rules`, `git` and `output` sections are parsed
and written, but nothing in the package acts on them beyond that.