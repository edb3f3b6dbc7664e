"""Checking whether a secret is live by asking the provider's API."""

from __future__ import annotations

import http.client
import urllib.error
import urllib.request
from dataclasses import dataclass

USER_AGENT = "secretsift"
SUPPORTED_TYPES = "Supported types: aws, github, slack, stripe, npm, pypi"


@dataclass
class VerifyResult:
    """Outcome of a verification attempt."""

    secret_type: str
    is_valid: bool
    message: str
    details: str | None = None


def detect_secret_type(secret: str) -> str:
    """Guess the provider of a secret from its prefix."""
    prefixes = (
        (("AKIA", "ASIA"), "aws"),
        (("ghp_", "gho_", "ghs_"), "github"),
        (("xoxb-", "xoxp-"), "slack"),
        (("sk_live_", "sk_test_"), "stripe"),
        (("npm_",), "npm"),
        (("pypi-",), "pypi"),
    )
    for starts, kind in prefixes:
        if secret.startswith(starts):
            return kind
    return "unknown"


def extract_json_field(text: str, field: str) -> str | None:
    """Pull the string value of a top-level-looking JSON field out of raw text."""
    pattern = f'"{field}":"'
    start = text.find(pattern)
    if start < 0:
        return None
    value_start = start + len(pattern)
    value_end = text.find('"', value_start)
    if value_end < 0:
        return None
    return text[value_start:value_end]


class _RequestFailed(Exception):
    """The HTTP request could not be completed or returned an error status."""


def _get(url: str, secret: str, timeout: float, user_agent: str | None = None) -> tuple[int, str]:
    headers = {"Authorization": f"Bearer {secret}"}
    if user_agent is not None:
        headers["User-Agent"] = user_agent
    request = urllib.request.Request(url, headers=headers, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return response.status, response.read().decode("utf-8", "replace")
    except (OSError, http.client.HTTPException, ValueError) as exc:
        raise _RequestFailed(str(exc)) from exc


def _failed(kind: str, exc: Exception) -> VerifyResult:
    return VerifyResult(kind, False, f"Verification failed: {exc}")


def _verify_aws(secret: str, timeout: float) -> VerifyResult:
    return VerifyResult(
        "aws",
        False,
        "AWS verification requires both access key and secret key",
        "Use 'aws sts get-caller-identity' with both keys to verify",
    )


def _verify_github(secret: str, timeout: float) -> VerifyResult:
    try:
        status, body = _get("https://api.github.com/user", secret, timeout, USER_AGENT)
    except _RequestFailed as exc:
        return _failed("github", exc)
    if status == 200:
        login = extract_json_field(body, "login") or "unknown"
        return VerifyResult("github", True, f"Valid GitHub token for user: {login}")
    return VerifyResult("github", False, f"Invalid or expired token (status: {status})")


def _verify_slack(secret: str, timeout: float) -> VerifyResult:
    try:
        _, body = _get("https://slack.com/api/auth.test", secret, timeout)
    except _RequestFailed as exc:
        return _failed("slack", exc)
    if '"ok":true' in body:
        team = extract_json_field(body, "team") or "unknown"
        user = extract_json_field(body, "user") or "unknown"
        return VerifyResult("slack", True, f"Valid Slack token for {team}/{user}")
    return VerifyResult("slack", False, "Invalid or expired Slack token")


def _verify_stripe(secret: str, timeout: float) -> VerifyResult:
    try:
        status, _ = _get("https://api.stripe.com/v1/balance", secret, timeout)
    except _RequestFailed as exc:
        return _failed("stripe", exc)
    if status == 200:
        mode = "test" if "_test_" in secret else "live"
        return VerifyResult("stripe", True, f"Valid Stripe {mode} key")
    return VerifyResult("stripe", False, f"Invalid Stripe key (status: {status})")


def _verify_npm(secret: str, timeout: float) -> VerifyResult:
    try:
        status, body = _get("https://registry.npmjs.org/-/npm/v1/user", secret, timeout)
    except _RequestFailed as exc:
        return _failed("npm", exc)
    if status == 200:
        name = extract_json_field(body, "name") or "unknown"
        return VerifyResult("npm", True, f"Valid npm token for: {name}")
    return VerifyResult("npm", False, f"Invalid npm token (status: {status})")


def _verify_pypi(secret: str, timeout: float) -> VerifyResult:
    return VerifyResult(
        "pypi",
        False,
        "PyPI token verification requires attempting a publish",
        "Use 'twine check' or attempt a test publish to verify",
    )


_VERIFIERS = {
    "aws": _verify_aws,
    "aws-access-key": _verify_aws,
    "github": _verify_github,
    "github-token": _verify_github,
    "slack": _verify_slack,
    "slack-token": _verify_slack,
    "stripe": _verify_stripe,
    "stripe-key": _verify_stripe,
    "npm": _verify_npm,
    "npm-token": _verify_npm,
    "pypi": _verify_pypi,
    "pypi-token": _verify_pypi,
}


def verify_secret(secret: str, secret_type: str | None = None, timeout: float = 10) -> VerifyResult:
    """Verify a secret against its provider; the type is guessed when not given."""
    kind = secret_type if secret_type is not None else detect_secret_type(secret)
    verifier = _VERIFIERS.get(kind)
    if verifier is None:
        return VerifyResult(
            kind,
            False,
            "Verification not supported for this secret type",
            SUPPORTED_TYPES,
        )
    return verifier(secret, timeout)