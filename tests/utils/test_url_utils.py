import pytest

from sitecrawl.exceptions import ResolutionError, SeedUrlError
from sitecrawl.utils.url_utils import extract_domain, normalize_seed_url, resolve_href, same_domain


def test_seed_gets_https_scheme_by_default():
    assert normalize_seed_url("example.com") == "https://example.com"


def test_seed_keeps_explicit_scheme():
    assert normalize_seed_url("http://example.com/docs") == "http://example.com/docs"


def test_seed_trailing_slash_and_fragment_removed():
    assert normalize_seed_url("https://example.com/") == "https://example.com"
    assert normalize_seed_url("  https://example.com/#top ") == "https://example.com"


@pytest.mark.parametrize("seed", [None, "", "   ", "https://", "http://[::1"])
def test_bad_seed_raises(seed):
    with pytest.raises(SeedUrlError):
        normalize_seed_url(seed)


def test_seed_error_is_a_value_error():
    with pytest.raises(ValueError):
        normalize_seed_url("")


def test_extract_domain_is_lowercase_host():
    assert extract_domain("https://Example.COM:8443/path") == "example.com"
    assert extract_domain("mailto:someone@example.com") == ""


def test_resolve_relative_and_absolute():
    base = "https://example.com/docs/index.html"
    assert resolve_href("intro.html", base) == "https://example.com/docs/intro.html"
    assert resolve_href("/a", base) == "https://example.com/a"
    assert resolve_href("../up", base) == "https://example.com/up"
    assert resolve_href("https://other.com/x", base) == "https://other.com/x"


def test_resolve_protocol_relative_uses_base_scheme():
    assert resolve_href("//example.com/p", "http://example.com") == "http://example.com/p"


def test_resolve_strips_fragment():
    assert resolve_href("/a#section", "https://example.com") == "https://example.com/a"


def test_resolve_keeps_query():
    assert resolve_href("/search?q=1", "https://example.com") == "https://example.com/search?q=1"


def test_resolve_malformed_raises_resolution_error():
    with pytest.raises(ResolutionError) as excinfo:
        resolve_href("http://[::1/broken", "https://example.com")
    assert excinfo.value.base_url == "https://example.com"


def test_same_domain_is_exact_and_case_insensitive():
    assert same_domain("https://EXAMPLE.com/a", "example.com")
    assert not same_domain("https://blog.example.com/a", "example.com")
    assert not same_domain("https://other.com/a", "example.com")
    assert not same_domain("javascript:void(0)", "example.com")


@pytest.mark.parametrize("seed, expected", [
    ("HTTP://example.com", "http://example.com"),
    ("Https://example.com/Docs", "https://example.com/Docs"),
])
def test_seed_scheme_check_is_case_insensitive(seed, expected):
    assert normalize_seed_url(seed) == expected


@pytest.mark.parametrize("seed", ["ftp://example.com", "FILE:///etc/passwd", "ws://example.com"])
def test_seed_with_unsupported_scheme_raises(seed):
    with pytest.raises(SeedUrlError, match="unsupported scheme"):
        normalize_seed_url(seed)


def test_seed_with_port_but_no_scheme_gets_https():
    assert normalize_seed_url("example.com:8080/app") == "https://example.com:8080/app"


def test_seed_host_is_lowercased_but_path_is_not():
    assert normalize_seed_url("https://Example.COM/About") == "https://example.com/About"


def test_resolve_lowercases_host_only():
    assert resolve_href("https://EXAMPLE.com/Path?Q=1", "https://example.com") == "https://example.com/Path?Q=1"
    assert resolve_href("/Path", "https://Example.com") == "https://example.com/Path"
