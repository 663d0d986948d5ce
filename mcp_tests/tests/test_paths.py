import pytest

from core.errors import AccessDeniedError
from core.paths import join_tokens, relative_display, resolve_under_root, tokenize


def test_tokenize_drops_empty_and_dot_segments():
    assert tokenize("./a/b") == ["a", "b"]
    assert tokenize("a//b/./c/") == ["a", "b", "c"]
    assert tokenize("././a") == ["a"]
    assert tokenize("/abs/path.yml") == ["abs", "path.yml"]
    assert tokenize("") == []
    assert tokenize(None) == []


def test_tokenize_keeps_dot_prefixed_names():
    assert tokenize("./.abc/..x/.strings") == [".abc", "..x", ".strings"]


def test_tokenize_custom_separator():
    assert tokenize(r".\a\\b", sep="\\") == ["a", "b"]


def test_join_tokens():
    assert join_tokens(["a", "b"]) == "a/b"
    assert join_tokens(["a", "b"], absolute=True) == "/a/b"


def test_resolve_under_root(tmp_path):
    p = resolve_under_root(tmp_path, "./locales/en.yml")
    assert p == (tmp_path / "locales" / "en.yml").resolve()


def test_resolve_under_root_denies_escape(tmp_path):
    with pytest.raises(AccessDeniedError):
        resolve_under_root(tmp_path, "../outside/en.yml")


def test_relative_display(tmp_path):
    assert relative_display(tmp_path / "a" / "b.yml", tmp_path) == "a/b.yml"
    assert relative_display("/elsewhere/x.yml", tmp_path) == "/elsewhere/x.yml"
