import pytest

from core.errors import AccessDeniedError, MissingAttributeError
from core.models import LocaleFile
from core.paths import tokenize
from patterns.reducer import Reducer
from patterns.substitutor import fill_placeholders, substitute


def test_fill_all_placeholders():
    lf = LocaleFile(code="de", name="german", tag="web")
    assert fill_placeholders("./<tag>/<locale_name>/<locale_code>.yml", lf) == "./web/german/de.yml"


def test_fill_without_placeholders_is_identity():
    assert fill_placeholders("./locales/en.yml", LocaleFile()) == "./locales/en.yml"


def test_missing_attribute_raises():
    with pytest.raises(MissingAttributeError) as exc:
        fill_placeholders("./<locale_name>/<locale_code>.yml", LocaleFile(code="de"))

    assert exc.value.placeholder == "<locale_name>"
    assert "<locale_name>" in str(exc.value)


def test_substitute_returns_absolute_path(tmp_path):
    path = substitute("./config/<locale_code>.yml", LocaleFile(code="en"), tmp_path)

    assert path.is_absolute()
    assert path == (tmp_path / "config" / "en.yml").resolve()


def test_substitute_outside_root_denied(tmp_path):
    with pytest.raises(AccessDeniedError):
        substitute("../<locale_code>.yml", LocaleFile(code="en"), tmp_path)


@pytest.mark.parametrize(
    "pattern",
    [
        "./<tag>/<locale_name>/<locale_code>.yml",
        "./config/<locale_code>.lproj/<tag>.<locale_name>",
        "./res/values-<locale_code>/<tag>_<locale_name>.xml",
    ],
)
def test_substitute_then_reduce_round_trip(tmp_path, pattern):
    original = LocaleFile(code="pt-BR", name="portuguese", tag="mobile")
    path = substitute(pattern, original, tmp_path)
    rel = path.relative_to(tmp_path.resolve())

    reduced = Reducer(pattern).reduce(tokenize(str(rel)))

    assert (reduced.code, reduced.name, reduced.tag) == ("pt-BR", "portuguese", "mobile")
