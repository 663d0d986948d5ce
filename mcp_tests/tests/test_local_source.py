import pytest

from core.errors import NotFoundError, ValidationError
from core.models import RemoteLocale, Source
from sources.local_source import LocalLocaleSource


def _touch(root, rel):
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("x", encoding="utf-8")


def base_locales():
    return [
        RemoteLocale(id="en-locale-id", name="english", code="en"),
        RemoteLocale(id="de-locale-id", name="de", code="de"),
    ]


@pytest.mark.asyncio
async def test_locale_files_single_code(tmp_path):
    _touch(tmp_path, "tests/en.yml")

    src = LocalLocaleSource(source=Source(file="./tests/<locale_code>.yml", file_format="yml"), project_root=tmp_path)
    out = await src.locale_files([])

    assert len(out) == 1
    assert out[0].code == "en"
    assert out[0].name == ""
    assert out[0].id == ""
    assert out[0].exists_remote is False
    assert out[0].path == str((tmp_path / "tests" / "en.yml").resolve())
    assert out[0].file_format == "yml"


@pytest.mark.asyncio
async def test_locale_files_name_with_directory_wildcard(tmp_path):
    _touch(tmp_path, "tests/en.yml")

    src = LocalLocaleSource(source=Source(file="./**/<locale_name>.yml"), project_root=tmp_path)
    out = await src.locale_files([])

    assert [(f.code, f.name) for f in out] == [("", "en")]


@pytest.mark.asyncio
async def test_locale_files_reconciled_with_remote(tmp_path):
    _touch(tmp_path, "config/english/en.yml")
    _touch(tmp_path, "config/spanish/es.yml")

    source = Source(file="./config/<locale_name>/<locale_code>.yml")
    out = await LocalLocaleSource(source=source, project_root=tmp_path).locale_files(base_locales())

    by_code = {f.code: f for f in out}
    assert by_code["en"].exists_remote is True
    assert by_code["en"].id == "en-locale-id"
    assert by_code["es"].exists_remote is False
    assert by_code["es"].name == "spanish"


@pytest.mark.asyncio
async def test_locale_files_configured_locale_id(tmp_path):
    _touch(tmp_path, "locales/main.yml")

    source = Source(file="./locales/*.yml", params={"locale_id": "de-locale-id"})
    out = await LocalLocaleSource(source=source, project_root=tmp_path).locale_files(base_locales())

    assert out[0].id == "de-locale-id"
    assert out[0].code == "de"


@pytest.mark.asyncio
async def test_locale_files_tags(tmp_path):
    _touch(tmp_path, "config/web/en.yml")
    _touch(tmp_path, "config/mobile/en.yml")

    source = Source(file="./config/<tag>/<locale_code>.yml")
    out = await LocalLocaleSource(source=source, project_root=tmp_path).locale_files([])

    assert sorted(f.tag for f in out) == ["mobile", "web"]


@pytest.mark.asyncio
async def test_locale_files_no_match_raises_with_absolute_pattern(tmp_path):
    src = LocalLocaleSource(source=Source(file="./missing/<locale_code>.yml"), project_root=tmp_path)

    with pytest.raises(NotFoundError) as exc:
        await src.locale_files([])

    assert str(tmp_path.resolve() / "missing" / "<locale_code>.yml") in str(exc.value)


@pytest.mark.asyncio
async def test_locale_files_invalid_pattern_raises_before_glob(tmp_path):
    src = LocalLocaleSource(source=Source(file="./*/*/en.yml"), project_root=tmp_path)

    with pytest.raises(ValidationError):
        await src.locale_files([])


@pytest.mark.asyncio
async def test_locale_files_rejects_extension_of_other_format(tmp_path):
    _touch(tmp_path, "locales/en.json")

    src = LocalLocaleSource(source=Source(file="./locales/<locale_code>.json", file_format="yml"), project_root=tmp_path)
    with pytest.raises(ValidationError) as exc:
        await src.locale_files([])
    assert "does not equal 'yml/yaml'" in str(exc.value)


@pytest.mark.asyncio
async def test_locale_files_format_from_params_checks_extension(tmp_path):
    _touch(tmp_path, "locales/en.yml")

    source = Source(file="./locales/<locale_code>.yml", params={"file_format": "json"})
    with pytest.raises(ValidationError):
        await LocalLocaleSource(source=source, project_root=tmp_path).locale_files([])
