from typecrab.listing import list_languages, list_schemes
from typecrab.response import Level


def test_list_languages_sorted(tmp_path):
    words = tmp_path / "words"
    words.mkdir()
    for name in ("ru", "en", "de"):
        (words / f"{name}.txt").write_text("word\n")
    response = list_languages(tmp_path)
    assert response.message is None
    assert response.payload == ["de", "en", "ru"]


def test_list_languages_missing_directory(tmp_path):
    response = list_languages(tmp_path)
    assert response.payload == []
    assert response.message == (
        Level.ERROR,
        f"cannot read directory '{tmp_path / 'words'}'",
    )


def test_list_languages_empty(tmp_path):
    (tmp_path / "words").mkdir()
    response = list_languages(tmp_path)
    assert response.payload == []
    assert response.message == (Level.ERROR, "no languages found")


def test_list_schemes_sorted(tmp_path):
    schemes = tmp_path / "schemes"
    schemes.mkdir()
    for name in ("monokai", "catppuccin", "nord"):
        (schemes / f"{name}.css").write_text(":root {}")
    response = list_schemes(tmp_path)
    assert response.payload == ["catppuccin", "monokai", "nord"]
    assert response.is_error is False


def test_list_schemes_empty(tmp_path):
    (tmp_path / "schemes").mkdir()
    response = list_schemes(tmp_path)
    assert response.message == (Level.ERROR, "no color schemes found")


def test_list_schemes_missing_directory(tmp_path):
    response = list_schemes(tmp_path)
    assert response.is_error is True
    assert response.message[1] == f"cannot read directory '{tmp_path / 'schemes'}'"