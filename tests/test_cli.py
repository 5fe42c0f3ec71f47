import json

from typer.testing import CliRunner

from textcase_core.cli import app

runner = CliRunner()


def test_title_default_style():
    result = runner.invoke(app, ["title", "lord of the rings"])
    assert result.exit_code == 0
    assert result.stdout == "Lord of the Rings\n"


def test_title_with_style():
    result = runner.invoke(app, ["title", "up and down with love", "--style", "nyt"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Up and Down With Love"


def test_title_options():
    result = runner.invoke(app, ["title", "NASA rocket", "--no-keep-all-caps"])
    assert result.stdout.strip() == "Nasa Rocket"

    result = runner.invoke(app, ["title", '"hello" world', "--straight-quotes"])
    assert result.stdout.strip() == '"hello" World'

    result = runner.invoke(app, ["title", "one\ntwo", "--multi-line"])
    assert result.stdout == "One\nTwo\n"


def test_unknown_style_exits_with_usage_error():
    result = runner.invoke(app, ["title", "x", "--style", "klingon"])
    assert result.exit_code == 2
    assert "Unknown style" in result.output


def test_reads_stdin():
    result = runner.invoke(app, ["upper"], input="hello there\n")
    assert result.exit_code == 0
    assert result.stdout == "HELLO THERE\n"

    result = runner.invoke(app, ["lower", "-"], input="LOUD\n")
    assert result.stdout == "loud\n"


def test_sentence():
    result = runner.invoke(app, ["sentence", "hello. WORLD"])
    assert result.stdout.strip() == "Hello. World"


def test_convert_json():
    result = runner.invoke(app, ["convert", "a study of love and hope", "--style", "mla", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["style"] == "mla"
    assert payload["title_case"] == "A Study of Love and Hope"
    assert payload["upper_case"] == "A STUDY OF LOVE AND HOPE"


def test_convert_table():
    result = runner.invoke(app, ["convert", "lord of the rings"])
    assert result.exit_code == 0
    assert "Lord of the Rings" in result.stdout
    assert "LORD OF THE RINGS" in result.stdout


def test_styles_lists_every_guide():
    result = runner.invoke(app, ["styles"])
    assert result.exit_code == 0
    for label in ("AMA", "Bluebook", "NY Times", "Wikipedia"):
        assert label in result.stdout
