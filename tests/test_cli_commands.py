# tests/test_cli_commands.py

import subprocess
import sys

import pytest
import typer.testing
import yaml

from webroots.cli import app


@pytest.fixture
def config_file(tmp_path):
    config = {
        "pub_root": "/app/pub",
        "stores": [
            {"code": "default", "web_url": "http://shop.test/"},
            {"code": "cdn", "web_url": "http://www.cdn.test/", "media_url": "http://cdn.test/m/"},
        ],
    }
    path = tmp_path / "webroots.yaml"
    path.write_text(yaml.dump(config))
    return path


@pytest.fixture
def runner():
    return typer.testing.CliRunner()


class TestCLI:
    def test_normalize(self, runner):
        result = runner.invoke(app, ["normalize", "https://shop.test/index.php/media/a.png"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "http://shop.test/media/a.png"

    def test_is_local(self, runner, config_file):
        result = runner.invoke(app, ["is-local", "https://cdn.test/m/a.png", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "local" in result.stdout

    def test_is_local_external(self, runner, config_file):
        result = runner.invoke(app, ["is-local", "http://othersite.com/x.png", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "external" in result.stdout

    def test_to_path(self, runner, config_file):
        result = runner.invoke(
            app,
            ["to-path", "http://shop.test/static/version123456/frontend/img.png", "--config", str(config_file)],
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "/app/pub/static/frontend/img.png"

    def test_to_path_external(self, runner, config_file):
        result = runner.invoke(app, ["to-path", "http://othersite.com/x.png", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "does not appear to be a local file" in result.output

    def test_to_url(self, runner, config_file):
        result = runner.invoke(app, ["to-url", "/app/pub/media/catalog/img.png", "--config", str(config_file)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "http://shop.test/media/catalog/img.png"

    def test_to_url_unmatched(self, runner, config_file):
        result = runner.invoke(app, ["to-url", "/unrelated/path.png", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "is not matched with a URL" in result.output

    def test_verbose_trace(self, runner, config_file):
        result = runner.invoke(app, ["to-path", "http://cdn.test/m/a.png", "--config", str(config_file), "-v"])

        assert result.exit_code == 0
        assert "[url->path]" in result.output
        assert "/app/pub/media/a.png" in result.output

    def test_stores(self, runner, config_file):
        result = runner.invoke(app, ["stores", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Pub root: /app/pub" in result.stdout
        assert "http://cdn.test/m/" in result.stdout
        assert "http://www.cdn.test/static/" in result.stdout

    def test_invalid_config(self, runner, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("stores: []\n")

        result = runner.invoke(app, ["to-url", "a.png", "--config", str(config)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_blank_pub_root(self, runner, tmp_path):
        config = tmp_path / "blank.yaml"
        config.write_text('pub_root: "  "\nstores:\n  - code: default\n    web_url: http://shop.test/\n')

        for command in (["to-url", "a.png"], ["stores"]):
            result = runner.invoke(app, [*command, "--config", str(config)])

            assert result.exit_code == 1
            assert "Error:" in result.output
            assert "cannot be blank" in result.output

    @pytest.mark.parametrize(
        "command, description",
        [
            ("normalize", "Print the URL in the form used for base URL matching"),
            ("to-path", "Print the local filename behind a store URL"),
            ("to-url", "Print the current store URL for a local filename"),
            ("stores", "List configured stores and their base URLs"),
        ],
    )
    def test_command_help_has_description(self, runner, command, description):
        result = runner.invoke(app, [command, "--help"])

        assert result.exit_code == 0
        assert description in result.output

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(app, ["to-url", "a.png", "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 2

    def test_diagnose_command(self):
        result = subprocess.run([sys.executable, "-m", "webroots.cli", "diagnose"], capture_output=True, text=True)

        assert result.returncode == 0
        assert "Dependencies" in result.stdout
        assert "Pydantic" in result.stdout
