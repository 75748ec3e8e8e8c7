import json
import os

import click
from click.testing import CliRunner

from modgrab.cli import main, prompt_selection

from tests.conftest import (
    SEARCH_URL,
    SODIUM_DEPENDENCIES,
    find_call,
    mock_dependency_titles,
    mock_sodium,
)


def invoke(args, input="1\n"):
    return CliRunner().invoke(main, args, input=input)


def test_downloads_without_dependencies(mocked, tmp_path):
    mock_sodium(mocked)
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        result = invoke(["sodium", "--version", "1.20.1", "--loader", "fabric"])

        assert result.exit_code == 0, result.output
        assert os.listdir(".") == ["sodium-fabric-1.20.1.jar"]
        with open("sodium-fabric-1.20.1.jar", "rb") as f:
            assert f.read() == b"sodium-jar"
    assert "Sodium" in result.output
    assert "Mod dependencies:" not in result.output
    assert "Saved sodium-fabric-1.20.1.jar successfully!" in result.output


def test_prints_dependencies_in_order(mocked, tmp_path):
    mock_sodium(mocked, dependencies=SODIUM_DEPENDENCIES)
    mock_dependency_titles(mocked)
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        result = invoke(["sodium", "-v", "1.20.1"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    start = lines.index("Mod dependencies:")
    assert lines[start + 1 : start + 3] == ["Fabric API (required)", "Mod Menu (optional)"]
    assert lines[-1] == "Saved sodium-fabric-1.20.1.jar successfully!"


def test_no_projects_found(mocked, tmp_path):
    mocked.get(SEARCH_URL, payload={"hits": []})
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        result = invoke(["unknownmod", "-v", "1.20.1"])
        assert os.listdir(".") == []

    assert result.exit_code != 0
    assert "No projects matching Minecraft version 1.20.1 were found" in result.output


def test_cancelled_prompt(mocked, tmp_path):
    mocked.get(SEARCH_URL, payload={"hits": [{"project_id": "AANobbMI", "title": "Sodium"}]})
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        result = invoke(["sodium", "-v", "1.20.1"], input=None)
        assert os.listdir(".") == []

    assert result.exit_code == 1
    assert "Aborted" in result.output


def test_loader_from_config_file(mocked, tmp_path):
    mocked.get(SEARCH_URL, payload={"hits": []})
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        with open("modgrab.toml", "w") as f:
            f.write('loader = "quilt"\n')
        result = invoke(["sodium", "-v", "1.20.1", "-c", "modgrab.toml"])

    assert result.exit_code != 0
    facets = json.loads(find_call(mocked, "/v2/search").kwargs["params"]["facets"])
    assert facets == [["versions:1.20.1"], ["categories:quilt"]]


def test_loader_flag_overrides_config(mocked, tmp_path):
    mocked.get(SEARCH_URL, payload={"hits": []})
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        with open("modgrab.toml", "w") as f:
            f.write('loader = "quilt"\n')
        invoke(["sodium", "-v", "1.20.1", "-c", "modgrab.toml", "-l", "forge"])

    facets = json.loads(find_call(mocked, "/v2/search").kwargs["params"]["facets"])
    assert facets[1] == ["categories:forge"]


def test_output_dir(mocked, tmp_path):
    mock_sodium(mocked)
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        result = invoke(["sodium", "-v", "1.20.1", "-o", "mods"])
        assert result.exit_code == 0, result.output
        assert os.listdir("mods") == ["sodium-fabric-1.20.1.jar"]


def test_query_is_required():
    result = invoke([])
    assert result.exit_code == 2


def test_tool_version():
    result = invoke(["-V"])
    assert result.exit_code == 0
    assert "modgrab" in result.output


def test_prompt_selection_returns_zero_based_index():
    runner = CliRunner()

    @click.command()
    def pick():
        index = prompt_selection(["Sodium", "Iris Shaders", "Lithium"])
        click.echo(f"index={index}")

    result = runner.invoke(pick, input="2\n")
    assert "Iris Shaders" in result.output
    assert "index=1" in result.output


def test_debug_logs_error_details(mocked, tmp_path):
    mocked.get(SEARCH_URL, payload={"hits": []})
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        result = invoke(["unknownmod", "-v", "1.20.1", "--debug"])

    assert result.exit_code == 1
    assert "'code': 'E602'" in result.output
    assert "'type': 'NoMatchingProjectsError'" in result.output


def test_loader_is_lowercased(mocked, tmp_path):
    mocked.get(SEARCH_URL, payload={"hits": []})
    with CliRunner().isolated_filesystem(temp_dir=tmp_path):
        invoke(["sodium", "-v", "1.20.1", "-l", "Fabric"])

    facets = json.loads(find_call(mocked, "/v2/search").kwargs["params"]["facets"])
    assert facets[1] == ["categories:fabric"]
