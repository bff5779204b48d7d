from click.testing import CliRunner
from io import StringIO

from pycpar.cli.app import cli
from pycpar.cli.utils import check_and_write_tabular

import pytest


@pytest.fixture
def runner():
    return CliRunner()


def test_parse_command(runner, tmp_path):
    output = tmp_path / "out.tsv"
    result = runner.invoke(cli, ["parse", "-o", str(output), "red", "#00ff0080"])
    assert result.exit_code == 0
    assert output.read_text().splitlines() == [
        "red\t#ff0000ff\t255\t0\t0\t255",
        "#00ff0080\t#00ff0080\t0\t255\t0\t128",
    ]


def test_parse_command_failure(runner, tmp_path):
    output = tmp_path / "out.tsv"
    result = runner.invoke(cli, ["parse", "-o", str(output), "red", "rgb(1,2)"])
    assert result.exit_code == 1
    assert "rgb(1,2)" in result.output
    assert output.read_text().splitlines() == ["red\t#ff0000ff\t255\t0\t0\t255"]


def test_name_command(runner):
    result = runner.invoke(cli, ["name", "#0ff"])
    assert result.exit_code == 0
    assert "aqua" in result.output

    result = runner.invoke(cli, ["name", "#123456"])
    assert result.exit_code == 1

    result = runner.invoke(cli, ["name", "#12"])
    assert result.exit_code == 1


def test_names_command(runner):
    result = runner.invoke(cli, ["names"])
    assert result.exit_code == 0
    assert "aliceblue\t#f0f8ffff" in result.output
    assert "yellowgreen\t#9acd32ff" in result.output


def test_check_command(runner, tmp_path):
    input = tmp_path / "colors.txt"
    input.write_text("red\n#f\n\nrgb(1, 2, 3)\nNOT_A_REAL_COLOR\n")
    output = tmp_path / "out.tsv"

    result = runner.invoke(cli, ["check", "-o", str(output), str(input)])
    assert result.exit_code == 1
    assert output.read_text().splitlines() == [
        "red\tOK\t#ff0000ff",
        "#f\tSYNTAX_ERROR\t",
        "rgb(1, 2, 3)\tOK\t#010203ff",
        "NOT_A_REAL_COLOR\tNO_COLOR_NAME\t",
    ]


def test_check_command_success(runner, tmp_path):
    input = tmp_path / "colors.txt"
    input.write_text("red\nrgba(0, 0, 0, 0.5)\n")
    output = tmp_path / "out.tsv"

    result = runner.invoke(cli, ["check", "-p", "-o", str(output), str(input)])
    assert result.exit_code == 0
    assert output.read_text().splitlines() == [
        "red\tOK\t#ff0000ff",
        "rgba(0, 0, 0, 0.5)\tOK\t#0000007f",
    ]


def test_check_and_write_tabular():
    output = StringIO()
    failures = check_and_write_tabular(["#fff\n", "#ggg\n", "  \n"], output)
    assert failures == 1
    assert output.getvalue().splitlines() == [
        "#fff\tOK\t#ffffffff",
        "#ggg\tINVALID_NUMBER\t",
    ]
