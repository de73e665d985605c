"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from planegeo.cli import main
from planegeo.geometry import Point, Polygon
from planegeo.svg_io import extract_polygons_from_svg


SQUARE_AND_TRIANGLE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">'
    '<rect x="0" y="0" width="10" height="10"/>'
    '<polygon points="12,0 18,0 12,6"/>'
    '</svg>'
)


@pytest.fixture
def svg_file(tmp_path):
    path = tmp_path / "input.svg"
    path.write_text(SQUARE_AND_TRIANGLE)
    return str(path)


def test_inset_writes_quadrilaterals(svg_file, tmp_path):
    output = tmp_path / "output.svg"
    runner = CliRunner()

    result = runner.invoke(main, ['inset', svg_file, '--all=-1', '-o', str(output)])

    assert result.exit_code == 0
    assert "Skipping shape 2: only quadrilaterals can be inset, got 3 vertices" in result.output

    polygons, metadata = extract_polygons_from_svg(output.read_text())
    assert metadata['viewBox'] == '0 0 20 20'
    assert polygons == [Polygon([Point(1, 1), Point(1, 9), Point(9, 9), Point(9, 1)])]


def test_inset_per_side_to_stdout(svg_file):
    runner = CliRunner()

    result = runner.invoke(main, ['inset', svg_file, '--top', '2'])

    assert result.exit_code == 0
    assert 'points="0.00,-2.00 0.00,10.00 10.00,10.00 10.00,-2.00"' in result.output


def test_inset_reads_stdin():
    runner = CliRunner()

    result = runner.invoke(main, ['inset', '--all', '1'], input=SQUARE_AND_TRIANGLE)

    assert result.exit_code == 0
    assert 'points="-1.00,-1.00 -1.00,11.00 11.00,11.00 11.00,-1.00"' in result.output


def test_inset_missing_file(tmp_path):
    runner = CliRunner()

    result = runner.invoke(main, ['inset', str(tmp_path / "nope.svg")])

    assert result.exit_code == 1
    assert "Error reading input" in result.output


def test_inset_reports_parallel_edges():
    # Four vertices, but the first two edges are collinear
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<polygon points="0,0 1,0 2,0 1,1"/>'
        '</svg>'
    )
    runner = CliRunner()

    result = runner.invoke(main, ['inset', '--all', '1'], input=svg)

    assert result.exit_code == 0
    assert "Skipping shape 1: neighbouring edges are parallel" in result.output
    assert "<polygon" not in result.output


def test_inset_without_shapes():
    runner = CliRunner()

    result = runner.invoke(main, ['inset'], input='<svg xmlns="http://www.w3.org/2000/svg"/>')

    assert result.exit_code == 1
    assert "No polygons found" in result.output


def test_intersect_segment(svg_file):
    runner = CliRunner()

    result = runner.invoke(main, ['intersect', svg_file, '--line', '-1', '5', '11', '5'])

    assert result.exit_code == 0
    assert result.output.splitlines() == ['0,5', '10,5']


def test_intersect_infinite_line(svg_file):
    runner = CliRunner()

    result = runner.invoke(main, ['intersect', svg_file, '--line', '0', '3', '1', '3', '--infinite'])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[:2] == ['0,3', '10,3']
    assert sorted(lines[2:]) == ['12,3', '15,3']
