"""Tests for the command line entry point."""

import json

from gallery_layout.main import main


def test_json_output(capsys):
    assert main(["12", "--complexity", "simple", "--seed", "3"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output['statistics']['room_count'] == 3
    assert output['metadata']['seed'] == 3


def test_ascii_output(capsys):
    assert main(["0", "--format", "ascii"]) == 0
    assert "S" in capsys.readouterr().out


def test_dot_output(capsys):
    assert main(["8", "--format", "dot", "--seed", "1"]) == 0
    assert capsys.readouterr().out.startswith("graph GalleryLayout {")


def test_validate_flag(capsys):
    assert main(["20", "--seed", "2", "--validate"]) == 0
    assert "validation passed" in capsys.readouterr().err.lower()


def test_invalid_config_exit_code():
    assert main(["5", "--items-per-room", "0"]) == 2


def test_negative_item_count_exit_code():
    assert main(["-1"]) == 2
