from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from mostle.presentation.cli import main as cli_main


def test_cli_parser_flags():
    parser = cli_main.create_parser()
    args = parser.parse_args(["seed", "--file", "p.yaml", "--db-url", "sqlite:///x.db"])
    assert args.command == "seed"
    assert args.file == "p.yaml"
    assert args.db_url == "sqlite:///x.db"

    args = parser.parse_args(["serve", "--port", "9000"])
    assert args.port == 9000
    assert args.host == "127.0.0.1"


def test_cli_seed_then_today(tmp_path: Path, capsys):
    db_url = f"sqlite:///{tmp_path / 'cli.db'}"

    assert cli_main.run_cli(["seed", "--db-url", db_url]) == 0
    assert "Seeded: Tech Giants" in capsys.readouterr().out

    assert cli_main.run_cli(["seed", "--db-url", db_url]) == 0
    assert "Seed skipped" in capsys.readouterr().out

    assert cli_main.run_cli(["today", "--json", "--db-url", db_url]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["theme"] == "Tech Giants"
    assert len(payload["objects"]) == 5

    assert cli_main.run_cli(["today", "--db-url", db_url]) == 0
    text = capsys.readouterr().out
    assert "Employees: Company with the most employees" in text
    assert "  - Meta" in text


def test_cli_today_without_puzzle(tmp_path: Path, capsys):
    db_url = f"sqlite:///{tmp_path / 'empty.db'}"
    assert cli_main.run_cli(["today", "--db-url", db_url]) == 1
    assert "No daily game for today" in capsys.readouterr().err


def test_cli_seed_from_yaml_file(tmp_path: Path, capsys):
    puzzle_file = tmp_path / "rivers.yaml"
    puzzle_file.write_text(
        yaml.safe_dump(
            {
                "theme": "Rivers",
                "special_label": "Bridges",
                "objects": [
                    {
                        "name": name,
                        "oldest": 1,
                        "largest": 2,
                        "value": 3,
                        "influence": 4,
                        "special_value": 5,
                    }
                    for name in ["Nile", "Amazon", "Yangtze", "Mississippi", "Danube"]
                ],
            }
        ),
        encoding="utf-8",
    )
    db_url = f"sqlite:///{tmp_path / 'yaml.db'}"

    assert cli_main.run_cli(["seed", "--file", str(puzzle_file), "--db-url", db_url]) == 0
    assert "Seeded: Rivers" in capsys.readouterr().out


def test_load_puzzle_file_requires_objects(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("theme: Nothing\n", encoding="utf-8")
    with pytest.raises(ValueError):
        cli_main.load_puzzle_file(str(bad))
