"""Test the batch scoring entry point."""

import json

import pandas as pd
import pytest
from omegaconf import OmegaConf

import main
from postchecker.scoring.config import ScorerConfig
from postchecker.scoring.engine import RuleEngine


@pytest.fixture
def config():
    """Create a config without language detection or logging setup."""
    return OmegaConf.create({"scorer": {"detect_language": False}})


def test_load_default_config():
    """Test the bundled default config loads."""
    config = main.load_config()
    assert config.scorer.default_language == "en"
    assert config.logging.level == "INFO"


def test_load_missing_config(tmp_path):
    """Test a missing config file is reported."""
    with pytest.raises(FileNotFoundError):
        main.load_config(str(tmp_path / "missing.yaml"))


def test_score_csv(tmp_path, config):
    """Test scoring posts from a CSV file."""
    source = tmp_path / "posts.csv"
    pd.DataFrame(
        [
            {"text": "Buy now #deal", "platform": "twitter", "language": "en"},
            {"text": "hello", "platform": "myspace", "language": ""},
            {"text": "Klik hier", "platform": "instagram", "language": "nl"},
        ]
    ).to_csv(source, index=False)
    destination = tmp_path / "scores.jsonl"

    assert main.main(str(source), str(destination), config) == 0

    rows = [json.loads(line) for line in destination.read_text().splitlines() if line]
    assert [row["row"] for row in rows] == [0, 2]
    assert rows[0]["action"] == 15
    assert rows[0]["engagement"] == 20
    assert rows[1]["language"] == "nl"
    assert rows[1]["feedback"][0]["kind"] == "success"


def test_score_jsonl_without_language(tmp_path, capsys, config):
    """Test JSON lines input with missing language values."""
    source = tmp_path / "posts.jsonl"
    source.write_text(
        "\n".join(
            [
                json.dumps({"text": "", "platform": "linkedin"}),
                json.dumps({"text": "Buy now", "platform": "twitter", "language": "en"}),
            ]
        )
    )

    assert main.main(str(source), None, config) == 0

    rows = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
    assert len(rows) == 2
    assert rows[0]["language"] == "en"
    assert len(rows[0]["feedback"]) == 4


def test_score_posts_skips_invalid_platform(caplog):
    """Test rows with unsupported platforms are skipped."""
    engine = RuleEngine(ScorerConfig(detect_language=False))
    df = pd.DataFrame([{"text": "hello", "platform": "myspace"}])

    results = main.score_posts(engine, df)
    assert results.empty
    assert "Skipped 1/1 rows" in caplog.text


def test_read_posts_validation(tmp_path):
    """Test unsupported formats and missing columns are rejected."""
    txt = tmp_path / "posts.txt"
    txt.write_text("hello")
    with pytest.raises(ValueError, match="Unsupported input format"):
        main.read_posts(str(txt))

    csv = tmp_path / "posts.csv"
    pd.DataFrame([{"body": "hello"}]).to_csv(csv, index=False)
    with pytest.raises(ValueError, match="Missing input columns: platform, text"):
        main.read_posts(str(csv))

    with pytest.raises(FileNotFoundError):
        main.read_posts(str(tmp_path / "missing.csv"))
