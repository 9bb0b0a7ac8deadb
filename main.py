"""Batch scoring of social media posts."""

import logging
from typing import Any

import pandas as pd
from omegaconf import DictConfig, OmegaConf
from path import Path

from postchecker import InvalidPlatformError, RuleEngine
from postchecker.common import RootConfig

logger = logging.getLogger(__name__)


def load_config(config_path: str | None = None) -> DictConfig:
    """Load configuration from file."""

    if not config_path:
        config_path = f"{Path(__file__).parent}/config/default.yaml"
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return OmegaConf.load(path)


def read_posts(source: str) -> pd.DataFrame:
    """Read posts from a CSV, JSON or JSON lines file."""
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {source}")

    if path.ext == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    elif path.ext in (".jsonl", ".ndjson"):
        df = pd.read_json(path, lines=True, dtype=False)
    elif path.ext == ".json":
        df = pd.read_json(path, dtype=False)
    else:
        raise ValueError(f"Unsupported input format: {path.ext}")

    missing = {"text", "platform"} - set(df.columns)
    if missing:
        raise ValueError(f"Missing input columns: {', '.join(sorted(missing))}")
    return df


def score_posts(engine: RuleEngine, df: pd.DataFrame) -> pd.DataFrame:
    """Score every post, skipping rows with an unsupported platform."""
    records: list[dict[str, Any]] = []
    skipped = 0

    for index, row in df.iterrows():
        text = row["text"] if isinstance(row["text"], str) else ""
        language = row.get("language")
        if not isinstance(language, str) or not language.strip():
            language = None

        try:
            result = engine.analyze(text, str(row["platform"]), language)
        except InvalidPlatformError as e:
            logger.warning("Skipping row %s: %s", index, e)
            skipped += 1
            continue

        records.append({"row": index, "platform": row["platform"], **result.to_record()})

    if skipped:
        logger.warning("Skipped %d/%d rows", skipped, len(df))
    return pd.DataFrame.from_records(records)


def main(
    source: str,
    destination: str | None = None,
    config: DictConfig | None = None,
) -> int:
    """Main entry point."""
    config = load_config() if config is None else config
    config = RootConfig(**OmegaConf.to_container(config, resolve=True))

    engine = RuleEngine.from_config(config.scorer)

    df = read_posts(source)
    logger.info(f"Read {len(df)} posts from {source}")
    if df.empty:
        logger.info("No posts to score, exiting")
        return 0

    results = score_posts(engine, df)
    logger.info(f"Scored {len(results)}/{len(df)} posts")

    output = results.to_json(orient="records", lines=True, force_ascii=False)
    if destination:
        Path(destination).write_text(output, encoding="utf-8")
        logger.info(f"Wrote results to {destination}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Score social media posts")
    parser.add_argument("source", type=str, help="CSV, JSON or JSON lines file with posts")
    parser.add_argument("--output", type=str, default=None, help="JSON lines output file")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    args = parser.parse_args()

    raise SystemExit(main(args.source, args.output, load_config(args.config)))
