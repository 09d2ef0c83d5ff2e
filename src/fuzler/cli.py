from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Tuple, TypedDict

import typer
import yaml
from rapidfuzz.distance import Jaro

from .config import FuzlerConfig, load_config
from .ranking import top_matches
from .scoring import similarity_score

app = typer.Typer(help="Fuzler fuzzy similarity CLI.", no_args_is_help=True)


class MatchPayload(TypedDict):
    key: str
    score: float


class BenchPayload(TypedDict):
    score: float
    mean_us: float
    jaro_mean_us: float


@app.command()
def score(
    a: str = typer.Argument(..., help="First string."),
    b: str = typer.Argument(..., help="Second string."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the similarity score between two strings."""
    cfg = _load_cli_config(config)
    typer.echo(f"{similarity_score(a, b, cfg)}")


@app.command()
def rank(
    query: str = typer.Argument(..., help="Query to match against candidates."),
    candidates: Path = typer.Option(
        ..., "--candidates", exists=True, readable=True, dir_okay=False
    ),
    limit: int = typer.Option(5, "--limit", "-n", help="Max matches to print."),
    min_score: float = typer.Option(0.0, "--min-score", help="Drop weaker matches."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Rank candidate lines from a file against the query and emit JSON."""
    cfg = _load_cli_config(config)
    lines = [
        line.strip()
        for line in candidates.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]
    matches: List[MatchPayload] = [
        {"key": item.key, "score": item.score}
        for item in top_matches(
            query, lines, limit=limit, min_score=min_score, config=cfg
        )
    ]
    typer.echo(json.dumps({"query": query, "matches": matches}, indent=2))


@app.command()
def bench(
    iterations: int = typer.Option(200, "--iterations", "-i", min=1),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Time the scorer on a fixed set of inputs, alongside plain Jaro for reference."""
    cfg = _load_cli_config(config)
    results: Dict[str, BenchPayload] = {}
    for name, (a, b) in _bench_inputs().items():
        results[name] = {
            "score": similarity_score(a, b, cfg),
            "mean_us": _time_call(lambda: similarity_score(a, b, cfg), iterations),
            "jaro_mean_us": _time_call(lambda: Jaro.similarity(a, b), iterations),
        }
    typer.echo(json.dumps(results, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = FuzlerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> FuzlerConfig:
    """Load the optional YAML config, surfacing format errors as CLI errors."""
    try:
        return load_config(path)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _bench_inputs() -> Dict[str, Tuple[str, str]]:
    return {
        "tiny - identical": ("aaa", "aaa"),
        "tiny - off by one": ("aaa", "aab"),
        "small - fuzzy": ("cia", "ciao bella"),
        "medium - sentence": ("elixirbench", "benchmarking example elixirbench"),
        "large - random(1K)": (os.urandom(512).hex(), os.urandom(512).hex()),
    }


def _time_call(func: Callable[[], object], iterations: int) -> float:
    started = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - started
    return round(elapsed / iterations * 1_000_000, 3)


if __name__ == "__main__":
    main()
