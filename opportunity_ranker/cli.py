"""
Opportunity Ranker — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate inputs.
  4. Run the ranking pipeline.
  5. Report result to stdout (and optionally to CSV/JSON files).

Install and run::

    pip install -e .
    opportunity-ranker --help
    opportunity-ranker validate-config
    opportunity-ranker demo --seed 7
    opportunity-ranker recommend --postings postings.json --profile me.json \\
        --interactions log.json --seed 42 --top 5
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="opportunity-ranker",
    help="Personalized ranking of opportunity postings for a profile.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from opportunity_ranker.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from opportunity_ranker.utils.logging import configure_logging
    configure_logging(config.logging)


def _report(ranked, profile_id, top, search, category, reasons, output_dir, config):
    """Filter, print and optionally export a ranking."""
    from opportunity_ranker.ranking.filters import filter_by_category, search_postings, top_n
    from opportunity_ranker.reporting.export import write_ranking_files
    from opportunity_ranker.reporting.formatters import format_ranking_table

    shown = search_postings(ranked, search)
    shown = filter_by_category(shown, category)
    shown = top_n(shown, top if top is not None else config.output.default_top_n)

    typer.echo(
        format_ranking_table(
            shown, profile_id, show_reasons=reasons, weights=config.scoring
        )
    )

    if output_dir:
        csv_path, json_path = write_ranking_files(shown, Path(output_dir), profile_id)
        typer.echo("")
        typer.echo(f"  CSV:  {csv_path}")
        typer.echo(f"  JSON: {json_path}")

    typer.echo("")
    typer.echo(f"[OK] {len(shown)} of {len(ranked)} posting(s) shown.")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend_cmd(
    postings_file: str = typer.Option(
        ...,
        "--postings",
        help="JSON file with the postings catalog.",
    ),
    profile_file: str = typer.Option(
        ...,
        "--profile",
        help="JSON file with the profile to rank for.",
    ),
    interactions_file: Optional[str] = typer.Option(
        None,
        "--interactions",
        help="JSON file with the profile's interaction log.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the trend noise. Overrides config [trend] seed.",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        help="How many postings to show. Defaults to config [output] default_top_n.",
    ),
    search: Optional[str] = typer.Option(
        None,
        "--search",
        help="Only show postings whose title or skills contain this text.",
    ),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help="Only show postings of this exact category.",
    ),
    reasons: bool = typer.Option(
        False,
        "--reasons/--no-reasons",
        help="Print match reasons under each posting.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Also write CSV and JSON files to this directory.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank a postings catalog for one profile."""
    from opportunity_ranker.ingestion.json_loader import (
        load_interactions,
        load_postings,
        load_profile,
    )
    from opportunity_ranker.ranking.pipeline import RecommendationPipeline

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        postings = load_postings(Path(postings_file))
        profile = load_profile(Path(profile_file))
        interactions = (
            load_interactions(Path(interactions_file)) if interactions_file else []
        )
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] Could not load input:\n{exc}", err=True)
        raise typer.Exit(code=1)

    pipeline = RecommendationPipeline(config=config, seed=seed)
    ranked = pipeline.recommend(postings, profile, interactions)

    _report(ranked, profile.profile_id, top, search, category, reasons, output_dir, config)


@app.command("demo")
def demo(
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for mock interactions and trend noise.",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        help="How many postings to show.",
    ),
    reasons: bool = typer.Option(
        True,
        "--reasons/--no-reasons",
        help="Print match reasons under each posting.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank the sample catalog for the mock student profile."""
    import numpy as np

    from opportunity_ranker.ranking.pipeline import RecommendationPipeline
    from opportunity_ranker.simulation.mock import (
        generate_mock_interactions,
        generate_mock_profile,
        sample_postings,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    rng = np.random.default_rng(seed if seed is not None else config.trend.seed)
    postings = sample_postings()
    profile = generate_mock_profile()
    interactions = generate_mock_interactions(profile.profile_id, postings, rng)

    typer.echo(f"Generated {len(interactions)} mock interaction(s):")
    for interaction in interactions:
        typer.echo(f"  posting {interaction.posting_id}: {interaction.kind}")

    ranked = RecommendationPipeline(config=config, rng=rng).recommend(
        postings, profile, interactions
    )
    _report(ranked, profile.profile_id, top, None, None, reasons, None, config)


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    show_full: bool = typer.Option(
        False,
        "--show-full",
        help="Print the full merged config as JSON.",
    ),
) -> None:
    """Validate and display the current configuration."""
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    s = config.scoring
    typer.echo(
        f"  Criterion weights: skills={s.skills_weight} department={s.department_weight} "
        f"experience={s.experience_weight} interest={s.interest_weight}"
    )
    typer.echo(f"  Score bounds:      [{s.floor}, {s.ceiling}] (neutral {s.neutral_score})")
    typer.echo(f"  Trend seed:        {config.trend.seed}")
    typer.echo(f"  Output dir:        {config.output.output_dir}")
    typer.echo(f"  Log level:         {config.logging.level}")
    typer.echo(f"  Debug mode:        {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
