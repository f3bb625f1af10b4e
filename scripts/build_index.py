"""Aggregate content files into the published index."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from boardshort.config import configure_logging, get_settings
from boardshort.ingest.aggregator import build_index

app = typer.Typer(help="Build content/index.json from per-day and sidecar JSON files")


@app.command()
def run(
    content_dir: Optional[Path] = typer.Option(None, help="Directory of content JSON files"),
    output_path: Optional[Path] = typer.Option(None, help="Where to write the merged index"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Run the aggregation."""
    configure_logging(verbose)
    settings = get_settings()
    content_dir = content_dir or settings.content_dir
    output_path = output_path or settings.index_path

    batch = build_index(content_dir, output_path)
    if batch.issues:
        typer.secho("Content issues detected:", fg=typer.colors.YELLOW)
        for issue in batch.issues:
            typer.secho(f"- {issue}", fg=typer.colors.YELLOW)

    typer.secho(
        f"Built {output_path} — {len(batch.days)} days, {batch.image_count} images",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":  # pragma: no cover
    app()
