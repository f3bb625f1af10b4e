"""Load and enrich the archive the way the site does, and print or dump the result."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from boardshort.config import configure_logging, get_settings
from boardshort.processing.content import ArchiveContext, ContentProcessor
from boardshort.processing.timeline import build_strips, footer_count

app = typer.Typer(help="Preview the processed archive: weeks, days, hero and navigation order")


def _dump(context: ArchiveContext) -> List[dict]:
    return [
        {
            "week_start": bucket.week_start,
            "days": [
                {"label": day.label, **day.model_dump(mode="json", exclude_none=True)}
                for day in bucket.days
            ],
        }
        for bucket in context.weeks()
    ]


@app.command()
def run(
    source: Optional[str] = typer.Option(None, help="Index URL or path (defaults to configured source)"),
    output_path: Optional[Path] = typer.Option(None, help="Write the processed weeks as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Run one processing pass."""
    configure_logging(verbose)
    settings = get_settings()
    context = ContentProcessor(settings).load(source)

    if context.hero is not None:
        typer.secho(
            f"Hero: {context.hero.caption or context.hero.src} ({context.hero_index + 1} / {context.image_count})",
            fg=typer.colors.GREEN,
        )

    strips = {strip.day.date: strip for strip in build_strips(context.days, settings)}
    for bucket in context.weeks():
        typer.secho(f"Week of {bucket.week_start}", bold=True)
        for day in bucket.days:
            typer.echo(f"  {day.label} — {strips[day.date].header}")
            for image in day.images:
                typer.echo(f"    {image.time or '--:--'} {image.tag:<7} {image.location} · {image.weather}")

    typer.secho(footer_count(context.days), fg=typer.colors.GREEN)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(_dump(context), f, indent=2, ensure_ascii=False)
        typer.secho(f"Processed archive written to {output_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":  # pragma: no cover
    app()
