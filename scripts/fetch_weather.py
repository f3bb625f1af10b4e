"""CLI utilities for querying the historical weather API."""
from __future__ import annotations

import json
from pathlib import Path

import typer

from boardshort.config import get_settings
from boardshort.ingest.weather_api import WeatherAPIClient, WeatherAPIError
from boardshort.processing.weather import WeatherResolver

app = typer.Typer(help="Look up historical weather using the configured API key")


def _write_output(data: dict, output: Path | None) -> None:
    payload = json.dumps(data, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
        typer.secho(f"Response written to {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(payload)


def _client() -> WeatherAPIClient:
    try:
        return WeatherAPIClient()
    except WeatherAPIError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command()
def raw(
    date: str = typer.Argument(..., help="Capture date YYYY-MM-DD"),
    time: str = typer.Argument(..., help="Local capture time HH:MM"),
    lat: float | None = typer.Option(None, help="Latitude (defaults to configured location)"),
    lng: float | None = typer.Option(None, help="Longitude (defaults to configured location)"),
    output: Path | None = typer.Option(None, help="Optional path to dump JSON response"),
) -> None:
    """Fetch the provider's raw response for one capture moment."""
    settings = get_settings()
    client = _client()
    resolver = WeatherResolver(client, tz=settings.timezone)
    dt = resolver.capture_timestamp(date, time)
    data = client.timemachine(
        lat=settings.default_lat if lat is None else lat,
        lon=settings.default_lng if lng is None else lng,
        dt=dt,
    )
    _write_output(data, output)


@app.command()
def summary(
    date: str = typer.Argument(..., help="Capture date YYYY-MM-DD"),
    time: str = typer.Argument(..., help="Local capture time HH:MM"),
    lat: float | None = typer.Option(None, help="Latitude (defaults to configured location)"),
    lng: float | None = typer.Option(None, help="Longitude (defaults to configured location)"),
) -> None:
    """Print the formatted weather line used in captions."""
    settings = get_settings()
    resolver = WeatherResolver(_client(), tz=settings.timezone)
    result = resolver.resolve(
        date,
        time,
        settings.default_lat if lat is None else lat,
        settings.default_lng if lng is None else lng,
    )
    if result is None:
        typer.secho("Weather unavailable for that moment.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)
    typer.echo(result)


if __name__ == "__main__":  # pragma: no cover
    app()
