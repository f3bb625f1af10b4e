"""Merge per-day and per-image content files into one ordered index."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from boardshort.processing.tagging import derive_tag

from .models import CONTENT_UNIT_ADAPTER, AggregationBatch, DayRecord, DayUnit, ImageRecord, SidecarUnit

logger = logging.getLogger(__name__)

ContentFile = Tuple[Path, Union[SidecarUnit, DayUnit]]


def detect_shape(payload: Dict[str, Any]) -> str:
    """Pick the shape of a unit that does not declare one."""
    return "day" if "images" in payload else "sidecar"


def _describe(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())


def _drop_invalid_images(path: Path, payload: Dict[str, Any]) -> List[str]:
    """Remove images that fail validation from a day payload, keeping the rest."""
    raw_images = payload.get("images")
    if not isinstance(raw_images, list):
        return []

    issues: List[str] = []
    kept: List[Any] = []
    positions: Dict[int, int] = {}
    for idx, raw in enumerate(raw_images):
        try:
            ImageRecord.model_validate(raw)
        except ValidationError as exc:
            issues.append(f"Dropping image {idx} of {path.name}: {_describe(exc)}")
            continue
        positions[idx] = len(kept)
        kept.append(raw)

    payload["images"] = kept
    hero_index = payload.get("hero_index")
    if isinstance(hero_index, int) and issues:
        payload["hero_index"] = positions.get(hero_index, 0)
    return issues


def parse_content_file(path: Path) -> Tuple[Union[SidecarUnit, DayUnit], List[str]]:
    """Parse one content file into a sidecar or day unit.

    Images of a day file that fail validation are dropped and reported in the
    returned issues. Raises ``ValueError`` describing why the file cannot be used.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    if not payload.get("date"):
        raise ValueError("missing date")

    payload.setdefault("shape", detect_shape(payload))
    issues = _drop_invalid_images(path, payload) if payload["shape"] == "day" else []
    try:
        return CONTENT_UNIT_ADAPTER.validate_python(payload), issues
    except ValidationError as exc:
        raise ValueError(_describe(exc)) from exc


def load_content_files(content_dir: Path) -> Tuple[List[ContentFile], List[str]]:
    """Parse every ``*.json`` file in name order, collecting problems as issues."""
    units: List[ContentFile] = []
    issues: List[str] = []
    if not content_dir.is_dir():
        logger.info("Content directory %s not found; nothing to aggregate", content_dir)
        return units, issues

    for path in sorted(content_dir.glob("*.json")):
        try:
            unit, image_issues = parse_content_file(path)
        except (OSError, ValueError) as exc:
            issue = f"Skipping {path.name}: {exc}"
            logger.warning(issue)
            issues.append(issue)
            continue
        for issue in image_issues:
            logger.warning(issue)
        issues.extend(image_issues)
        units.append((path, unit))
    return units, issues


def _mark_legacy_hero(unit: DayUnit) -> None:
    # Pin the legacy hero to its image before sorting moves it.
    if not unit.is_hero or not unit.images:
        return
    index = unit.hero_index if unit.hero_index is not None else 0
    if not 0 <= index < len(unit.images):
        index = 0
    unit.images[index].hero = True


def _merge_day_fields(day: DayRecord, fields: Dict[str, Any]) -> None:
    for name, value in fields.items():
        if name in ("date", "hero_index"):
            continue
        if getattr(day, name, None) is None:
            setattr(day, name, value)


def _sidecar_image(path: Path, unit: SidecarUnit) -> ImageRecord:
    image = unit.to_image()
    if not image.id:
        image.id = path.stem
    return image


def _finalize_day(day: DayRecord) -> DayRecord:
    day.images.sort(key=lambda image: image.time or "")
    for image in day.images:
        if image.tag is None:
            image.tag = derive_tag(image.time)

    hero_position: Optional[int] = next(
        (idx for idx, image in enumerate(day.images) if image.hero), None
    )
    if hero_position is not None:
        day.is_hero = True
        day.hero_index = hero_position
    return day


def aggregate_content(content_dir: Path) -> AggregationBatch:
    """Group content files by date into sorted, normalized day records."""
    units, issues = load_content_files(content_dir)
    days: Dict[str, DayRecord] = {}

    for path, unit in units:
        day = days.get(unit.date)
        if day is None:
            day = days[unit.date] = DayRecord(date=unit.date)

        if isinstance(unit, DayUnit):
            _mark_legacy_hero(unit)
            _merge_day_fields(day, unit.day_fields())
            day.images.extend(unit.images)
        else:
            image = _sidecar_image(path, unit)
            if day.location is None and image.location:
                day.location = image.location
            day.images.append(image)

    ordered = sorted(days.values(), key=lambda d: d.date, reverse=True)
    return AggregationBatch(
        source_dir=str(content_dir),
        days=[_finalize_day(day) for day in ordered],
        files_read=len(units),
        issues=issues,
    )


def write_index(days: List[DayRecord], output_path: Path) -> Path:
    """Overwrite the index artifact with the given days."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [day.to_json() for day in days]
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return output_path


def build_index(content_dir: Path, output_path: Path) -> AggregationBatch:
    """Aggregate ``content_dir`` and write the merged index to ``output_path``."""
    batch = aggregate_content(content_dir)
    write_index(batch.days, output_path)
    logger.info(
        "Built %s with %d days, %d images (%d files read, %d skipped)",
        output_path,
        len(batch.days),
        batch.image_count,
        batch.files_read,
        len(batch.issues),
    )
    return batch
