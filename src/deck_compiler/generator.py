"""
Deck Generation

Compiles slide documents into Slides API batch requests and applies them
through a PresentationGateway. Two independent paths:

- ``generate_slides_from_config``: declarative SlideConfig, creating a new
  deck or replacing every slide of an existing one.
- ``generate_slides_from_review``: the fixed five-slide code review deck.

Batches are applied one after another. A failed batch aborts the run and
leaves earlier batches applied; there is no rollback.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from .colors import resolve_color, rgb_to_hex
from .config import CamelModel, SlideConfig, SlideDefinition
from .gateway import (
    PresentationGateway,
    placeholder_object_id,
    presentation_url,
    slide_object_ids,
    speaker_notes_object_id,
)
from .operations import (
    BATCH_SIZE,
    DEFAULT_FONT,
    BoxPosition,
    Request,
    background_request,
    chunk_requests,
    create_slide_request,
    delete_object_request,
    insert_text_request,
    text_box_requests,
)
from .review import ReviewData, RiskLevel, format_date, status_label

logger = logging.getLogger(__name__)


class GenerationResult(CamelModel):
    """Handle to the generated deck."""
    presentation_id: str
    presentation_url: str

    @classmethod
    def for_presentation(cls, presentation_id: str) -> "GenerationResult":
        return cls(
            presentation_id=presentation_id,
            presentation_url=presentation_url(presentation_id),
        )

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


def _timestamp() -> int:
    return int(time.time() * 1000)


# ============================================================
# CONFIG COMPILER
# ============================================================

def slide_requests(
    slide: SlideDefinition,
    slide_index: int,
    stamp: int,
    config: SlideConfig,
) -> List[Request]:
    """Requests that build one slide: create, background, then text boxes in order."""
    theme_colors = config.theme_colors
    font_family = (config.theme.default_font if config.theme else None) or DEFAULT_FONT
    slide_id = f"slide_{slide_index}_{stamp}"

    requests = [create_slide_request(slide_id, "BLANK", insertion_index=slide_index)]

    if slide.background is not None:
        background = resolve_color(slide.background, theme_colors)
        logger.debug("%s background %s", slide_id, rgb_to_hex(background))
        requests.append(background_request(slide_id, background))

    for elem_index, elem in enumerate(slide.elements):
        element_id = f"{slide_id}_text_{elem_index}"
        text_color = resolve_color(elem.color, theme_colors)
        logger.debug("%s text color %s", element_id, rgb_to_hex(text_color))
        requests.extend(text_box_requests(
            slide_id,
            element_id,
            BoxPosition.from_points(elem.x, elem.y, elem.w, elem.h),
            elem.text,
            elem.size,
            text_color,
            bold=elem.bold,
            font_family=font_family,
        ))

    return requests


def build_config_requests(config: SlideConfig, stamp: Optional[int] = None) -> List[Request]:
    """Flat, ordered build-phase requests for every slide in the config."""
    stamp = _timestamp() if stamp is None else stamp
    requests: List[Request] = []
    for slide_index, slide in enumerate(config.slides):
        requests.extend(slide_requests(slide, slide_index, stamp, config))
    return requests


def compile_config(
    config: SlideConfig,
    stamp: Optional[int] = None,
    batch_size: int = BATCH_SIZE,
) -> List[List[Request]]:
    """Compile a SlideConfig into ordered build-phase batches."""
    return chunk_requests(build_config_requests(config, stamp), batch_size)


def notes_requests(config: SlideConfig, presentation: Dict[str, Any]) -> List[Request]:
    """Speaker notes inserts, matching fetched slides to config slides by position."""
    requests = []
    for slide, definition in zip(presentation.get("slides") or [], config.slides):
        if not definition.notes:
            continue
        notes_id = speaker_notes_object_id(slide)
        if notes_id:
            requests.append(insert_text_request(notes_id, definition.notes))
    return requests


def _clear_existing(gateway: PresentationGateway, presentation_id: str) -> None:
    existing = slide_object_ids(gateway.get_presentation(presentation_id))
    if not existing:
        logger.info("Presentation %s has no slides to remove", presentation_id)
        return
    logger.info("Removing %d existing slides from %s", len(existing), presentation_id)
    gateway.batch_update(presentation_id, [delete_object_request(sid) for sid in existing])


def _create_empty(gateway: PresentationGateway, title: str) -> str:
    presentation = gateway.create_presentation(title)
    presentation_id = presentation["presentationId"]
    default_slides = slide_object_ids(presentation)
    if default_slides:
        gateway.batch_update(presentation_id, [delete_object_request(default_slides[0])])
    return presentation_id


def generate_slides_from_config(
    gateway: PresentationGateway,
    config: SlideConfig,
    batch_size: int = BATCH_SIZE,
) -> GenerationResult:
    """Create a deck from a SlideConfig, or replace the deck it names."""
    if config.presentation_id:
        presentation_id = config.presentation_id
        _clear_existing(gateway, presentation_id)
    else:
        presentation_id = _create_empty(gateway, config.title)

    batches = compile_config(config, batch_size=batch_size)
    for number, batch in enumerate(batches, start=1):
        logger.info("Applying batch %d/%d (%d requests)", number, len(batches), len(batch))
        gateway.batch_update(presentation_id, batch)

    notes = notes_requests(config, gateway.get_presentation(presentation_id))
    if notes:
        logger.info("Adding speaker notes to %d slides", len(notes))
        gateway.batch_update(presentation_id, notes)

    return GenerationResult.for_presentation(presentation_id)


# ============================================================
# REVIEW DECK (LEGACY)
# ============================================================

REVIEW_SLIDES = ("title", "summary", "impact", "risks", "verdict")


def _bullets(items: List[str]) -> List[str]:
    return [f"- {item}" for item in items]


def review_title_text(data: ReviewData) -> Dict[str, str]:
    return {
        "title": data.pr_title,
        "body": (
            f"PR #{data.pr_number} | {data.repository}\n"
            f"{data.pr_author} | {format_date(data.pr_date)}"
        ),
    }


def review_summary_text(data: ReviewData) -> Dict[str, str]:
    lines = [data.summary, ""] + _bullets(data.changes)
    return {"title": "What Changed", "body": "\n".join(lines)}


def review_impact_text(data: ReviewData) -> Dict[str, str]:
    lines: List[str] = []

    if data.business_impact:
        lines += ["Business Impact:", data.business_impact, ""]

    if data.affected_areas:
        lines.append("Affected Areas:")
        lines += _bullets(data.affected_areas)
        lines.append("")

    qa = data.quality_assessment
    lines.append("Quality Summary:")
    lines.append(f"- Code Quality: {status_label(qa.code_quality.status)}")
    lines.append(f"- Tests: {status_label(qa.tests.status)}")
    lines.append(f"- Security: {status_label(qa.security.status)}")
    lines.append(f"- Performance: {status_label(qa.performance.status)}")

    return {"title": "Impact Assessment", "body": "\n".join(lines)}


def review_risks_text(data: ReviewData) -> Dict[str, str]:
    risk_level = data.risk_level or RiskLevel.low
    lines = [f"Risk Level: {risk_level.value.upper()}", ""]

    if data.risk_factors:
        lines.append("Risk Factors:")
        lines += _bullets(data.risk_factors)
        lines.append("")

    if data.issues_found:
        lines.append("Issues Found:")
        lines += _bullets(data.issues_found)
    else:
        lines.append("No blocking issues found.")

    return {"title": "Risk Assessment", "body": "\n".join(lines)}


def review_verdict_text(data: ReviewData) -> Dict[str, str]:
    lines = [data.verdict_explanation, ""]
    if data.suggestions:
        lines.append("Suggestions:")
        lines += _bullets(data.suggestions)
    return {"title": f"Recommendation: {data.verdict.value}", "body": "\n".join(lines)}


_REVIEW_TEXT = {
    "title": review_title_text,
    "summary": review_summary_text,
    "impact": review_impact_text,
    "risks": review_risks_text,
    "verdict": review_verdict_text,
}


def generate_slides_from_review(
    gateway: PresentationGateway,
    data: ReviewData,
) -> GenerationResult:
    """Create the five-slide review deck: title, summary, impact, risks, verdict."""
    presentation = gateway.create_presentation(f"PR Review: {data.pr_title}")
    presentation_id = presentation["presentationId"]

    stamp = _timestamp()
    slide_ids = {name: f"{name}_{stamp}" for name in REVIEW_SLIDES}

    setup: List[Request] = [delete_object_request(sid) for sid in slide_object_ids(presentation)[:1]]
    setup += [create_slide_request(slide_ids[name], "TITLE_AND_BODY") for name in REVIEW_SLIDES]
    gateway.batch_update(presentation_id, setup)

    kinds = {slide_id: name for name, slide_id in slide_ids.items()}
    content: List[Request] = []
    for slide in gateway.get_presentation(presentation_id).get("slides") or []:
        name = kinds.get(slide.get("objectId"))
        if name is None:
            continue
        text = _REVIEW_TEXT[name](data)
        title_id = placeholder_object_id(slide, "TITLE")
        body_id = placeholder_object_id(slide, "BODY")
        if title_id:
            content.append(insert_text_request(title_id, text["title"]))
        if body_id:
            content.append(insert_text_request(body_id, text["body"]))

    if content:
        gateway.batch_update(presentation_id, content)

    return GenerationResult.for_presentation(presentation_id)
