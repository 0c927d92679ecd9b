"""POST /api/generate: restyle one or many source icons."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter

from iconstyle.engine.composer import generate_icon
from iconstyle.errors import IconEngineError
from iconstyle.models.requests import BatchGenerateRequest, GenerateRequest
from iconstyle.models.responses import BatchGenerateResponse, BatchItemResult, GenerateResponse
from iconstyle.models.style import StyleConfig, StylePreset
from iconstyle.svg.gradient_parser import parse_gradient

router = APIRouter()
logger = logging.getLogger(__name__)


def _resolve_styles(styles: StyleConfig, gradient: str | None) -> StyleConfig:
    """A gradient descriptor string, when given, replaces ``styles.gradient``."""
    if gradient is None:
        return styles
    return styles.model_copy(update={"gradient": parse_gradient(gradient)})


def _generate_all(svgs: list[str], preset: StylePreset, styles: StyleConfig) -> list[BatchItemResult]:
    """Sync batch loop: one item's failure is recorded and the rest continue."""
    results: list[BatchItemResult] = []
    for i, svg in enumerate(svgs):
        try:
            results.append(BatchItemResult(index=i, svg=generate_icon(svg, preset, styles)))
        except IconEngineError as e:
            logger.warning("Batch item %d failed: %s", i, e)
            results.append(BatchItemResult(index=i, error=str(e)))
    return results


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    styles = _resolve_styles(req.styles, req.gradient)
    # Generation is sync: run it in a thread so the event loop stays free
    loop = asyncio.get_running_loop()
    svg = await loop.run_in_executor(None, generate_icon, req.svg, req.preset, styles)
    return GenerateResponse(svg=svg, preset=req.preset.value)


@router.post("/generate/batch", response_model=BatchGenerateResponse)
async def generate_batch(req: BatchGenerateRequest) -> BatchGenerateResponse:
    styles = _resolve_styles(req.styles, req.gradient)
    loop = asyncio.get_running_loop()
    results = await loop.run_in_executor(None, _generate_all, req.svgs, req.preset, styles)

    succeeded = sum(1 for r in results if r.error is None)
    return BatchGenerateResponse(results=results, succeeded=succeeded, failed=len(results) - succeeded)
