"""API route definitions."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from todolint import __version__
from todolint.api.app import get_pipeline
from todolint.config import Settings, get_settings
from todolint.errors import ConfigurationError
from todolint.models.base import Comment
from todolint.pipeline import LintPipeline, LintReport
from todolint.schemas import (
    CheckRequest,
    CheckResponse,
    CheckTextRequest,
    CommentIn,
    DiagnosticOut,
    HealthResponse,
    RuleOptions,
)

router = APIRouter()


def get_settings_dep() -> Settings:
    return get_settings()


def get_pipeline_dep() -> LintPipeline:
    return get_pipeline()


def _select_pipeline(default: LintPipeline, options: Optional[RuleOptions]) -> LintPipeline:
    """Use the shared pipeline unless the request overrides rule options."""
    if options is None or not options.model_fields_set:
        return default
    try:
        return LintPipeline(terms=options.terms, location=options.location, url=options.url)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _to_comments(items: List[CommentIn]) -> List[Comment]:
    return [
        Comment(kind=c.kind, text=c.text, line=c.line, column=c.column, source=c.source)
        for c in items
    ]


def _to_response(report: LintReport) -> CheckResponse:
    return CheckResponse(
        flagged=report.flagged,
        diagnostics=[DiagnosticOut(**d.to_dict()) for d in report.diagnostics],
        comments_checked=report.comments_checked,
        summary=report.summary,
        processing_time_ms=report.processing_time_ms,
    )


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check(pipeline: LintPipeline = Depends(get_pipeline_dep)):
    """Check API health and the active rule configuration."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        rules=[pipeline.rule.name],
        tracker_url=pipeline.tracker_url,
    )


@router.get("/rules", tags=["System"])
async def list_rules():
    """List available rules with descriptions."""
    from todolint.rules import RULE_REGISTRY

    return {
        name: {
            "name": cls.name,
            "version": cls.version,
            "description": cls.__doc__.strip().split('\n')[0] if cls.__doc__ else "",
        }
        for name, cls in RULE_REGISTRY.items()
    }


@router.post("/check", response_model=CheckResponse, tags=["Lint"])
async def check_comments(
    request: CheckRequest,
    pipeline: LintPipeline = Depends(get_pipeline_dep),
    settings: Settings = Depends(get_settings_dep),
):
    """
    Check comments for undocumented warning terms.

    Comments are classified in order; shebang pseudo-tokens are skipped.
    """
    if len(request.comments) > settings.max_comments:
        raise HTTPException(
            status_code=400,
            detail=f"Request exceeds maximum of {settings.max_comments} comments",
        )

    active = _select_pipeline(pipeline, request.options)
    report = active.analyze(_to_comments(request.comments))
    return _to_response(report)


@router.post("/check/text", response_model=CheckResponse, tags=["Lint"])
async def check_text(
    request: CheckTextRequest,
    pipeline: LintPipeline = Depends(get_pipeline_dep),
):
    """Check a single comment body."""
    active = _select_pipeline(pipeline, request.options)
    report = active.analyze_text(request.text, kind=request.kind)
    return _to_response(report)


@router.get("/", tags=["System"])
async def root():
    """API root endpoint."""
    return {
        "name": "todolint",
        "version": __version__,
        "description": "Flags warning comments that lack an issue tracker reference",
        "docs": "/docs",
    }
