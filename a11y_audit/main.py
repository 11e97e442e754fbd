"""
Accessibility Audit - FastAPI Application

Main entry point for the accessibility scanning service.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Depends, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse

from a11y_audit.config import settings
from a11y_audit.monitoring import get_metrics
from a11y_audit.reporting import summarize
from a11y_audit.scan_service import (
    ScanService,
    InvalidURLError,
    BrowserLaunchError,
    AuditError,
)

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_scan_service: Optional[ScanService] = None


def get_scan_service() -> ScanService:
    """
    Provide the process-wide scan service.

    The service holds no per-request state; each scan acquires its own browser.
    """
    global _scan_service
    if _scan_service is None:
        _scan_service = ScanService.from_settings(settings)
    return _scan_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    if _scan_service is not None:
        await _scan_service.aclose()


# Create FastAPI application
app = FastAPI(
    title="Accessibility Audit",
    description="Automated accessibility scanning with AI-assisted remediation suggestions",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Server error: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Accessibility Testing API is running"


@app.get("/health")
async def health():
    """
    Health check endpoint.

    Returns:
        dict: Status indicator showing the service is healthy
    """
    return {"status": "healthy"}


@app.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    """Prometheus metrics export."""
    return get_metrics().export_prometheus()


@app.get("/api/test")
async def test_accessibility(
    url: Optional[str] = Query(default=None),
    scan_service: ScanService = Depends(get_scan_service),
):
    """
    Accessibility test endpoint.

    Loads the target page in a headless browser, audits it and returns every
    issue with a severity tier and a remediation suggestion.

    Args:
        url: Target page URL (query parameter)
        scan_service: Scan service dependency

    Returns:
        200: {"issues": [...], "summary": {...}}
        400: If url is missing or malformed
        500: If the browser cannot start or the audit fails
    """
    try:
        issues = await scan_service.scan(url)
    except InvalidURLError as e:
        logger.warning(f"Rejected scan request: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )
    except (BrowserLaunchError, AuditError) as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to analyze website", "details": str(e)},
        )

    return {
        "issues": [issue.to_dict() for issue in issues],
        "summary": summarize(issues),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
