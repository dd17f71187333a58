# src/tracker/main.py
import uvicorn

from fastapi import FastAPI, Request # type: ignore
from fastapi.responses import JSONResponse # type: ignore

from .calories import report_training
from .config import settings
from .errors import TrackerError
from .metrics import http_requests_total, start_metrics_server
from .schemas import ErrorResponse, ReportRequest, ReportResponse
from .steps import report_steps
from .utils.logging import setup_logger

logger = setup_logger(__name__, level=settings.log_level)

# FastAPI app
app = FastAPI(title="tracker")

@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    """Turn a rejected record into a 422 carrying the error kind."""
    http_requests_total.labels(method=request.method, endpoint=request.url.path, status=422).inc()
    body = ErrorResponse(error=exc.kind, detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

@app.post("/reports/steps", response_model=ReportResponse)
def steps_report(payload: ReportRequest):
    # An empty report means the record was rejected; the reason is only logged
    report = report_steps(payload.data, payload.weight, payload.height)
    http_requests_total.labels(method="POST", endpoint="/reports/steps", status=200).inc()
    return ReportResponse(report=report)

@app.post(
    "/reports/training",
    response_model=ReportResponse,
    responses={422: {"model": ErrorResponse}},
)
def training_report(payload: ReportRequest):
    report = report_training(payload.data, payload.weight, payload.height)
    http_requests_total.labels(method="POST", endpoint="/reports/training", status=200).inc()
    return ReportResponse(report=report)

@app.on_event("startup")
async def on_startup():
    """Initialize services on startup."""
    if settings.metrics_enabled:
        start_metrics_server()
    logger.info("Application startup completed successfully")

if __name__ == "__main__":
    uvicorn.run("tracker.main:app", host=settings.host, port=settings.port)
