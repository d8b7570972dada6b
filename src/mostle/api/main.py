"""
Mostle API - FastAPI backend for the daily ranking puzzle
"""

from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from mostle import __version__
from mostle.utils.logging_config import LogFiles, Logger, clear_trace_id, set_trace_id

# Load local .env automatically so MOSTLE_DB_URL is available in API mode.
load_dotenv(find_dotenv(usecwd=True), override=False)

from .routes import puzzle  # noqa: E402

app = FastAPI(
    title="Mostle API",
    description="Daily puzzle: rank five objects across five metrics",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def _trace_requests(request: Request, call_next):
    trace_id = set_trace_id(request.headers.get("x-trace-id"))
    try:
        response = await call_next(request)
    except Exception as e:
        Logger.error(f"{request.method} {request.url.path} failed: {e}", file=LogFiles.ERROR)
        raise
    finally:
        clear_trace_id()
    response.headers["x-trace-id"] = trace_id
    Logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}", file=LogFiles.API
    )
    return response


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": __version__}


app.include_router(puzzle.router, prefix="/api", tags=["Daily Puzzle"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
