import os
import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from urdu_summarizer.errors import SummarizerError
from urdu_summarizer.scrape_router import router as scrape_router

logger = logging.getLogger("UrduSummarizer.API")

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

app = FastAPI(title="Urdu Article Summarizer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SummarizerError)
async def summarizer_error_handler(request: Request, exc: SummarizerError):
    logger.warning(f"[{exc.kind.value}] {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(scrape_router)

if os.path.isdir(STATIC_DIR):
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
else:
    logger.warning(f"[API] Warning: Static directory not found at {STATIC_DIR}")


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "urdu_summarizer"}


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(os.path.join(STATIC_DIR, "index.html"))


def run_api_server(host: str, port: int):
    uvicorn.run(app, host=host, port=port, log_level="info")
