"""Main FastAPI application with modularized routes."""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from ordquiz.config import QUESTION_BANK_PATH, STATIC_DIR
from ordquiz.database import init_db
from ordquiz.logging_setup import setup_console_logging
from ordquiz.routes import questions, scores
from ordquiz.services.question_bank import QuestionBank

setup_console_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="HP ORD Quiz API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Empty until startup; routes read it through get_question_bank
app.state.question_bank = QuestionBank()


# Startup events
@app.on_event("startup")
def startup_events() -> None:
    """Initialize database and load the question bank on startup."""
    init_db()
    app.state.question_bank = QuestionBank.load(QUESTION_BANK_PATH)
    log.info(f"Question bank ready with {len(app.state.question_bank)} entries")


# Root endpoint
@app.get("/")
def index() -> FileResponse:
    """Serve frontend index.html."""
    index_path = STATIC_DIR / "index.html"
    if not index_path.exists():
        raise HTTPException(status_code=404, detail="Frontend not found")
    return FileResponse(index_path)


# Mount static files
app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")

# Include routers
app.include_router(questions.router)
app.include_router(scores.router)
