# gymtracker/main.py
import time
import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from gymtracker.routers.templates import router as templates_router
from gymtracker.routers.session import router as session_router
from gymtracker.routers.workouts import router as workouts_router
from gymtracker.routers.stats import router as stats_router
from gymtracker.db import Base, SessionLocal, engine
from gymtracker.services.ledger import SessionLedger
from gymtracker.settings import get_settings

log = logging.getLogger("uvicorn")
settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    # Constructing the ledger seeds the exercise catalog on an empty database
    with SessionLocal() as db:
        SessionLedger(db)
    yield

app = FastAPI(
    title="Gym Tracker API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "templates", "description": "Exercise catalog and per-exercise history"},
        {"name": "session", "description": "The workout in progress"},
        {"name": "workouts", "description": "Logged workouts"},
        {"name": "stats", "description": "Aggregate workout statistics"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "Gym Tracker API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(templates_router)
app.include_router(session_router)
app.include_router(workouts_router)
app.include_router(stats_router)
