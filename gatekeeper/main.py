"""
Gatekeeper FastAPI Application — PR merge gate.

  POST /api/analyze → risk score, ALLOW/WARN/BLOCK verdict, missing tests,
                      explanation, suggestion code (optional Groq enrichment)
  GET  /health      → {"status": "ok", ...}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gatekeeper.api.routes.analyze import router as analyze_router
from gatekeeper.api.routes.health import router as health_router
from gatekeeper.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("gatekeeper")

app = FastAPI(
    title="Gatekeeper",
    description="Rule-based PR risk gate with optional LLM enrichment",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze_router)
app.include_router(health_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "body": body.decode("utf-8")[:100]},
    )
