# server.py
import logging
from contextlib import asynccontextmanager
from typing import List, Union

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

import agent
from core.config import DEFAULT_DECKS, get_settings
from core.errors import AdviceError
from core.models import TableRules
from features.context import build_situation
from services.auth import require_token
from strategy.engine import recommend_action
from strategy.tables import describe_table
from strategy.utils import format_output

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if not settings.auth_enabled:
        logger.warning("SECRET_TOKEN is not set; advice API is unauthenticated")
    logger.info("Blackjack Coach API ready (cors origins: %s)", settings.cors_origins)
    yield


app = FastAPI(title="Blackjack Coach API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# ==========================================
# Request / Response models
# ==========================================

CardList = Union[List[Union[str, int]], str]


class GameRules(BaseModel):
    dasAllowed: bool = False
    surrenderAllowed: bool = False
    decks: int = Field(default=DEFAULT_DECKS, ge=1)


class AdviceRequest(BaseModel):
    player: CardList
    dealer: CardList
    gameRules: GameRules = Field(default_factory=GameRules)


class HandSummary(BaseModel):
    cards: List[str]
    total: int
    soft: bool
    canSplit: bool


class AdviceResponse(BaseModel):
    action: str
    insurance: bool
    rule: str
    advice: str
    hand: HandSummary
    dealerCard: str
    gameRules: GameRules

# ==========================================
# Error handlers
# ==========================================

@app.exception_handler(AdviceError)
async def advice_error_handler(request: Request, exc: AdviceError):
    logger.warning("rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("invalid request format on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "INVALID_REQUEST",
                "message": "Invalid request format",
                "details": [
                    {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]}
                    for e in exc.errors()
                ],
            }
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"), "message": str(exc.detail)}},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
    )

# ==========================================
# Routes
# ==========================================

@app.post("/api/advice", response_model=AdviceResponse, dependencies=[Depends(require_token)])
async def advice(request: AdviceRequest):
    rules = TableRules(
        das_allowed=request.gameRules.dasAllowed,
        surrender_allowed=request.gameRules.surrenderAllowed,
        decks=request.gameRules.decks,
    )
    # Phase 1: validate and evaluate (raises AdviceError)
    situation = build_situation(request.player, request.dealer, rules)

    # Phase 2: strategy table
    rec = recommend_action(situation)

    # Phase 3: advice text
    text = agent.generate_advice(situation, rec)
    logger.info("advice %s vs %s -> %s", list(situation.player_cards), situation.dealer_card, rec.action.value)
    return format_output(situation, rec, text)


@app.get("/api/rules", dependencies=[Depends(require_token)])
async def rules():
    """Read-only view of the live strategy table, in priority order."""
    return {"rules": describe_table()}


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "blackjack-coach"}


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level)

    print(f"🚀 Starting server on {settings.host}:{settings.port}...")
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    uvicorn.Server(config).run()
