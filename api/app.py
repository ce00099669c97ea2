from dotenv import load_dotenv
load_dotenv(dotenv_path=".env", override=False)

import os
import sys
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# ---------------- PATH SETUP ----------------

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# ---------------- INTERNAL IMPORTS ----------------

import config
from advisor.pipeline import get_chat_completion
from llm.sarvam_client import SarvamChatClient
from llm.schemas import ChatRequest, CompletionData
from nlp.languages import LANGUAGES
from nlp.query_classifier import (
    POLICIES,
    GenerationPolicy,
    detect_category,
    latest_user_query,
)
from nlp.response_parser import split_thinking

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------- LIFESPAN ----------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # 🔥 SINGLE Sarvam client (shared connection pool)
    app.state.sarvam = SarvamChatClient()
    logger.info("✅ %s API ready", config.PROJECT_NAME)
    try:
        yield
    finally:
        await app.state.sarvam.aclose()

# ---------------- APP INIT ----------------

app = FastAPI(
    title="Farmer Sahayak API",
    description="Multilingual farm-advisory chat",
    version=config.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- SCHEMAS ----------------

class ChatResponse(BaseModel):
    success: bool
    data: Optional[CompletionData] = None
    error: Optional[str] = None
    answer: Optional[str] = None
    thinking: Optional[str] = None
    category: Optional[str] = None

class ClassifyRequest(BaseModel):
    query: str

class ClassifyResponse(BaseModel):
    category: str
    policy: GenerationPolicy

# ---------------- ROUTES ----------------

@app.get("/")
def health():
    return {"status": "ok"}


@app.get("/languages")
def languages() -> List[dict]:
    return [{"code": code, **meta} for code, meta in LANGUAGES.items()]

# ---------------- CHAT ----------------

@app.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest):

    # an empty or user-less conversation comes back as success=false
    category = detect_category(latest_user_query(req.messages))
    result = await get_chat_completion(req, client=app.state.sarvam, category=category)

    # 🔥 NEVER 5xx ON UPSTREAM FAILURE — the session must survive
    if not result.success:
        return ChatResponse(
            success=False,
            error=result.error,
            category=category.value,
        )

    thinking, answer = split_thinking(result.data.content)

    return ChatResponse(
        success=True,
        data=result.data,
        answer=answer,
        thinking=thinking or None,
        category=category.value,
    )

# ---------------- CLASSIFY ----------------

@app.post("/classify", response_model=ClassifyResponse)
def classify_query(req: ClassifyRequest):
    category = detect_category(req.query)
    return ClassifyResponse(category=category.value, policy=POLICIES[category])
