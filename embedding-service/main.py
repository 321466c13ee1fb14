"""
Embedding API Service
Sentence-embedding model server used by the matching backend

The backend posts normalized job/resume text to /embed and stores the
returned vector; a vector of any other size than EMBEDDING_DIMENSION is
rejected there, so the model is checked against it at load time.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List
from sentence_transformers import SentenceTransformer
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MODEL_NAME = os.getenv("EMBEDDING_MODEL", "thenlper/gte-small")
EMBEDDING_DIMENSION = int(os.getenv("EMBEDDING_DIMENSION", "384"))
MAX_BATCH_SIZE = int(os.getenv("MAX_BATCH_SIZE", "64"))

# Loaded on first use
model = None


def get_model() -> SentenceTransformer:
    """Load the sentence-transformer once and verify its output size"""
    global model
    if model is None:
        logger.info(f"Loading model: {MODEL_NAME}")
        loaded = SentenceTransformer(MODEL_NAME)
        dimension = loaded.get_sentence_embedding_dimension()
        if dimension != EMBEDDING_DIMENSION:
            raise RuntimeError(
                f"Model {MODEL_NAME} produces {dimension}-dim vectors, expected {EMBEDDING_DIMENSION}"
            )
        model = loaded
        logger.info(f"Model loaded ({dimension} dimensions)")
    return model


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warm the model so the first match run does not time out on loading
    try:
        get_model()
    except Exception as e:
        logger.error(f"Error loading model: {e}")
    yield


app = FastAPI(
    title="Embedding Service",
    description="Mean-pooled, L2-normalized sentence embeddings",
    version="1.0.0",
    lifespan=lifespan,
)


class EmbedRequest(BaseModel):
    text: str


class EmbedBatchRequest(BaseModel):
    texts: List[str] = Field(..., min_length=1)


class EmbedResponse(BaseModel):
    embedding: List[float]
    dimension: int


class EmbedBatchResponse(BaseModel):
    embeddings: List[List[float]]
    count: int
    dimension: int


def _encode(texts):
    try:
        return get_model().encode(
            texts,
            batch_size=32,
            convert_to_numpy=True,
            normalize_embeddings=True,
            show_progress_bar=False,
        )
    except Exception as e:
        logger.error(f"Error generating embedding: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "model": MODEL_NAME,
        "dimension": EMBEDDING_DIMENSION,
        "model_loaded": model is not None,
    }


@app.post("/embed", response_model=EmbedResponse)
def embed(request: EmbedRequest):
    """Embed one text"""
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text cannot be empty")

    vector = _encode(request.text)
    return EmbedResponse(embedding=vector.tolist(), dimension=len(vector))


@app.post("/embed/batch", response_model=EmbedBatchResponse)
def embed_batch(request: EmbedBatchRequest):
    """Embed several texts in one forward pass"""
    if len(request.texts) > MAX_BATCH_SIZE:
        raise HTTPException(status_code=400, detail=f"At most {MAX_BATCH_SIZE} texts per batch")
    if any(not text.strip() for text in request.texts):
        raise HTTPException(status_code=400, detail="Texts cannot be empty")

    vectors = _encode(request.texts)
    return EmbedBatchResponse(
        embeddings=vectors.tolist(),
        count=len(vectors),
        dimension=vectors.shape[1],
    )
