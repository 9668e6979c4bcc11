from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.logging_setup import configure_logging

# Routers
from app.routers import evaluation

configure_logging()

app = FastAPI(title="Sentire API", version="1.0.0")

# CORS — any origin may call the scorer
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(evaluation.router, prefix="/avaliar", tags=["Avaliação"])

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Sentire API no ar!"
