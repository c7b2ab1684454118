import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recgraph import config
from recgraph.api.routes import router

logging.basicConfig(level=logging.INFO)

app = FastAPI(
    title="Recommender Component Graph Tools",
    version="0.1.0",
)

# Middleware first, routes after
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
