from __future__ import annotations  # FastAPI server exposing the summarization gateway

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import install_error_handlers, router


app = FastAPI(title="Interview Summary API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)
app.include_router(router)
install_error_handlers(app)


@app.get("/health")
def health() -> dict:  # Liveness check
    return {"status": "ok"}
