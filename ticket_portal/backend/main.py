# ticket_portal/backend/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ticket_portal.backend.database import Base, engine
from ticket_portal.backend.routes import router as ticket_router
from ticket_portal.core.config import get_settings
from ticket_portal.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=f"{settings.APP_NAME} backend",
    description="Reference ticket backend consumed by the portal",
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ticket_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
