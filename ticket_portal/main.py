# ticket_portal/main.py
from fastapi import FastAPI

from ticket_portal.core.config import get_settings
from ticket_portal.core.logging import configure_logging
from ticket_portal.ticket.routes import router as ticket_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

# Pages
app.include_router(ticket_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
