from fastapi import FastAPI
from app.api.errors import register_error_handlers
from app.api.routes import router as api_router
from app.core.config import settings
from app.core.logging import get_logger
from app.ui.routes import router as ui_router

log = get_logger("main")

app = FastAPI(title="Tool Stack Advisor API", version="0.1.0")
register_error_handlers(app)
app.include_router(api_router, prefix="/api")
app.include_router(ui_router)

@app.on_event("startup")
async def on_startup():
    log.info(f"Starting with provider={settings.LLM_PROVIDER} model={settings.LLM_MODEL}")
