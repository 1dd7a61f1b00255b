import logging

from fastapi import FastAPI
from .settings import settings
from .routers import pawapay

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.APP_NAME)

app.include_router(pawapay.router, tags=["pawaPay"])

@app.get("/health", tags=["Ops"])
async def health():
    return {"status": "ok", "environment": settings.PAWAPAY_ENVIRONMENT}
