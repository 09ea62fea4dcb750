import logging

from fastapi import FastAPI
from lichelper.api.selection import router as selection_router
from lichelper.core.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="Licence Helper",
    version="1.0.0",
)

# licence selection API
app.include_router(selection_router, prefix="/api", tags=["Licenses"])

# health check
@app.get("/")
def root():
    return {"message": "Licence Helper is running"}
