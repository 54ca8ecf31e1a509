import logging

from fastapi import FastAPI

from handeval import config
from handeval.hands_api import router as hands_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=config.API_TITLE, version="1.0.0")

# ---- Include all routers ----
app.include_router(hands_router)  # /hands/...


@app.get("/health")
def health():
    return {"status": "ok"}
