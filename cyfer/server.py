"""
Default HTTP route
==================
GET /  ->  {"msg": "API Working: <encoded greeting>"}

Greeting and key come from cyfer.config and are read on every request,
so changing the environment does not need a restart.

Run:  python -m cyfer.server
"""

import logging

from fastapi import FastAPI, HTTPException

from . import config
from .banner import banner_payload
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

app = FastAPI(title="cyfer", version="1.0.0")


@app.get("/")
def get_default():
    try:
        return banner_payload(config.banner_text(), config.banner_key())
    except InvalidArgument as exc:
        logger.error(f"Banner misconfigured: {exc}")
        raise HTTPException(500, "banner key is not configured")


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    logger.info(f"cyfer listening on {config.host()}:{config.port()}")
    uvicorn.run(app, host=config.host(), port=config.port())
