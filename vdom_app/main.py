import logging

import uvicorn
from fastapi import FastAPI
from vdom_app.config import get_settings
from vdom_app.routers import dom

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(
    title="Virtual DOM Diff Service",
    version="0.1.0",
    description="Diffs two virtual DOM snapshots and renders the new one to HTML."
)

@app.get("/")
def status():
    return {
        "status": "running",
        "service": "vdom-diff",
        "version": app.version,
    }

app.include_router(dom.router, prefix="/api")


def run():
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
