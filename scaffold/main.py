import time
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.routes import api_router
from .config import get_app_config
from .logging_config import log_api_access

_app_config = get_app_config()

app = FastAPI(title="Scaffold Server", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=_app_config.cors_origins,
    allow_methods=_app_config.cors_methods,
)
app.include_router(api_router, prefix="/api")
app.mount("/", StaticFiles(directory=_app_config.static_dir), name="public")


@app.on_event("startup")
async def startup_event():
    _app_config.logger.info(f"Server started at {datetime.now().isoformat()}")
    _app_config.logger.info(f"Server is running on port {_app_config.port}")

@app.on_event("shutdown")
async def shutdown_event():
    _app_config.logger.info(f"Server stopped at {datetime.now().isoformat()}")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    client = request.client.host if request.client else None

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, client, response.status_code, process_time)
        return response
    except Exception as e:
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, client, 500, process_time, error=str(e))
        _app_config.logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
        raise


def run() -> None:
    """Serve the application with uvicorn on the configured host and port"""
    uvicorn.run(app, host=_app_config.host, port=_app_config.port, log_config=None)


if __name__ == "__main__":
    run()
