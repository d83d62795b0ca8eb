from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse

from shortforge.api.routes import router
from shortforge.core.errors import ShortForgeError, Unexpected
from shortforge.core.logging import get_logger

STATIC_DIR = Path(__file__).resolve().parent / "web" / "static"

log = get_logger("main")

app = FastAPI(title="ShortForge | AI Shorts Director", version="0.1.0")
app.include_router(router)

@app.exception_handler(ShortForgeError)
async def on_shortforge_error(request: Request, exc: ShortForgeError):
    if exc.status_code < 500:
        log.warning(f"{request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    else:
        log.error(f"{request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)

@app.exception_handler(Exception)
async def on_unhandled_error(request: Request, exc: Exception):
    log.error(f"{request.url.path} -> unhandled {type(exc).__name__}: {exc!r}")
    err = Unexpected(str(exc) or "Unexpected server error")
    return JSONResponse(err.to_dict(), status_code=err.status_code)

@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")
