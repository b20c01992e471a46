import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from admin.routes import router as admin_router
from auth.auth_utils import DEFAULT_ADMIN_PASS
from auth.routes import router as auth_router
from cities.routes import router as cities_router
from database import store_for
from errors import ContentError, NotFoundError
from feedback.routes import router as feedback_router
from gallery.routes import router as gallery_router
from settings import Settings, get_settings
from states.routes import router as states_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("discover_northeast")


@asynccontextmanager
async def lifespan(app: FastAPI):
    current = app.dependency_overrides.get(get_settings, get_settings)()
    store_for(current.data_dir).init_files()
    current.upload_dir.mkdir(parents=True, exist_ok=True)
    if current.admin_pass == DEFAULT_ADMIN_PASS and not current.admin_pass_hash:
        logger.warning("Admin password is the default 'changeme'; set ADMIN_PASS")
    yield


app = FastAPI(title="Discover NorthEast India", lifespan=lifespan)

# ---- CORS CONFIG ----
allowed_origins = [
    "http://localhost:3000",
    "http://localhost:5173",
]

if settings.frontend_url:
    allowed_origins.append(settings.frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- ERROR HANDLING ----
@app.exception_handler(ContentError)
async def content_error_handler(request: Request, exc: ContentError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"Invalid request: {field} {first.get('msg', '')}".strip()
    return JSONResponse(status_code=400, content={"error": message})


# ---- API ROUTERS ----
app.include_router(states_router, prefix="/api")
app.include_router(cities_router, prefix="/api")
app.include_router(feedback_router, prefix="/api")
app.include_router(gallery_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


# ---- HEALTH CHECK ----
@app.get("/api/health")
def health():
    return {"status": "Backend running"}


# ---- PAGES ----
PAGES = {
    "/": "index.html",
    "/state": "state.html",
    "/city": "city.html",
    "/admin": "admin.html",
}


def page_route(filename: str):
    def serve(current: Settings = Depends(get_settings)):
        path = current.web_dir / filename
        if not path.is_file():
            raise NotFoundError("Page not found")
        return FileResponse(path)

    return serve


for route, filename in PAGES.items():
    app.add_api_route(route, page_route(filename), methods=["GET"], include_in_schema=False)

app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")
app.mount("/", StaticFiles(directory=settings.web_dir, check_dir=False), name="web")


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
