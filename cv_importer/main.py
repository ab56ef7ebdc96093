import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from cv_importer.api.routes.parse import router as parse_router
from cv_importer.core.config import get_config

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="CV Importer",
    description="Turns PDF/DOCX/TXT resumes into structured CV records (profile, experience, education, skills, projects, certifications)",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "cv-importer", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="CV Importer API",
        version="0.1.0",
        description="Heuristic resume import for the CV builder",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
