from fastapi import FastAPI

from statusdoc.app.api.generate import router as generate_router
from statusdoc.app.api.templates import router as templates_router

app = FastAPI(
    title="statusdoc",
    description="Application status document generation engine",
    version="0.1.0",
)

app.include_router(generate_router, prefix="/applications")
app.include_router(templates_router, prefix="/templates")
