from fastapi import APIRouter

router = APIRouter(include_in_schema=False)

@router.get("/")
def root():
    return {
        "name": "Personnel Management API",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
