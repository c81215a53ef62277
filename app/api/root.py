from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "HR Forms Service",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "forms": "/forms",
    }
