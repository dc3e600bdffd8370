from fastapi import APIRouter

from personnel_api.schemas.common import HealthOut

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthOut)
def health():
    # liveness only, no database round-trip
    return HealthOut(status="ok", message="Server is running")
