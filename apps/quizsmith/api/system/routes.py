from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/")
def root():
    return {"message": "Quiz generator API is running"}


@router.get("/healthz")
def health():
    return {"ok": True}
