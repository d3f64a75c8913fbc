from fastapi import APIRouter, Depends

from app.db import ConnectionProvider, get_connection_provider

router = APIRouter()


@router.get("/health", tags=["health"])
def health(provider: ConnectionProvider = Depends(get_connection_provider)):
    db_ok = provider.ping()
    return {
        "status": "ok" if db_ok else "degraded",
        "db": db_ok,
    }
