from __future__ import annotations

from fastapi import APIRouter, Depends

from server.config import Settings, get_settings
from sms_client import is_transport_ready

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    """Return service health status for monitoring and load balancers."""
    return {
        "ok": True,
        "service": "sms-client",
        "version": settings.app_version,
        "transport_ready": is_transport_ready(),
        "credentials_configured": settings.has_twilio_credentials,
    }


@router.get("/healthz")
async def healthz() -> dict:
    """Alternative health endpoint (kept for compatibility)."""
    return {"status": "ok"}
