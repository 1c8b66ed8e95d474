"""
Login / logout.

POST /api/auth/login   — exchange the shared access code for a session cookie
POST /api/auth/logout  — drop the cookie and go back to the login page
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from compliance.auth import LOGIN_PATH, AccessGate, get_access_gate
from compliance.schemas import LoginRequest

logger = logging.getLogger(__name__)
router = APIRouter()


# ── POST /api/auth/login ─────────────────────────────────────────────────
@router.post("/auth/login")
async def login(request: Request, gate: AccessGate = Depends(get_access_gate)):
    try:
        payload = await request.json()
        req = LoginRequest.model_validate(payload)
    except (ValueError, ValidationError):
        raise HTTPException(status_code=400, detail="Access code is required")

    if not req.access_code:
        raise HTTPException(status_code=400, detail="Access code is required")

    if not gate.verify_code(req.access_code):
        logger.warning("Rejected login attempt from %s", request.client.host if request.client else "unknown")
        raise HTTPException(status_code=401, detail="Invalid access code")

    response = JSONResponse({"success": True})
    gate.issue_session(response)
    logger.info("Login succeeded")
    return response


# ── POST /api/auth/logout ────────────────────────────────────────────────
@router.post("/auth/logout")
def logout(gate: AccessGate = Depends(get_access_gate)):
    response = RedirectResponse(url=LOGIN_PATH, status_code=303)
    gate.clear_session(response)
    return response
