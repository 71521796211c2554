"""Authentication endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_auth_store, get_identity_service
from app.services.auth.store import AuthSession, AuthStore
from app.services.identity.models import CreateUserParams, SignInParams
from app.services.identity.service import IdentityError, IdentityService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/auth/sign-up", response_model=AuthSession)
async def sign_up(
    params: CreateUserParams,
    identity: IdentityService = Depends(get_identity_service),
    auth_store: AuthStore = Depends(get_auth_store),
):
    """Create an account and sign in."""
    logger.info(f"[AUTH] Sign-up requested - {params.email}")
    try:
        user = await identity.create_user(params.email, params.password, params.name)
    except IdentityError as e:
        raise HTTPException(status_code=400, detail=str(e))

    auth_store.set_authenticated(user)
    auth_store.set_loading(False)
    return auth_store.snapshot()


@router.post("/api/auth/sign-in", response_model=AuthSession)
async def sign_in(
    params: SignInParams,
    identity: IdentityService = Depends(get_identity_service),
    auth_store: AuthStore = Depends(get_auth_store),
):
    """Sign in with email and password, then load the profile."""
    logger.info(f"[AUTH] Sign-in requested - {params.email}")
    try:
        await identity.sign_in(params.email, params.password)
    except IdentityError as e:
        raise HTTPException(status_code=401, detail=str(e))

    return await auth_store.hydrate()


@router.post("/api/auth/sign-out", response_model=AuthSession)
async def sign_out(
    identity: IdentityService = Depends(get_identity_service),
    auth_store: AuthStore = Depends(get_auth_store),
):
    """Sign out."""
    await identity.sign_out()
    auth_store.set_unauthenticated()
    auth_store.set_loading(False)
    logger.info("[AUTH] Signed out")
    return auth_store.snapshot()


@router.get("/api/auth/session", response_model=AuthSession)
async def get_session(auth_store: AuthStore = Depends(get_auth_store)):
    """Get the current auth state."""
    return auth_store.snapshot()


@router.post("/api/auth/refresh", response_model=AuthSession)
async def refresh_session(auth_store: AuthStore = Depends(get_auth_store)):
    """Re-run session hydration."""
    return await auth_store.hydrate()
