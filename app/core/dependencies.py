"""FastAPI dependencies."""
from fastapi import Request

from app.core.container import ClientContainer
from app.services.auth.store import AuthStore
from app.services.cart.store import CartStore
from app.services.identity.service import IdentityService
from app.services.menu.repository import MenuRepository
from app.services.navigation.state import NavigationState
from app.services.search.debouncer import SearchDebouncer


def get_container(request: Request) -> ClientContainer:
    """Get the container created in the application lifespan."""
    return request.app.state.container


def get_menu_repository(request: Request) -> MenuRepository:
    """Get menu repository instance."""
    return get_container(request).menu_repository


def get_identity_service(request: Request) -> IdentityService:
    return get_container(request).identity


def get_auth_store(request: Request) -> AuthStore:
    return get_container(request).auth


def get_cart_store(request: Request) -> CartStore:
    return get_container(request).cart


def get_navigation_state(request: Request) -> NavigationState:
    return get_container(request).navigation


def get_search_debouncer(request: Request) -> SearchDebouncer:
    return get_container(request).search
