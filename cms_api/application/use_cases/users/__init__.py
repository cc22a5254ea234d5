"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .create_user import create_user
from .delete_user import delete_user
from .get_user import get_user
from .list_users import list_users
from .seed_admin import seed_admin
from .update_user import update_user

__all__ = [
    "authenticate_user",
    "create_user",
    "delete_user",
    "get_user",
    "list_users",
    "seed_admin",
    "update_user",
]
