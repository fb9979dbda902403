"""ambit CLI commands."""

from .auth import auth
from .doctor import doctor

__all__ = ["auth", "doctor"]
