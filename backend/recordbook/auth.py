"""
RecordBook Backend — Acting User Resolution
=============================================

What:  Resolves who is performing the current request, for audit stamping.
Why:   created_by / updated_by record the acting user's display name. That is
       the only use this service makes of authentication; login, sessions and
       permissions live in the auth layer in front of it.
How:   An upstream auth middleware may place the authenticated user on
       request.state.user; otherwise the gateway forwards the display name in
       a header (settings.acting_user_header). Neither present → anonymous.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from recordbook.config import settings


@dataclass(frozen=True)
class ActingUser:
    """
    The principal behind a request.

    display_name is None for anonymous requests; callers check
    is_authenticated (or read display_name directly when None is the value
    they want stored).
    """

    display_name: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "ActingUser":
        return cls(display_name=None)

    @classmethod
    def named(cls, name: Optional[str]) -> "ActingUser":
        """Builds an ActingUser from a possibly blank name."""
        if name is None:
            return cls.anonymous()
        name = name.strip()
        return cls(display_name=name or None)

    @property
    def is_authenticated(self) -> bool:
        return self.display_name is not None


def _name_from_state_user(user: object) -> Optional[str]:
    for attr in ("display_name", "name", "nome"):
        value = getattr(user, attr, None)
        if isinstance(value, str):
            return value
    return None


async def get_acting_user(request: Request) -> ActingUser:
    """FastAPI dependency returning the ActingUser for this request."""
    state_user = getattr(request.state, "user", None)
    if state_user is not None:
        return ActingUser.named(_name_from_state_user(state_user))
    return ActingUser.named(request.headers.get(settings.acting_user_header))
