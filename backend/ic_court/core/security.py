"""
Actor context, role policy and credential hashing.

Every command receives the acting user as an ActorContext and checks it
against ROLE_POLICY before touching storage. Queries are not gated.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet
import logging

import bcrypt

from ic_court.core.exceptions import PermissionDeniedError
from ic_court.models.enums import UserRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActorContext:
    actor_id: int
    role: UserRole


CREATE_USER = "create_user"
CREATE_DISPUTE = "create_dispute"
UPDATE_DISPUTE = "update_dispute"
CREATE_PARTY = "create_party"
CREATE_HEARING = "create_hearing"
UPDATE_HEARING = "update_hearing"

ROLE_POLICY: Dict[str, FrozenSet[UserRole]] = {
    CREATE_USER: frozenset({UserRole.STAFF}),
    CREATE_DISPUTE: frozenset({UserRole.STAFF}),
    UPDATE_DISPUTE: frozenset({UserRole.STAFF, UserRole.COMMISSIONER}),
    CREATE_PARTY: frozenset({UserRole.STAFF, UserRole.REGISTRAR}),
    CREATE_HEARING: frozenset({UserRole.STAFF, UserRole.COMMISSIONER}),
    UPDATE_HEARING: frozenset({UserRole.STAFF, UserRole.COMMISSIONER}),
}


def ensure_allowed(actor: ActorContext, action: str) -> None:
    """Raise PermissionDeniedError unless the actor's role may run `action`."""
    allowed = ROLE_POLICY[action]
    if actor.role not in allowed:
        logger.warning("Actor %s (%s) denied %s", actor.actor_id, actor.role.value, action)
        raise PermissionDeniedError(actor.role.value, action)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
