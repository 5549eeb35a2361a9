from ic_court.core.config import settings
from ic_court.core.security import ActorContext


async def get_current_actor() -> ActorContext:
    """
    Resolve the acting user for a request.
    No session provider exists yet, so this is the configured placeholder actor.
    """
    return ActorContext(actor_id=settings.DEFAULT_ACTOR_ID, role=settings.DEFAULT_ACTOR_ROLE)
