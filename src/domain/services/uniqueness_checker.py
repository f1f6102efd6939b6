"""Remote uniqueness check for profile fields."""

import structlog

from domain.repositories.profile_repository import IProfileRecordStore

logger = structlog.get_logger()


class UniquenessChecker:
    """Query the profile store for records already holding a value.

    The check is advisory: nothing stops another editor from claiming the
    same email between this query and the subsequent write.
    """

    def __init__(self, store: IProfileRecordStore) -> None:
        self._store = store

    async def is_email_taken(self, candidate_email: str, excluding_id: str | None = None) -> bool:
        """Check whether any other record holds the email.

        The record keyed ``excluding_id`` never counts as a conflict, so an
        unchanged email does not block its own owner's save.
        """
        matches = await self._store.query_by_field("email", candidate_email)
        conflicts = [m for m in matches if m.user_id != excluding_id]
        if conflicts:
            logger.info(
                "email_conflict",
                excluding_id=excluding_id,
                conflict_count=len(conflicts),
            )
        return bool(conflicts)
