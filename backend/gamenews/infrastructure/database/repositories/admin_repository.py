"""Admin gate backed by the 'admins' table."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamenews.application.interfaces import AdminGate
from gamenews.domain.entities import AdminRecord
from gamenews.infrastructure.database.models import AdminModel

logger = logging.getLogger(__name__)


class SQLAlchemyAdminRepository(AdminGate):
    """Implements the AdminGate port with an exact IP lookup on every call."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def is_admin(self, origin: str | None) -> bool:
        if not origin:
            return False

        stmt = select(AdminModel.id).where(AdminModel.ip == origin).limit(1)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError:
            # Lookup failures deny admin rights rather than failing the request
            logger.exception("Admin lookup failed for origin %s, treating as non-admin", origin)
            await self._session.rollback()
            return False
        return result.scalar_one_or_none() is not None

    async def ensure_admins(self, ips: list[str]) -> int:
        """Insert a record for every IP not already present. Returns how many were added."""
        wanted = {ip.strip() for ip in ips if ip.strip()}
        if not wanted:
            return 0

        result = await self._session.execute(
            select(AdminModel.ip).where(AdminModel.ip.in_(wanted))
        )
        existing = set(result.scalars().all())

        added = 0
        for ip in sorted(wanted - existing):
            record = AdminRecord(ip=ip)
            self._session.add(AdminModel(id=record.id, ip=record.ip))
            added += 1
        await self._session.flush()
        return added
