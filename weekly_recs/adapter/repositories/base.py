from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from weekly_recs.app.repositories.errors import DuplicateRecordError

ModelT = TypeVar("ModelT", bound=SQLModel)


class SqlModelRepository:
    """Shared persistence helpers for the SQLModel repositories"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, entity: ModelT) -> ModelT:
        """Add and flush an entity, mapping unique violations to DuplicateRecordError"""
        self.session.add(entity)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(type(entity).__name__, str(exc.orig)) from exc
        await self.session.refresh(entity)
        return entity
