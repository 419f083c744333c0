from sqlmodel import SQLModel, select
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.pool import StaticPool
from typing import Optional, List
import logging

from hangar.config import settings
from hangar.models import Ship

logger = logging.getLogger(__name__)


class DatabaseService:
    """Record store for ship rows, one short-lived session per call"""

    def __init__(self):
        self.engine: Optional[AsyncEngine] = None

    async def initialize(self, database_url: Optional[str] = None):
        """Initialize database connection"""
        self.engine = create_async_engine(
            database_url or settings.database_url,
            echo=settings.debug,
            future=True,
            # SQLite specific settings
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    async def create_tables(self):
        """Create database tables"""
        if not self.engine:
            await self.initialize()

        async with self.engine.begin() as conn:  # type: ignore
            await conn.run_sync(SQLModel.metadata.create_all)

    async def close(self):
        """Dispose of the engine and its pooled connection"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None

    def get_session(self) -> AsyncSession:
        """Get database session"""
        if not self.engine:
            raise RuntimeError("Database not initialized")

        return AsyncSession(self.engine, expire_on_commit=False)

    async def create_ship(self, ship: Ship) -> Ship:
        """Insert a ship; the database assigns its id"""
        session = self.get_session()
        try:
            session.add(ship)
            await session.commit()
            await session.refresh(ship)
            return ship
        finally:
            await session.close()

    async def get_ship(self, ship_id: int) -> Optional[Ship]:
        """Get ship by ID"""
        session = self.get_session()
        try:
            statement = select(Ship).where(Ship.id == ship_id)
            result = await session.execute(statement)
            return result.scalar_one_or_none()
        finally:
            await session.close()

    async def update_ship(self, ship: Ship) -> Ship:
        """Update ship record"""
        session = self.get_session()
        try:
            # merge() copies the detached instance's state into a persistent one
            merged_ship = await session.merge(ship)
            await session.commit()
            await session.refresh(merged_ship)
            return merged_ship
        finally:
            await session.close()

    async def delete_ship(self, ship_id: int) -> bool:
        """Delete ship by ID"""
        session = self.get_session()
        try:
            statement = select(Ship).where(Ship.id == ship_id)
            result = await session.execute(statement)
            ship = result.scalar_one_or_none()

            if ship:
                await session.delete(ship)
                await session.commit()
                return True
            return False
        finally:
            await session.close()

    async def list_all_ships(self) -> List[Ship]:
        """List all ships in id order"""
        session = self.get_session()
        try:
            statement = select(Ship).order_by(Ship.id.asc())  # type: ignore
            result = await session.execute(statement)
            return list(result.scalars().all())
        finally:
            await session.close()


db_service = DatabaseService()
