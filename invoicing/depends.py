from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from invoicing.app.services.pdf_service import CompanyProfile

# Registers the tables on SQLModel.metadata
import invoicing.domain  # noqa: F401

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)


def enable_sqlite_foreign_keys(sync_engine):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection"""
    if sync_engine.dialect.name != "sqlite":
        return

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine.sync_engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_company_profile() -> CompanyProfile:
    return CompanyProfile(
        name=ApplicationConfig.COMPANY_NAME,
        address=ApplicationConfig.COMPANY_ADDRESS,
        contact=ApplicationConfig.COMPANY_CONTACT,
        currency=ApplicationConfig.CURRENCY,
    )
