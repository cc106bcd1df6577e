from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from app.config import settings


engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

AsyncSessionLocal = sessionmaker(
   bind=engine,
   class_=AsyncSession,
   expire_on_commit=False
)


async def get_db():
   async with AsyncSessionLocal() as session:
      try:
         yield session
      finally:
         await session.close()


async def init_db() -> None:
   """Create the registry tables if they do not exist yet."""
   # Registers the tables on SQLModel.metadata
   import app.models  # noqa: F401

   async with engine.begin() as conn:
      await conn.run_sync(SQLModel.metadata.create_all)


async def reset_db() -> None:
   """Drop and recreate the registry tables."""
   import app.models  # noqa: F401

   async with engine.begin() as conn:
      await conn.run_sync(SQLModel.metadata.drop_all)
      await conn.run_sync(SQLModel.metadata.create_all)
