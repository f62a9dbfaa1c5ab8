"""
Asynchronous database session management for FastAPI
SQLite runs on the aiosqlite backend with WAL mode enabled
"""
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy import event
from marketplace.config import DATABASE_URL


def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable WAL, foreign keys, and reasonable performance options"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL;")     # Enables write-ahead logging (better concurrency)
    cursor.execute("PRAGMA synchronous = NORMAL;")  # Faster commits, still durable
    cursor.execute("PRAGMA foreign_keys = ON;")     # Enforce FK constraints
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """
    Create an async engine, wiring the SQLite pragmas when relevant.

    Extra keyword arguments go straight to ``create_async_engine``
    (tests pass ``poolclass=NullPool``).
    """
    is_sqlite = url.startswith("sqlite")
    async_engine = create_async_engine(
        url,
        echo=False,
        connect_args={"check_same_thread": False} if is_sqlite else {},
        **kwargs
    )
    if is_sqlite:
        event.listen(async_engine.sync_engine, "connect", set_sqlite_pragma)
    return async_engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


# --- Application engine and session factory ---
engine = build_engine(DATABASE_URL)
AsyncSessionLocal = build_session_factory(engine)


# --- Dependency for FastAPI endpoints ---
async def get_db():
    """
    Provides a new async database session per request.
    Closes it automatically when the request is done.
    """
    async with AsyncSessionLocal() as session:
        yield session
