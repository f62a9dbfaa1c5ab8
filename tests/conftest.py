"""Shared fixtures: a fresh SQLite database per test, real users and tokens."""

import asyncio
from datetime import datetime, timezone
import itertools
import os
from pathlib import Path
import tempfile


# Point the application engine at a throwaway file before anything imports config
_app_db_dir = Path(tempfile.mkdtemp(prefix="marketplace-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_app_db_dir / 'app.db'}"
os.environ["SECRET_KEY"] = "test-secret-key"

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from main import app  # noqa: E402
from marketplace.core.security import create_token_for_user  # noqa: E402
from marketplace.database import Base, build_engine, build_session_factory, get_db  # noqa: E402
from marketplace.database.models import Product, User  # noqa: E402
from marketplace.services.product_repository import ProductRepository  # noqa: E402


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


async def create_schema(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# === Async fixtures for repository tests ===

@pytest_asyncio.fixture
async def db(tmp_path):
    """AsyncSession on a fresh database, for tests that call the repository directly."""
    engine = build_engine(sqlite_url(tmp_path / "repo.db"), poolclass=NullPool)
    await create_schema(engine)
    async with build_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def seller(db):
    user = User(name="Alice Seller", email="alice@example.com", hashed_password="x")
    db.add(user)
    await db.commit()
    return user


# === Sync fixtures for API tests ===

@pytest.fixture
def session_factory(tmp_path):
    """Session factory on a fresh database file, shared by the app and the test."""
    engine = build_engine(sqlite_url(tmp_path / "api.db"), poolclass=NullPool)
    asyncio.run(create_schema(engine))
    yield build_session_factory(engine)
    asyncio.run(engine.dispose())


@pytest.fixture
def run_db(session_factory):
    """Run ``work(session)`` to completion from synchronous test code."""

    def _run(work):
        async def _go():
            async with session_factory() as session:
                return await work(session)

        return asyncio.run(_go())

    return _run


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the per-test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(run_db):
    counter = itertools.count(1)

    def _make(name: str | None = None, email: str | None = None, id: int | None = None) -> User:
        n = next(counter)

        async def work(session):
            user = User(
                id=id,
                name=name or f"Seller {n}",
                email=email or f"seller{n}@example.com",
                hashed_password="not-a-real-hash",
            )
            session.add(user)
            await session.commit()
            return user

        return run_db(work)

    return _make


@pytest.fixture
def make_product(run_db):
    def _make(
        owner: User,
        name: str = "Desk",
        description: str = "Oak desk",
        price: int = 4999,
        deleted: bool = False,
    ) -> Product:
        async def work(session):
            product = Product(
                name=name,
                description=description,
                price=price,
                owner_id=owner.id,
                deleted_at=datetime.now(timezone.utc) if deleted else None,
            )
            session.add(product)
            await session.commit()
            return product

        return run_db(work)

    return _make


@pytest.fixture
def raw_product(run_db):
    """Look a product up in storage, soft-deleted rows included."""

    def _get(product_id: int) -> Product | None:
        return run_db(lambda session: ProductRepository.find_with_trashed(session, product_id))

    return _get


@pytest.fixture
def auth_headers():
    """Bearer header carrying a real JWT for ``user``."""

    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_token_for_user(user)}"}

    return _headers
