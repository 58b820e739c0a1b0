"""Integration test configuration.

Integration tests run the PostgreSQL repositories against the database named
by ``DATABASE__URL``. The schema is created from the table definitions when
missing; tests are skipped when no database is reachable.
"""

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError

from agora.config import Settings
from agora.persistence.database import create_engine
from agora.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def database_schema():
    engine = create_engine(Settings())
    try:
        async with engine.begin() as connection:
            await connection.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL unavailable: {e}")
    finally:
        await engine.dispose()
    yield
