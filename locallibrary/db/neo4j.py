# locallibrary/db/neo4j.py
import logging
from typing import Optional

from neo4j import AsyncDriver, AsyncGraphDatabase

from locallibrary.core.config import get_settings

logger = logging.getLogger(__name__)

_driver: Optional[AsyncDriver] = None


def get_driver() -> AsyncDriver:
    """Return the shared async driver, creating it on first use."""
    global _driver
    if _driver is None:
        settings = get_settings()
        try:
            _driver = AsyncGraphDatabase.driver(
                settings.neo4j_uri,
                auth=(settings.neo4j_user, settings.neo4j_password),
                max_connection_lifetime=30 * 60,  # 30 minutes
                max_connection_pool_size=50,
                connection_acquisition_timeout=30,
            )
            logger.info(f"Neo4j driver created for: {settings.neo4j_uri}")
        except Exception as e:
            logger.error(f"Error creating the Neo4j driver: {e}")
            raise
    return _driver


async def verify_connection() -> bool:
    try:
        async with get_driver().session(database=get_settings().neo4j_database) as session:
            result = await session.run("RETURN 1 AS test")
            record = await result.single()
            return record["test"] == 1
    except Exception as e:
        logger.error(f"Neo4j connection test failed: {e}")
        return False


async def close_driver() -> None:
    """Close the driver when the application shuts down."""
    global _driver
    if _driver is not None:
        await _driver.close()
        _driver = None
        logger.info("Neo4j driver closed")
