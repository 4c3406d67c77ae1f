"""
Health of the dummy component.

The component is healthy when its engine is initialized and its database
answers a ping in time.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

DEFAULT_PING_TIMEOUT_SECONDS = 5.0


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class HealthCheckResult:
    """Status of one of the parts of the component."""

    name: str
    status: HealthStatus
    message: str
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "details": self.details,
        }


def check_engine(engine: Any | None) -> HealthCheckResult:
    """Report the database and schema version of an initialized engine."""
    if engine is None or not engine.initialized:
        return HealthCheckResult("engine", HealthStatus.UNHEALTHY, "Engine not initialized")

    return HealthCheckResult(
        "engine",
        HealthStatus.HEALTHY,
        "Engine initialized",
        details={
            "db_name": engine.config.db_name,
            "schema_version": engine.config.schema_version,
        },
    )


async def ping_database(
    db: AsyncIOMotorDatabase | None, timeout_seconds: float = DEFAULT_PING_TIMEOUT_SECONDS
) -> HealthCheckResult:
    """Ping the database of the component."""
    if db is None:
        return HealthCheckResult("mongodb", HealthStatus.UNHEALTHY, "Not connected to MongoDB")

    try:
        await asyncio.wait_for(db.command("ping"), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        return HealthCheckResult(
            "mongodb",
            HealthStatus.UNHEALTHY,
            f"Ping to '{db.name}' timed out after {timeout_seconds}s",
        )
    except PyMongoError as e:
        return HealthCheckResult(
            "mongodb", HealthStatus.UNHEALTHY, f"Ping to '{db.name}' failed: {e}"
        )

    return HealthCheckResult(
        "mongodb", HealthStatus.HEALTHY, "MongoDB answers", details={"db_name": db.name}
    )


async def health_report(
    engine: Any | None,
    db: AsyncIOMotorDatabase | None,
    timeout_seconds: float = DEFAULT_PING_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Check the engine and the database.

    Returns:
        The overall ``status``, a ``timestamp`` and the result of each check
    """
    checks = [check_engine(engine), await ping_database(db, timeout_seconds)]
    healthy = all(check.status == HealthStatus.HEALTHY for check in checks)
    return {
        "status": (HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY).value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": [check.to_dict() for check in checks],
    }
