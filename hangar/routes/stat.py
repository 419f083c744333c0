"""Statistics and version information endpoints"""

from fastapi import APIRouter
from pydantic import BaseModel
from typing import Dict
import tomli
from pathlib import Path
from hangar.database import db_service
from hangar.models import ShipType

router = APIRouter()


def get_version() -> str:
    """Get version from pyproject.toml"""
    try:
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomli.load(f)
        return data.get("project", {}).get("version", "unknown")
    except (OSError, tomli.TOMLDecodeError):
        return "unknown"


class ShipStats(BaseModel):
    total: int
    used: int
    by_type: Dict[str, int]
    average_rating: float


class OverviewResponse(BaseModel):
    service: str
    version: str
    status: str
    ships: ShipStats


@router.get("/stat")
async def get_stat():
    """Get service statistics and version information"""
    return {
        "service": "hangar",
        "version": get_version(),
        "status": "running",
    }


@router.get("/stat/overview", response_model=OverviewResponse)
async def get_overview():
    """Get fleet statistics for dashboard"""
    all_ships = await db_service.list_all_ships()

    by_type = {ship_type.value: 0 for ship_type in ShipType}
    for ship in all_ships:
        by_type[ShipType(ship.ship_type).value] += 1

    used_ships = [s for s in all_ships if s.is_used]
    average_rating = (
        round(sum(s.rating for s in all_ships) / len(all_ships), 2) if all_ships else 0.0
    )

    return OverviewResponse(
        service="hangar",
        version=get_version(),
        status="running",
        ships=ShipStats(
            total=len(all_ships),
            used=len(used_ships),
            by_type=by_type,
            average_rating=average_rating,
        ),
    )
