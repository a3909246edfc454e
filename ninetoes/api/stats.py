"""
Statistics endpoints, keyed by a client-chosen storage identifier.

Routes without a key use the configured STATS_KEY.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ninetoes.api.deps import get_db
from ninetoes.core.config import settings
from ninetoes.schemas import stats as stats_schemas
from ninetoes.services.stats_store import DatabaseStore, stats_service_obj

router = APIRouter(
    prefix="/stats",
    tags=["stats"],
    responses={404: {"description": "No statistics for this key"}}
)


@router.get("", response_model=stats_schemas.Stats)
def get_default_stats(db: Session = Depends(get_db)):
    """
    Get the totals stored under the default key.
    """
    return stats_service_obj.load(DatabaseStore(db), settings.STATS_KEY)


@router.post("/record", response_model=stats_schemas.Stats)
def record_default_game(record: stats_schemas.RecordGame, db: Session = Depends(get_db)):
    """
    Add a finished game to the totals under the default key.
    """
    return stats_service_obj.record_game(
        DatabaseStore(db), settings.STATS_KEY, record.state, record.use_cube
    )


@router.delete("", status_code=204)
def reset_default_stats(db: Session = Depends(get_db)):
    """
    Remove the totals stored under the default key.
    """
    stats_service_obj.reset(DatabaseStore(db), settings.STATS_KEY)


@router.get("/{key}", response_model=stats_schemas.Stats)
def get_stats(key: str, db: Session = Depends(get_db)):
    """
    Get the totals stored under a key.
    """
    return stats_service_obj.load(DatabaseStore(db), key)


@router.post("/{key}/record", response_model=stats_schemas.Stats)
def record_game(
        key: str,
        record: stats_schemas.RecordGame,
        db: Session = Depends(get_db)
):
    """
    Add a finished game to the totals under a key, creating them if needed.

    Wins score the cube value when the cube is in use, 1 otherwise.
    """
    return stats_service_obj.record_game(DatabaseStore(db), key, record.state, record.use_cube)


@router.delete("/{key}", status_code=204)
def reset_stats(key: str, db: Session = Depends(get_db)):
    """
    Remove the totals stored under a key.
    """
    stats_service_obj.reset(DatabaseStore(db), key)
