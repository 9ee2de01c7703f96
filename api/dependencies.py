"""Shared FastAPI dependencies."""

from fastapi import Depends, HTTPException

from api.services.database import DatabaseService, get_db
from api.services.queries import SupplierQueryService


def get_query_service(db: DatabaseService = Depends(get_db)) -> SupplierQueryService:
    return SupplierQueryService(db)


def require_feature(flag_id: str):
    """Dependency factory rejecting requests while a feature flag is off."""

    def check(service: SupplierQueryService = Depends(get_query_service)) -> None:
        if not service.get_feature_flag(flag_id):
            raise HTTPException(status_code=403, detail="This feature is currently unavailable")

    return check
