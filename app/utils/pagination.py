# app/utils/pagination.py
import math
from fastapi import Query
from sqlalchemy.orm import Query as OrmQuery

from app.schemas.common import PageParams


def paginate(query: OrmQuery, params: PageParams) -> dict:
    """Apply page/limit to an ordered query and build the list envelope."""
    total = query.order_by(None).count()
    items = query.offset(params.offset).limit(params.limit).all()

    return {
        "data": items,
        "pagination": {
            "total": total,
            "page": params.page,
            "limit": params.limit,
            "total_pages": math.ceil(total / params.limit) if total else 0,
        },
    }


def page_params(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
) -> PageParams:
    return PageParams(page=page, limit=limit)
