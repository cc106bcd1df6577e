from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.routers.errors import to_http_error
from app.schemas.soldier import DeleteResponse, SoldierCreate, SoldierRead, SoldierTableRow, SoldierUpdate
from app.services.soldier_service import SoldierService

router = APIRouter(responses= {404 : {"description":"Not found"}})


@router.post("", status_code= status.HTTP_201_CREATED)
async def register_soldier(data: SoldierCreate, db: AsyncSession = Depends(get_db)) -> SoldierRead:
    try:
        service = SoldierService(db)
        return await service.register(data)
    except Exception as e:
        raise to_http_error("soldier registration", e)


@router.get("", status_code= status.HTTP_200_OK)
async def list_soldiers(db: AsyncSession = Depends(get_db)) -> List[SoldierRead]:
    try:
        service = SoldierService(db)
        return await service.list_soldiers()
    except Exception as e:
        raise to_http_error("soldier listing", e)


@router.get("/search", status_code= status.HTTP_200_OK)
async def search_soldiers(q: Optional[str] = Query(None), db: AsyncSession = Depends(get_db)) -> List[SoldierRead]:
    """Case-insensitive match on soldier ID or name"""
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    try:
        service = SoldierService(db)
        return await service.search_soldiers(q)
    except Exception as e:
        raise to_http_error("soldier search", e)


@router.get("/table", status_code= status.HTTP_200_OK)
async def soldiers_table(db: AsyncSession = Depends(get_db)) -> List[SoldierTableRow]:
    try:
        service = SoldierService(db)
        return await service.table_view()
    except Exception as e:
        raise to_http_error("soldier table view", e)


@router.get("/{soldier_id}", status_code= status.HTTP_200_OK)
async def get_soldier(soldier_id: str, db: AsyncSession = Depends(get_db)) -> SoldierRead:
    try:
        service = SoldierService(db)
        return await service.get_soldier(soldier_id)
    except Exception as e:
        raise to_http_error("soldier lookup", e)


@router.put("/{soldier_id}", status_code= status.HTTP_200_OK)
async def update_soldier(soldier_id: str, data: SoldierUpdate, db: AsyncSession = Depends(get_db)) -> SoldierRead:
    try:
        service = SoldierService(db)
        return await service.update_soldier(soldier_id, data)
    except Exception as e:
        raise to_http_error("soldier update", e)


@router.delete("/{soldier_id}", status_code= status.HTTP_200_OK)
async def delete_soldier(soldier_id: str, db: AsyncSession = Depends(get_db)) -> DeleteResponse:
    try:
        service = SoldierService(db)
        await service.delete_soldier(soldier_id)
    except Exception as e:
        raise to_http_error("soldier deletion", e)

    return DeleteResponse(
        success= True,
        message= "Soldier deleted successfully",
        soldier_id= soldier_id
    )
