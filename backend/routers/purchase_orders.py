"""Legacy flat PO endpoints (no pricing). Mounted at the root, not under /api."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from .. import models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/po", tags=["purchase-orders"])

@router.post("")
def create_purchase_order(po: schemas.PurchaseOrderCreate, db: Session = Depends(get_db)):
    db_po = models.PurchaseOrder(**po.model_dump())
    try:
        db.add(db_po)
        db.commit()
        db.refresh(db_po)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Insert error: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
    return {
        "message": "PO added successfully",
        "data": [schemas.PurchaseOrder.model_validate(db_po)],
    }

@router.get("", response_model=List[schemas.PurchaseOrder])
def list_purchase_orders(db: Session = Depends(get_db)):
    try:
        return db.query(models.PurchaseOrder).order_by(models.PurchaseOrder.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Fetch error: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
