from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from .. import models, schemas
from ..database import get_db
from ..po_service import create_po, get_po_or_404, update_po, delete_po

router = APIRouter(prefix="/customer-po", tags=["customer-po"])

@router.post("", response_model=schemas.CustomerPOResponse)
def create_customer_po(po: schemas.CustomerPOCreate, db: Session = Depends(get_db)):
    """Price and store a sales-side PO. Missing size -> 400."""
    row = create_po(db, models.CustomerPO, po.model_dump())
    return schemas.CustomerPOResponse(
        message="Customer PO added successfully",
        data=[schemas.CustomerPO.model_validate(row)],
    )

@router.get("", response_model=List[schemas.CustomerPO])
def list_customer_pos(status: Optional[str] = None, skip: int = 0, limit: int = 100,
                      db: Session = Depends(get_db)):
    query = db.query(models.CustomerPO)
    if status:
        query = query.filter(models.CustomerPO.status == status)
    return query.order_by(models.CustomerPO.id).offset(skip).limit(limit).all()

@router.get("/{po_id}", response_model=schemas.CustomerPO)
def get_customer_po(po_id: int, db: Session = Depends(get_db)):
    return get_po_or_404(db, models.CustomerPO, po_id)

@router.patch("/{po_id}", response_model=schemas.CustomerPOResponse)
def update_customer_po(po_id: int, update: schemas.POUpdate, db: Session = Depends(get_db)):
    row = get_po_or_404(db, models.CustomerPO, po_id)
    row = update_po(db, row, update.model_dump(exclude_unset=True))
    return schemas.CustomerPOResponse(
        message="Customer PO updated successfully",
        data=[schemas.CustomerPO.model_validate(row)],
    )

@router.delete("/{po_id}", response_model=schemas.MessageResponse)
def delete_customer_po(po_id: int, db: Session = Depends(get_db)):
    row = get_po_or_404(db, models.CustomerPO, po_id)
    delete_po(db, row)
    return schemas.MessageResponse(message="Customer PO deleted successfully")
