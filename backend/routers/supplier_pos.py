from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from .. import models, schemas
from ..database import get_db
from ..po_service import create_po, get_po_or_404, update_po, delete_po

router = APIRouter(prefix="/supplier-po", tags=["supplier-po"])

@router.post("", response_model=schemas.SupplierPOResponse)
def create_supplier_po(po: schemas.SupplierPOCreate, db: Session = Depends(get_db)):
    """Price and store a procurement-side PO. Same calculation as customer POs."""
    row = create_po(db, models.SupplierPO, po.model_dump())
    return schemas.SupplierPOResponse(
        message="Supplier PO added successfully",
        data=[schemas.SupplierPO.model_validate(row)],
    )

@router.get("", response_model=List[schemas.SupplierPO])
def list_supplier_pos(status: Optional[str] = None, skip: int = 0, limit: int = 100,
                      db: Session = Depends(get_db)):
    query = db.query(models.SupplierPO)
    if status:
        query = query.filter(models.SupplierPO.status == status)
    return query.order_by(models.SupplierPO.id).offset(skip).limit(limit).all()

@router.get("/{po_id}", response_model=schemas.SupplierPO)
def get_supplier_po(po_id: int, db: Session = Depends(get_db)):
    return get_po_or_404(db, models.SupplierPO, po_id)

@router.patch("/{po_id}", response_model=schemas.SupplierPOResponse)
def update_supplier_po(po_id: int, update: schemas.POUpdate, db: Session = Depends(get_db)):
    row = get_po_or_404(db, models.SupplierPO, po_id)
    row = update_po(db, row, update.model_dump(exclude_unset=True))
    return schemas.SupplierPOResponse(
        message="Supplier PO updated successfully",
        data=[schemas.SupplierPO.model_validate(row)],
    )

@router.delete("/{po_id}", response_model=schemas.MessageResponse)
def delete_supplier_po(po_id: int, db: Session = Depends(get_db)):
    row = get_po_or_404(db, models.SupplierPO, po_id)
    delete_po(db, row)
    return schemas.MessageResponse(message="Supplier PO deleted successfully")
