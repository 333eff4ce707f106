from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas, reports
from ..config import settings
from ..database import get_db

router = APIRouter(prefix="/reports", tags=["reports"])

@router.get("/top-materials", response_model=schemas.TopMaterialsReport)
def top_materials(db: Session = Depends(get_db)):
    """Most sold sizes by total weight (customer POs only)."""
    rows = db.query(models.CustomerPO.size, models.CustomerPO.total_weight).all()
    return {"success": True, "top_materials": reports.top_materials(rows)}

@router.get("/monthly-sales", response_model=schemas.MonthlySalesReport)
def monthly_sales(db: Session = Depends(get_db)):
    """Customer PO value (incl. GST) per month."""
    rows = db.query(models.CustomerPO.date, models.CustomerPO.total_price).all()
    return {"success": True, "monthly_sales": reports.monthly_sales(rows)}

@router.get("/pending-pos", response_model=schemas.PendingPOsReport)
def pending_pos(db: Session = Depends(get_db)):
    pending = settings.PENDING_STATUS
    customers = db.query(models.CustomerPO).filter(
        models.CustomerPO.status == pending
    ).order_by(models.CustomerPO.id).all()
    suppliers = db.query(models.SupplierPO).filter(
        models.SupplierPO.status == pending
    ).order_by(models.SupplierPO.id).all()
    return {
        "success": True,
        "pending_customers": [schemas.CustomerPO.model_validate(r) for r in customers],
        "pending_suppliers": [schemas.SupplierPO.model_validate(r) for r in suppliers],
    }
