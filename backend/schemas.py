from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, List
from datetime import date as date_type, datetime


# --- Legacy /po ---

class PurchaseOrderBase(BaseModel):
    po_number: Optional[str] = None
    customer_name: Optional[str] = None
    material: Optional[str] = None
    quantity: Optional[float] = None
    pending_qty: Optional[float] = None
    date: Optional[date_type] = None

class PurchaseOrderCreate(PurchaseOrderBase):
    pass

class PurchaseOrder(PurchaseOrderBase):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Customer / supplier POs ---

class PricedPOBase(BaseModel):
    po_number: Optional[str] = None
    date: Optional[date_type] = None
    # size is validated by po_calculator (400), not pydantic (422)
    size: Optional[str] = None
    material: Optional[str] = None
    # Any scalar, non-numeric values are coerced to 0 by the calculator
    quantity: Any = None
    rate: Any = None
    status: Optional[str] = None
    remarks: Optional[str] = None

class CustomerPOCreate(PricedPOBase):
    customer_name: Optional[str] = None

class SupplierPOCreate(PricedPOBase):
    supplier_name: Optional[str] = None

class POUpdate(PricedPOBase):
    """Partial update. Only fields present in the request body are applied."""
    customer_name: Optional[str] = None
    supplier_name: Optional[str] = None


class PricedPO(BaseModel):
    id: int
    po_number: Optional[str] = None
    date: Optional[date_type] = None
    size: str
    material: Optional[str] = None
    quantity: float = 0.0
    rate: float = 0.0
    status: Optional[str] = None
    remarks: Optional[str] = None
    weight_per_pc: float = 0.0
    total_weight: float = 0.0
    price: float = 0.0
    gst_18: float = 0.0
    total_price: float = 0.0
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)

class CustomerPO(PricedPO):
    customer_name: Optional[str] = None

class SupplierPO(PricedPO):
    supplier_name: Optional[str] = None


class CustomerPOResponse(BaseModel):
    success: bool = True
    message: str
    data: List[CustomerPO] = []

class SupplierPOResponse(BaseModel):
    success: bool = True
    message: str
    data: List[SupplierPO] = []

class MessageResponse(BaseModel):
    success: bool = True
    message: str


# --- Reports ---

class TopMaterial(BaseModel):
    size: str
    total_weight: float

class MonthlySales(BaseModel):
    month: str
    total: float

class TopMaterialsReport(BaseModel):
    success: bool = True
    top_materials: List[TopMaterial]

class MonthlySalesReport(BaseModel):
    success: bool = True
    monthly_sales: List[MonthlySales]

class PendingPOsReport(BaseModel):
    success: bool = True
    pending_customers: List[CustomerPO]
    pending_suppliers: List[SupplierPO]
