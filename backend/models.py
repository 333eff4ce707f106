from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Text
from datetime import datetime
from .database import Base
import enum


class POStatus(str, enum.Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# DECISION: status is stored as VARCHAR, not Enum(POStatus), so the office can
# introduce new statuses without a migration. POStatus lists the known values.


class PurchaseOrder(Base):
    """Legacy flat PO record with no pricing, served by the /po endpoints."""
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    po_number = Column(String, index=True)
    customer_name = Column(String)
    material = Column(String)
    quantity = Column(Float)
    pending_qty = Column(Float)
    date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class PricedOrderColumns:
    """Columns shared by customer and supplier POs.

    The five derived columns (weight_per_pc .. total_price) are always written
    by po_calculator.calculate_po, never taken from the request body.
    """

    id = Column(Integer, primary_key=True, index=True)
    po_number = Column(String, index=True)
    date = Column(Date, nullable=True)

    # Tube size, e.g. "373ODx4.5mm" (round) or "400x400x12mm" (square/rect)
    size = Column(String, nullable=False)
    material = Column(String, nullable=True)

    quantity = Column(Float, default=0.0)  # pieces
    rate = Column(Float, default=0.0)      # per piece
    status = Column(String, default=POStatus.PENDING.value, index=True)
    remarks = Column(Text, nullable=True)

    # Derived
    weight_per_pc = Column(Float, default=0.0)
    total_weight = Column(Float, default=0.0)
    price = Column(Float, default=0.0)
    gst_18 = Column(Float, default=0.0)
    total_price = Column(Float, default=0.0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class CustomerPO(PricedOrderColumns, Base):
    """Sales side: orders received from customers."""
    __tablename__ = "customer_pos"

    customer_name = Column(String, nullable=True)


class SupplierPO(PricedOrderColumns, Base):
    """Procurement side: orders placed with suppliers."""
    __tablename__ = "supplier_pos"

    supplier_name = Column(String, nullable=True)
