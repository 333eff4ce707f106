"""
Persistence helpers shared by the customer and supplier PO routers.

Every write goes through price_order() so the derived columns always match
size/quantity/rate.
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from .po_calculator import calculate_po, coerce_number

logger = logging.getLogger(__name__)

# Columns that are never taken from a request body
_SERVER_COLUMNS = {"id", "created_at", "updated_at"}


def price_order(payload: dict, model) -> dict:
    """Price a PO payload and keep only the columns `model` owns.

    quantity/rate are stored as the coerced numbers used for pricing.
    """
    priced = calculate_po(payload)
    priced["quantity"] = coerce_number(priced.get("quantity"))
    priced["rate"] = coerce_number(priced.get("rate"))
    if priced.get("status") is None:
        priced.pop("status", None)  # let the column default apply

    columns = set(model.__table__.columns.keys()) - _SERVER_COLUMNS
    dropped = set(priced) - columns
    if dropped:
        logger.debug("Ignoring fields not stored on %s: %s", model.__tablename__, sorted(dropped))
    return {k: v for k, v in priced.items() if k in columns}


def create_po(db: Session, model, payload: dict):
    row = model(**price_order(payload, model))
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "Created %s #%s (size=%s, total_price=%s)",
        model.__tablename__, row.id, row.size, row.total_price,
    )
    return row


def get_po_or_404(db: Session, model, po_id: int):
    row = db.query(model).filter(model.id == po_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="PO not found")
    return row


def update_po(db: Session, row, changes: dict):
    """Apply a partial update and recompute the derived fields."""
    model = type(row)
    columns = set(model.__table__.columns.keys()) - _SERVER_COLUMNS
    current = {name: getattr(row, name) for name in columns}
    current.update({k: v for k, v in changes.items() if k in columns})

    for field, value in price_order(current, model).items():
        setattr(row, field, value)
    db.commit()
    db.refresh(row)
    logger.info("Updated %s #%s", model.__tablename__, row.id)
    return row


def delete_po(db: Session, row):
    model, po_id = type(row), row.id
    db.delete(row)
    db.commit()
    logger.info("Deleted %s #%s", model.__tablename__, po_id)
