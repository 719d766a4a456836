# app/api/routers/shipping_calc_routes.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.errors import BizError, InternalError, NotFoundError, ValidationError
from app.api.routers.shipping_calc_schemas import ShippingCalcDataOut, ShippingCalcIn, ShippingCalcOut
from app.db.deps import get_db
from app.metrics.shipping import record_calc
from app.services.shipping_calc import Dest, calc_shipping

log = logging.getLogger("hacom.shipping")


def _result_label(data: dict) -> str:
    if "rate_details" not in data:
        return "fallback"
    if data.get("is_free_shipping"):
        return "free"
    return "ok"


def register(router: APIRouter) -> None:
    @router.post(
        "/shipping/calculate",
        response_model=ShippingCalcOut,
        response_model_exclude_unset=True,
        status_code=status.HTTP_200_OK,
    )
    def calculate_shipping(
        payload: ShippingCalcIn,
        db: Session = Depends(get_db),
    ):
        if not payload.destination_province_id:
            record_calc("invalid")
            raise ValidationError("Destination province is required")

        dest = Dest(
            province_id=int(payload.destination_province_id),
            district_id=payload.destination_district_id,
        )

        try:
            data = calc_shipping(db, dest, order_amount=float(payload.order_amount or 0))
        except NotFoundError:
            record_calc("not_found")
            raise
        except BizError:
            record_calc("error")
            raise
        except Exception as e:
            log.exception("Shipping calculation error: %s", e)
            record_calc("error")
            raise InternalError("Failed to calculate shipping")

        record_calc(_result_label(data))
        return ShippingCalcOut(success=True, data=ShippingCalcDataOut(**data))
