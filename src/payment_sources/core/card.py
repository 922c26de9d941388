"""
Card details accepted by :func:`payment_sources.core.factories.card_params`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional, Union

from .params import Address

__all__ = ["CardParams"]


@dataclass(frozen=True)
class CardParams:
    number: str
    exp_month: Union[int, str]
    exp_year: Union[int, str]
    cvc: Optional[str] = None
    name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_country: Optional[str] = None
    currency: Optional[str] = None

    def card_fields(self) -> Dict[str, Union[int, str]]:
        """
        Every set field, keyed by its own name, for the ``card`` group.
        """
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) not in (None, "")
        }

    def billing_address(self) -> Optional[Address]:
        address = Address(
            line1=self.address_line1,
            line2=self.address_line2,
            city=self.address_city,
            state=self.address_state,
            postal_code=self.address_zip,
            country=self.address_country,
        )
        return address if address.as_dict() else None
