"""Parsing of request values that pydantic leaves as strings."""
import re
from datetime import date
from typing import Optional, Union

from finance_ledger.domain.errors import InvalidParameterError
from finance_ledger.domain.monetary import Money, USD, get_asset

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: Optional[str], param: str = "date") -> Optional[date]:
    """Parse a YYYY-MM-DD string. Empty input returns None.

    Raises:
        InvalidParameterError: For any other format or an impossible date.
    """
    if value is None or value.strip() == "":
        return None
    value = value.strip()
    if not DATE_PATTERN.match(value):
        raise InvalidParameterError(param, "must be in format YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidParameterError(param, "must be in format YYYY-MM-DD")


def parse_amount(value: Union[str, float, int, None], asset_code: Optional[str] = None) -> Money:
    """Parse a request amount.

    Without an explicit asset the amount is read as USD; the transaction
    service relabels it with the account's asset.
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise InvalidParameterError("amount", "must be a valid decimal number")
    asset = get_asset(asset_code) if asset_code else USD
    return Money.parse(value, asset)
