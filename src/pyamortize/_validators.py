# -*- coding: utf-8 -*-
"""
This module contains validator functions for the LoanSchedule class.
"""
import math
import datetime as dt
from decimal import Decimal

from ._constants import LOAN_CONSTRAINTS
from ._enums import AdjustedScheduleMode
from ._errors import LoanValidationError, InvalidExtraPaymentError


def _is_number(value):
    """Return True for finite integers, floats and Decimals. NaN and infinity are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def validate_numeric(value, name):
    """Validate that a value is a finite integer, float or Decimal."""
    if not _is_number(value):
        raise LoanValidationError(f"Variable {name} can only be a finite integer, float or Decimal.", name)


def validate_asset_value(value, name):
    """Validate that the asset value lies within the allowed range."""
    validate_numeric(value, name)
    if value <= LOAN_CONSTRAINTS['MIN_ASSET_VALUE']:
        raise LoanValidationError(f"Asset value must be greater than {LOAN_CONSTRAINTS['MIN_ASSET_VALUE']:,}.", name)
    if value > LOAN_CONSTRAINTS['MAX_ASSET_VALUE']:
        raise LoanValidationError(f"Asset value cannot exceed {LOAN_CONSTRAINTS['MAX_ASSET_VALUE']:,}.", name)


def validate_percentage(value, name):
    """Validate that a value is a percentage between 0 and 100."""
    validate_numeric(value, name)
    if value < 0 or value > 100:
        raise LoanValidationError(f"Variable {name} must be between 0 and 100.", name)


def validate_interest_rate(value, name):
    """Validate that the annual interest rate in percent lies within the allowed range."""
    validate_numeric(value, name)
    if value < LOAN_CONSTRAINTS['MIN_INTEREST_RATE']:
        raise LoanValidationError("Interest rate cannot be negative.", name)
    if value > LOAN_CONSTRAINTS['MAX_INTEREST_RATE']:
        raise LoanValidationError(f"Interest rate cannot exceed {LOAN_CONSTRAINTS['MAX_INTEREST_RATE']}%.", name)


def validate_term_in_years(value, name):
    """Validate that the loan term is a whole number of years within the allowed range."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise LoanValidationError(f"Variable {name} can only be of type integer.", name)
    if value < LOAN_CONSTRAINTS['MIN_TERM_YEARS']:
        raise LoanValidationError(f"Loan term must be at least {LOAN_CONSTRAINTS['MIN_TERM_YEARS']} years.", name)
    if value > LOAN_CONSTRAINTS['MAX_TERM_YEARS']:
        raise LoanValidationError(f"Loan term cannot exceed {LOAN_CONSTRAINTS['MAX_TERM_YEARS']} years.", name)


def validate_optional_positive_numeric(value, name):
    """Validate that an optional value, when given, is a number greater than zero."""
    if value is None:
        return
    validate_numeric(value, name)
    if value <= 0:
        raise LoanValidationError(f"Variable {name} must be greater than zero.", name)


def validate_extra_payment(extra_amount, start_month, total_months):
    """Validate the amount and start month of an extra payment."""
    if not _is_number(extra_amount) or extra_amount <= 0:
        raise InvalidExtraPaymentError("Extra payment amount must be greater than zero.")
    if not isinstance(start_month, int) or isinstance(start_month, bool) or not 1 <= start_month <= total_months:
        raise InvalidExtraPaymentError(f"Start month must be an integer between 1 and {total_months}.")


def validate_adjusted_schedule_mode(value, name):
    """Validate that a value names an adjusted schedule mode."""
    if isinstance(value, AdjustedScheduleMode):
        return
    if not isinstance(value, str):
        raise TypeError(f"Attribute {name} must be of type string")
    try:
        AdjustedScheduleMode(value)
    except ValueError:
        valid_modes = [item.value for item in AdjustedScheduleMode]
        raise ValueError(f"Attribute {name} must be set to one of the following: {', '.join(valid_modes)}.")


def parse_date(value, name):
    """Return a date from a date, datetime or YYYY-MM-DD string."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Variable {name} must be of type date or a string with format YYYY-MM-DD")
    try:
        return dt.datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise ValueError(f"Variable {name} must be a valid date in YYYY-MM-DD format.")
