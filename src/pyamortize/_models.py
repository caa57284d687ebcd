# -*- coding: utf-8 -*-
"""
This module contains dataclasses for the LoanSchedule class.
"""
import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class LoanParameters:
    asset_value: Number
    percentage_put_down: Number
    interest_rate: Number
    term_in_years: int
    minimum_payment: Optional[Number] = None


@dataclass(frozen=True)
class ExtraPayment:
    extra_amount: Decimal
    start_month: int


@dataclass(frozen=True)
class Statement:
    month: int
    starting_balance: Decimal
    payment: Decimal
    amount_toward_interest: Decimal
    amount_toward_principal: Decimal
    ending_balance: Decimal
    loan_to_value: Decimal
    loan_to_value_percentage: Decimal
    equity_value: Decimal
    equity_percentage: Decimal


@dataclass(frozen=True)
class LifecyclePosition:
    current_month: int
    months_elapsed: int
    months_remaining: int
    years_remaining: float
    percentage_complete: float
    percentage_remaining: float
    statement: Optional[Statement]
    current_balance: Decimal
    payoff_date: dt.date


@dataclass(frozen=True)
class LoanSummary:
    loan_amount: Decimal
    total_payment_amount: Decimal
    total_interest_amount: Decimal
    total_principal_amount: Decimal
    months_to_payoff: int


@dataclass(frozen=True)
class LoanSavings:
    interest_saved: Decimal
    months_saved: int
    standard_summary: LoanSummary
    adjusted_summary: LoanSummary
