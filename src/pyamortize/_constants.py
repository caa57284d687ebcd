# -*- coding: utf-8 -*-
"""
This module contains the limits and rounding quanta used by the LoanSchedule class.
"""
from decimal import Decimal
from types import MappingProxyType

LOAN_CONSTRAINTS = MappingProxyType({
    'MAX_TERM_YEARS': 30,
    'MIN_TERM_YEARS': 5,
    'MAX_INTEREST_RATE': 30,
    'MIN_INTEREST_RATE': 0,
    'MAX_ASSET_VALUE': 1000000000,
    'MIN_ASSET_VALUE': 1000,
})

MONTHS_PER_YEAR = 12

CENTS = Decimal('0.01')
LTV_QUANTUM = Decimal('0.0001')

# balances at or below one cent count as paid off
PAYOFF_TOLERANCE = Decimal('0.01')
