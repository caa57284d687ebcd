# -*- coding: utf-8 -*-
"""
This module contains the exceptions raised by the LoanSchedule class.
"""


class LoanError(Exception):
    """Base class for all loan errors."""


class LoanValidationError(LoanError, ValueError):
    """Raised when a loan parameter fails validation.

    :param message: Human readable description of the failure.
    :param field: Name of the offending loan parameter.
    """

    def __init__(self, message, field):
        super().__init__(message)
        self.field = field


class InvalidExtraPaymentError(LoanError, ValueError):
    """Raised when an extra payment has a bad amount or start month."""


class NoExtraPaymentsError(LoanError):
    """Raised in strict mode when an adjusted schedule is requested without extra payments."""
