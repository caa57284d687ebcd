# -*- coding: utf-8 -*-
import logging
from decimal import Decimal, ROUND_HALF_UP
from dateutil.relativedelta import relativedelta
from ._validators import (
    validate_asset_value,
    validate_percentage,
    validate_interest_rate,
    validate_term_in_years,
    validate_optional_positive_numeric,
    validate_extra_payment,
    validate_adjusted_schedule_mode,
    parse_date
)
from ._constants import CENTS, LTV_QUANTUM, PAYOFF_TOLERANCE, MONTHS_PER_YEAR
from ._enums import AdjustedScheduleMode
from ._errors import NoExtraPaymentsError
from ._models import (
    LoanParameters,
    ExtraPayment,
    Statement,
    LifecyclePosition,
    LoanSummary,
    LoanSavings
)

logger = logging.getLogger(__name__)


class LoanSchedule(object):
    """
    The LoanSchedule class is the main class of the pyamortize package. It derives the loan amount
    and standard monthly payment of a fixed rate loan and generates month-by-month amortization
    schedules, with or without extra principal payments.

    Instances are immutable: add_extra_payment returns a new LoanSchedule and leaves the receiver
    and every schedule generated from it untouched.

    :param asset_value: The value of the financed asset.
    :param percentage_put_down: The down payment as a percentage of the asset value.
    :param interest_rate: The annual interest rate in percent.
    :param term_in_years: The loan term in years.
    :param minimum_payment: The monthly payment. If not provided, it will be calculated automatically.
    :param extra_payments: Extra payments carried over from another LoanSchedule.
    """

    def __init__(self,asset_value,percentage_put_down,interest_rate,term_in_years,minimum_payment=None,extra_payments=()):

        validate_asset_value(asset_value, "asset_value")
        self.asset_value = Decimal(str(asset_value))

        validate_percentage(percentage_put_down, "percentage_put_down")
        self.percentage_put_down = Decimal(str(percentage_put_down))

        validate_interest_rate(interest_rate, "interest_rate")
        self.interest_rate = Decimal(str(interest_rate))

        validate_term_in_years(term_in_years, "term_in_years")
        self.term_in_years = term_in_years
        self.total_months = term_in_years * MONTHS_PER_YEAR

        validate_optional_positive_numeric(minimum_payment, "minimum_payment")
        self.minimum_payment = None if minimum_payment is None else Decimal(str(minimum_payment))

        # define non-input variables
        self.down_payment = self._quantize(self.asset_value * self.percentage_put_down / 100)
        self.loan_amount = self._quantize(self.asset_value - self.down_payment)
        self.monthly_interest_rate = self.interest_rate / 100 / MONTHS_PER_YEAR

        if self.minimum_payment is not None:
            self.monthly_payment = self.minimum_payment
        else:
            self.monthly_payment = self._calculate_standard_monthly_payment()

        self._extra_payments = self._sort_extra_payments(extra_payments)

        logger.debug(
            "Loan of %s over %s months at %s%%, monthly payment %s, %s extra payment(s)",
            self.loan_amount, self.total_months, self.interest_rate, self.monthly_payment, len(self._extra_payments)
        )

    @classmethod
    def from_parameters(cls, parameters):
        """
        Creates a LoanSchedule from a LoanParameters object.

        :param parameters: A LoanParameters object.
        :return: A LoanSchedule object.
        """
        return cls(
            asset_value=parameters.asset_value,
            percentage_put_down=parameters.percentage_put_down,
            interest_rate=parameters.interest_rate,
            term_in_years=parameters.term_in_years,
            minimum_payment=parameters.minimum_payment
        )

    @property
    def parameters(self):
        return LoanParameters(
            asset_value=self.asset_value,
            percentage_put_down=self.percentage_put_down,
            interest_rate=self.interest_rate,
            term_in_years=self.term_in_years,
            minimum_payment=self.minimum_payment
        )

    @property
    def extra_payments(self):
        return self._extra_payments

    @staticmethod
    def _quantize(amount, quantum=CENTS):
        return Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)

    def _sort_extra_payments(self, extra_payments):
        """Validates extra payments and returns them as a tuple sorted by start month."""
        validated = []
        for extra_payment in extra_payments:
            validate_extra_payment(extra_payment.extra_amount, extra_payment.start_month, self.total_months)
            validated.append(ExtraPayment(
                extra_amount=Decimal(str(extra_payment.extra_amount)),
                start_month=extra_payment.start_month
            ))
        # sorted() is stable, so equal start months keep their insertion order
        return tuple(sorted(validated, key=lambda p: p.start_month))

    def _calculate_standard_monthly_payment(self):
        """
        Calculates the standard monthly payment with the annuity formula

            P = L * r * (1 + r)^n / ((1 + r)^n - 1)

        where L is the loan amount, r the monthly interest rate and n the number of payments.
        The result is rounded to cents. Without interest the payment is simply L / n, left
        unrounded.
        """
        if self.monthly_interest_rate == 0:
            return self.loan_amount / self.total_months

        factor = (1 + self.monthly_interest_rate) ** self.total_months
        return self._quantize(self.loan_amount * (self.monthly_interest_rate * factor) / (factor - 1))

    def _calculate_extra_payment_for_month(self, month):
        """Sums every extra payment that has started on or before the given month."""
        return sum((p.extra_amount for p in self._extra_payments if p.start_month <= month), Decimal('0'))

    def _calculate_equity_metrics(self, ending_balance):
        loan_to_value = self._quantize(ending_balance / self.asset_value, LTV_QUANTUM)
        loan_to_value_percentage = self._quantize(loan_to_value * 100)
        equity_value = self.asset_value - ending_balance
        equity_percentage = self._quantize(equity_value / self.asset_value * 100)
        return loan_to_value, loan_to_value_percentage, equity_value, equity_percentage

    def _generate(self, include_extra_payments):
        """
        Iterates month by month over the loan term and reduces the balance until it is paid off.

        The payment of the last scheduled month, and of any month in which it would exceed the
        outstanding balance plus interest, is clamped to exactly that amount, so the final
        ending balance is zero.

        :param include_extra_payments: Whether extra payments are added to the monthly payment.
        :return: A list of Statement objects.
        """
        schedule = []
        balance = self.loan_amount
        month = 1

        while month <= self.total_months and balance > 0:
            starting_balance = balance
            interest_amount = starting_balance * self.monthly_interest_rate

            payment_amount = self.monthly_payment
            if include_extra_payments:
                payment_amount += self._calculate_extra_payment_for_month(month)

            if month == self.total_months or starting_balance + interest_amount <= payment_amount:
                payment_amount = starting_balance + interest_amount

            principal_amount = payment_amount - interest_amount
            ending_balance = starting_balance - principal_amount

            loan_to_value, loan_to_value_percentage, equity_value, equity_percentage = \
                self._calculate_equity_metrics(ending_balance)

            statement = Statement(
                month=month,
                starting_balance=self._quantize(starting_balance),
                payment=self._quantize(payment_amount),
                amount_toward_interest=self._quantize(interest_amount),
                amount_toward_principal=self._quantize(principal_amount),
                ending_balance=self._quantize(ending_balance),
                loan_to_value=loan_to_value,
                loan_to_value_percentage=loan_to_value_percentage,
                equity_value=self._quantize(equity_value),
                equity_percentage=equity_percentage
            )
            schedule.append(statement)

            balance = ending_balance
            if balance <= PAYOFF_TOLERANCE:
                break
            month += 1

        logger.debug("Generated %s month schedule (extra payments included: %s)", len(schedule), include_extra_payments)
        return schedule

    def generate_schedule(self):
        """
        Generates the standard amortization schedule without extra payments.

        :return: A list of Statement objects, one per month.
        """
        return self._generate(False)

    def generate_adjusted_schedule(self, mode=AdjustedScheduleMode.LENIENT.value):
        """
        Generates the amortization schedule with all extra payments applied. Without extra payments
        the result equals the standard schedule, unless mode is 'strict'.

        :param mode: 'lenient' (default) or 'strict'.
        :return: A list of Statement objects, one per month.
        :raises NoExtraPaymentsError: in strict mode when no extra payment has been added.
        """
        validate_adjusted_schedule_mode(mode, "MODE")

        if not self._extra_payments:
            if AdjustedScheduleMode(mode) == AdjustedScheduleMode.STRICT:
                raise NoExtraPaymentsError("No extra payments have been added to this loan.")
            return self._generate(False)

        return self._generate(True)

    def add_extra_payment(self, extra_amount, start_month):
        """
        Adds an extra payment which is paid every month from start_month until payoff.

        :param extra_amount: The additional amount paid toward principal each month.
        :param start_month: The first month (1-based) in which the extra amount is paid.
        :return: A new LoanSchedule object with the extra payment added.
        :raises InvalidExtraPaymentError: if the amount or start month is invalid.
        """
        validate_extra_payment(extra_amount, start_month, self.total_months)
        extra_payment = ExtraPayment(extra_amount=Decimal(str(extra_amount)), start_month=start_month)

        return LoanSchedule(
            asset_value=self.asset_value,
            percentage_put_down=self.percentage_put_down,
            interest_rate=self.interest_rate,
            term_in_years=self.term_in_years,
            minimum_payment=self.monthly_payment,
            extra_payments=self._extra_payments + (extra_payment,)
        )

    def add_extra_payments(self, extra_payments):
        """
        Adds several extra payments at once.

        :param extra_payments: An iterable of ExtraPayment objects.
        :return: A new LoanSchedule object with all extra payments added.
        """
        loan = self
        for extra_payment in extra_payments:
            loan = loan.add_extra_payment(extra_payment.extra_amount, extra_payment.start_month)
        return loan

    def get_payoff_date(self, loan_start_date):
        """
        Calculates the payoff date of the adjusted schedule.

        :param loan_start_date: The start date of the loan (date or YYYY-MM-DD string).
        :return: A date object.
        """
        start_date = parse_date(loan_start_date, "LOAN_START_DATE")
        return start_date + relativedelta(months=len(self.generate_adjusted_schedule()))

    @staticmethod
    def _calculate_months_between(start_date, end_date):
        # whole months only, the day of month is ignored
        return (end_date.year - start_date.year) * MONTHS_PER_YEAR + (end_date.month - start_date.month)

    def find_position_by_date(self, loan_start_date, current_date):
        """
        Finds the position of current_date in the lifecycle of the adjusted schedule.

        :param loan_start_date: The start date of the loan (date or YYYY-MM-DD string).
        :param current_date: The date to locate (date or YYYY-MM-DD string).
        :return: A LifecyclePosition object.
        """
        start_date = parse_date(loan_start_date, "LOAN_START_DATE")
        end_date = parse_date(current_date, "CURRENT_DATE")

        schedule = self.generate_adjusted_schedule()
        months_elapsed = self._calculate_months_between(start_date, end_date)
        payoff_date = start_date + relativedelta(months=len(schedule))

        if not schedule:
            return LifecyclePosition(
                current_month=0,
                months_elapsed=months_elapsed,
                months_remaining=0,
                years_remaining=0.0,
                percentage_complete=100.0,
                percentage_remaining=0.0,
                statement=None,
                current_balance=self.loan_amount,
                payoff_date=payoff_date
            )

        index = min(max(months_elapsed, 0), len(schedule) - 1)
        statement = schedule[index]
        months_remaining = len(schedule) - index
        percentage_complete = index / len(schedule) * 100

        return LifecyclePosition(
            current_month=index + 1,
            months_elapsed=months_elapsed,
            months_remaining=months_remaining,
            years_remaining=months_remaining / MONTHS_PER_YEAR,
            percentage_complete=percentage_complete,
            percentage_remaining=100 - percentage_complete,
            statement=statement,
            current_balance=statement.ending_balance,
            payoff_date=payoff_date
        )

    def get_loan_summary(self, schedule=None):
        """
        Calculates the loan summary.

        :param schedule: A list of Statement objects. Defaults to the adjusted schedule.
        :return: A LoanSummary object.
        """
        if schedule is None:
            schedule = self.generate_adjusted_schedule()

        total_payment_amount = Decimal('0')
        total_interest_amount = Decimal('0')
        total_principal_amount = Decimal('0')

        for statement in schedule:
            total_payment_amount += statement.payment
            total_interest_amount += statement.amount_toward_interest
            total_principal_amount += statement.amount_toward_principal

        return LoanSummary(
            loan_amount=self.loan_amount,
            total_payment_amount=total_payment_amount,
            total_interest_amount=total_interest_amount,
            total_principal_amount=total_principal_amount,
            months_to_payoff=len(schedule)
        )

    def get_savings(self):
        """
        Compares the adjusted schedule with the standard schedule.

        :return: A LoanSavings object.
        """
        standard_summary = self.get_loan_summary(self.generate_schedule())
        adjusted_summary = self.get_loan_summary(self.generate_adjusted_schedule())

        return LoanSavings(
            interest_saved=standard_summary.total_interest_amount - adjusted_summary.total_interest_amount,
            months_saved=standard_summary.months_to_payoff - adjusted_summary.months_to_payoff,
            standard_summary=standard_summary,
            adjusted_summary=adjusted_summary
        )
