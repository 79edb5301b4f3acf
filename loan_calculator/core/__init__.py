from .amortization import (
	AmortizationResult,
	InvalidInputError,
	LoanInput,
	PaymentEntry,
	aggregate_yearly,
	amortize,
	compute_amortization,
	fixed_payment,
	schedule_frame,
)
from .presentation import LoanCalculation, calculate, chart_datasets
from .utils import money, percent, round_money

__all__ = [
	"AmortizationResult",
	"InvalidInputError",
	"LoanInput",
	"PaymentEntry",
	"aggregate_yearly",
	"amortize",
	"compute_amortization",
	"fixed_payment",
	"schedule_frame",
	"LoanCalculation",
	"calculate",
	"chart_datasets",
	"money",
	"percent",
	"round_money",
]
