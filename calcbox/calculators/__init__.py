"""Pure formula modules behind each calculator screen.

The ``calculators`` package contains small, focused modules that each
implement one family of closed-form formulas:

* ``body`` – body mass index and the healthy weight range for a height.
* ``energy`` – BMR/TDEE (Mifflin-St Jeor, Harris-Benedict, Katch-McArdle),
  exercise calorie burn and drink calories.
* ``strength`` – one-rep max estimates (Epley, Brzycki, Lander, O'Conner).
* ``pregnancy`` – due date, conception estimate, gestational week and trimester.
* ``sleep`` – accumulated sleep debt and recovery planning.
* ``loans`` – annuity payments, amortization ledgers and mortgage payments.
* ``debts`` – snowball and avalanche debt payoff simulation.
* ``growth`` – compound interest, inflation adjustments and investment returns.
* ``retirement`` – how long savings last under a withdrawal strategy.
* ``paycheck`` – take-home pay after withholding and deductions.
* ``grades`` – weighted GPA on 4.0 and 5.0 scales.
* ``everyday`` – tip splitting, sales tax and percentage questions.
* ``travel`` – fuel economy, commute cost, EV charging cost and trip time.
* ``units`` – unit conversion across six categories.

Each function takes plain numbers (absent inputs already resolved to zero)
and returns a float or a small dict.  Guard conditions such as a zero height
or zero rate return safe defaults instead of raising.
"""

from . import (  # noqa: F401
    body,
    debts,
    energy,
    everyday,
    grades,
    growth,
    loans,
    paycheck,
    pregnancy,
    retirement,
    sleep,
    strength,
    travel,
    units,
)

__all__ = [
    "body",
    "debts",
    "energy",
    "everyday",
    "grades",
    "growth",
    "loans",
    "paycheck",
    "pregnancy",
    "retirement",
    "sleep",
    "strength",
    "travel",
    "units",
]
