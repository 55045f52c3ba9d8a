# daycount

Day count conventions for working out day counts and year fractions between
two dates, as used in interest accrual.

Three conventions are provided. They all subclass the abstract base
`DayCountConvention` in `daycount.convention`:

| Class            | Module               | Days counted                           | Year basis |
|------------------|----------------------|----------------------------------------|------------|
| `Actual360`      | `daycount.actual`    | actual calendar days                   | 360        |
| `Actual365Fixed` | `daycount.actual`    | actual calendar days                   | 365        |
| `Thirty360`      | `daycount.thirty360` | 30/360 Bond Basis (ISDA 2006, 4.16(f)) | 360        |

Each has two methods:

- `days_between(start, end)` returns the day count as an `int`.
- `year_fraction(start, end)` returns that count divided by the year basis,
  as a `float`.

## Installation

```
pip install .
```

## Usage

Dates are `datetime.date` objects.

```python
from datetime import date

from daycount.actual import Actual360, Actual365Fixed
from daycount.thirty360 import Thirty360

start, end = date(2023, 1, 1), date(2023, 1, 31)

Actual360().days_between(start, end)        # 30
Actual360().year_fraction(start, end)       # 30 / 360
Actual365Fixed().year_fraction(start, end)  # 30 / 365

bond = Thirty360()
bond.days_between(date(2024, 7, 31), date(2024, 8, 31))   # 30
bond.year_fraction(date(2024, 2, 28), date(2024, 3, 31))  # 33 / 360
```

### 30/360 Bond Basis

The day count is

    360 * (Y2 - Y1) + 30 * (M2 - M1) + (D2 - D1)

where D1 is changed from 31 to 30, and D2 is changed from 31 to 30 only if
D1 (after that change) is greater than 29. No adjustment is made for the end
of February. The year fraction is that count divided by 360.

### Writing code against any convention

```python
from daycount.convention import DayCountConvention

def accrued(convention: DayCountConvention, notional, rate, start, end):
    return notional * rate * convention.year_fraction(start, end)
```

`DayCountConvention` is abstract; it cannot be instantiated itself.

If the end date comes before the start date, the day count and year fraction
come out negative. No check is made on the order of the dates.

## What it does not do

This is a library only: there is no command-line tool. It does not adjust
dates for business days or holidays, and provides no conventions beyond the
three above.

## Running the tests

```
pip install .[test]
pytest
```