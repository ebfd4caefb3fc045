"""yearfrac.core: public API for day count conventions."""

from yearfrac.core.calendar import (
    days_between as days_between,
)
from yearfrac.core.calendar import (
    days_in_year as days_in_year,
)
from yearfrac.core.calendar import (
    is_end_of_month as is_end_of_month,
)
from yearfrac.core.calendar import (
    is_last_day_of_february as is_last_day_of_february,
)
from yearfrac.core.calendar import (
    is_leap_year as is_leap_year,
)
from yearfrac.core.daycount import (
    DayCountConvention as DayCountConvention,
)
from yearfrac.core.daycount import (
    yearfrac as yearfrac,
)
from yearfrac.core.errors import (
    InvalidValueError as InvalidValueError,
)
from yearfrac.core.errors import (
    YearfracError as YearfracError,
)
from yearfrac.core.result import (
    Err as Err,
)
from yearfrac.core.result import (
    Ok as Ok,
)
from yearfrac.core.result import (
    Result as Result,
)
from yearfrac.core.result import (
    unwrap as unwrap,
)
from yearfrac.core.serialization import (
    canonical_bytes as canonical_bytes,
)
from yearfrac.core.serialization import (
    load_convention as load_convention,
)
