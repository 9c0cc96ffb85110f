"""Calendar constants shared by every Metrum conversion."""

SUBTICKS_PER_TICK = 1_000_000
TICKS_PER_MINUTE = 100
MINUTES_PER_DAY = 1000

TICKS_PER_DAY = MINUTES_PER_DAY * TICKS_PER_MINUTE  # 100_000

DAYS_PER_COMMON_YEAR = 365
DAYS_PER_LEAP_YEAR = 366

# 100_000 ticks * 864 ms = 86_400_000 ms = 24 h
MILLIS_PER_TICK = 864
MICROS_PER_TICK = 864_000

EPOCH_YEAR = 2000

# 400-year Gregorian cycle
YEARS_PER_CYCLE = 400
DAYS_PER_CYCLE = 146_097
TICKS_PER_CYCLE = DAYS_PER_CYCLE * TICKS_PER_DAY
