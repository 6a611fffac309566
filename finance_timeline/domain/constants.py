"""Domain constants for timeline and budget computations."""

GRANULARITY_WEEK = "week"
GRANULARITY_MONTH = "month"
GRANULARITY_YEAR = "year"
GRANULARITIES = (GRANULARITY_WEEK, GRANULARITY_MONTH, GRANULARITY_YEAR)

KIND_INCOME = "income"
KIND_EXPENSE = "expense"
TRANSACTION_KINDS = (KIND_INCOME, KIND_EXPENSE)

FREQUENCY_WEEKLY = "weekly"
FREQUENCY_FORTNIGHTLY = "fortnightly"
FREQUENCY_MONTHLY = "monthly"
FREQUENCY_YEARLY = "yearly"
FREQUENCY_ONCE = "once"
FREQUENCIES = (
    FREQUENCY_WEEKLY,
    FREQUENCY_FORTNIGHTLY,
    FREQUENCY_MONTHLY,
    FREQUENCY_YEARLY,
    FREQUENCY_ONCE,
)

SOURCE_MANUAL = "manual"
SOURCE_IMPORTED = "imported"
SOURCE_RECURRING = "recurring-generated"
TRANSACTION_SOURCES = (SOURCE_MANUAL, SOURCE_IMPORTED, SOURCE_RECURRING)

ASSET_TYPE_OTHER = "other"
ASSET_TYPES = ("savings", "investment", "property", ASSET_TYPE_OTHER)

MAX_SCENARIO_MONTHS = 120

DEFAULT_EXPENSE_CATEGORIES = (
    ("Groceries", 1),
    ("Shopping", 2),
    ("Entertainment", 3),
    ("Clothing and Footwear", 4),
    ("Insurance and Financial services", 5),
    ("Transport", 6),
    ("Food and Drink", 7),
    ("Rates and Utilities", 8),
    ("Investment costs", 9),
    ("Holiday", 10),
)

DEFAULT_INCOME_CATEGORIES = (
    ("Salary", 1),
    ("Rent", 2),
)


__all__ = [
    "GRANULARITY_WEEK",
    "GRANULARITY_MONTH",
    "GRANULARITY_YEAR",
    "GRANULARITIES",
    "KIND_INCOME",
    "KIND_EXPENSE",
    "TRANSACTION_KINDS",
    "FREQUENCY_WEEKLY",
    "FREQUENCY_FORTNIGHTLY",
    "FREQUENCY_MONTHLY",
    "FREQUENCY_YEARLY",
    "FREQUENCY_ONCE",
    "FREQUENCIES",
    "SOURCE_MANUAL",
    "SOURCE_IMPORTED",
    "SOURCE_RECURRING",
    "TRANSACTION_SOURCES",
    "ASSET_TYPE_OTHER",
    "ASSET_TYPES",
    "MAX_SCENARIO_MONTHS",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
]
