"""Fixed record schema and category tables for the bank marketing dataset.

The order of every category tuple defines the position of its one-hot bit
in the feature vector. Reordering or extending a tuple changes the feature
layout and invalidates weights trained on the previous layout.
"""

JOBS = (
    "admin.",
    "unknown",
    "unemployed",
    "management",
    "housemaid",
    "entrepreneur",
    "student",
    "blue-collar",
    "self-employed",
    "retired",
    "technician",
    "services",
)
MARITALS = ("married", "divorced", "single")
EDUCATIONS = ("unknown", "secondary", "primary", "tertiary")
CONTACTS = ("unknown", "telephone", "cellular")
MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
POUTCOMES = ("unknown", "other", "failure", "success")

# Raw column positions (field 11, call duration, is not used)
AGE = 0
JOB = 1
MARITAL = 2
EDUCATION = 3
DEFAULT = 4
BALANCE = 5
HOUSING = 6
LOAN = 7
CONTACT = 8
DAY = 9
MONTH = 10
CAMPAIGN = 12
PDAYS = 13
PREVIOUS = 14
POUTCOME = 15
TARGET = 16

RECORD_WIDTH = 17

NUMERIC_FIELDS = (
    ("age", AGE),
    ("balance", BALANCE),
    ("day", DAY),
    ("campaign", CAMPAIGN),
    ("pdays", PDAYS),
    ("previous", PREVIOUS),
)
BOOLEAN_FIELDS = (
    ("default", DEFAULT),
    ("housing", HOUSING),
    ("loan", LOAN),
)
# (name, raw position, categories, lower-case before lookup)
CATEGORICAL_FIELDS = (
    ("job", JOB, JOBS, False),
    ("marital", MARITAL, MARITALS, False),
    ("education", EDUCATION, EDUCATIONS, False),
    ("contact", CONTACT, CONTACTS, False),
    ("month", MONTH, MONTHS, True),
    ("poutcome", POUTCOME, POUTCOMES, False),
)

POSITIVE_VALUE = "yes"


def feature_names() -> tuple:
    """Column names of the feature vector, in layout order."""
    names = [name for name, _ in NUMERIC_FIELDS]
    names += [name for name, _ in BOOLEAN_FIELDS]
    for name, _, categories, _ in CATEGORICAL_FIELDS:
        names += [f"{name}={value}" for value in categories]
    return tuple(names)


FEATURE_NAMES = feature_names()
N_FEATURES = len(FEATURE_NAMES)
