"""
Configuration constants for the employee dataset pipeline.
"""

from typing import List, Tuple

# ======================================================
#  SYNTHETIC DATA POOLS
# ======================================================
# "Lisa" appears twice; the doubled weight is part of the historical
# distribution and must not be deduplicated.
FIRST_NAMES: List[str] = [
    "John", "Sarah", "Michael", "Emily", "David", "Lisa", "Robert", "Jennifer",
    "Christopher", "Amanda", "James", "Jessica", "William", "Ashley", "Daniel",
    "Stephanie", "Matthew", "Nicole", "Anthony", "Elizabeth", "Joshua", "Helen",
    "Andrew", "Deborah", "Ryan", "Lisa", "Jacob", "Nancy", "Gary", "Karen",
]

LAST_NAMES: List[str] = [
    "Smith", "Johnson", "Brown", "Davis", "Wilson", "Anderson", "Taylor", "Martinez",
    "Garcia", "Rodriguez", "Miller", "Moore", "Jackson", "Martin", "Lee", "Thompson",
    "White", "Harris", "Clark", "Lewis", "Robinson", "Walker", "Young", "Allen",
    "King", "Wright", "Scott", "Torres", "Nguyen", "Hill",
]

DEPARTMENTS: List[str] = [
    "Engineering", "Marketing", "HR", "Finance", "Sales", "Operations", "IT", "Legal",
]

# Age is AGE_BASE + randint(0, AGE_SPAN) -> 22..79 inclusive
AGE_BASE: int = 22
AGE_SPAN: int = 58

# Salary is SALARY_BASE + uniform[0, 1) * SALARY_SPAN -> [30k, 150k)
SALARY_BASE: float = 30000.0
SALARY_SPAN: float = 120000.0

# Large enough to produce a multi-megabyte dataset file
DEFAULT_COUNT: int = 45000

# ======================================================
#  VALIDITY RULES
# ======================================================
AGE_MIN_EXCLUSIVE: int = 0
AGE_MAX: int = 120
SALARY_MIN: float = 0.0

# ======================================================
#  AGGREGATION DEFAULTS
# ======================================================
DEFAULT_AGE_THRESHOLD: int = 30
DEFAULT_TOP_DEPARTMENT: str = "Engineering"

# ======================================================
#  INTERCHANGE / PERSISTENCE
# ======================================================
FIELD_ORDER: Tuple[str, ...] = ("name", "age", "department", "salary")

DATASET_FILENAME: str = "dataset.json"
DATASET_DIR_ENV: str = "DATASET_DIR"
JSON_INDENT: int = 2
