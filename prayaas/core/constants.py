"""
Advisory constants used across the application. Keep these simple and documented.
"""

from typing import Final

# Verdict thresholds on overall suitability (inclusive lower bounds)
VERDICT_RECOMMENDED_MIN: Final[int] = 70
VERDICT_MODERATE_MIN: Final[int] = 50

# Shortlist match bands on catalog suitability (inclusive lower bounds)
MATCH_STRONG_MIN: Final[int] = 80
MATCH_FAIR_MIN: Final[int] = 60

# Sub-score fallbacks when the catalog has no computed value
DEFAULT_AFFORDABILITY_SCORE: Final[int] = 70
DEFAULT_COVERAGE_SCORE: Final[int] = 75
DEFAULT_BENEFITS_SCORE: Final[int] = 80

# Benefit projection: 5% compounding per year, sampled every 5 years
PROJECTION_REFERENCE_PREMIUM: Final[float] = 17500.0
PROJECTION_REFERENCE_BENEFIT: Final[float] = 100000.0
PROJECTION_GROWTH_RATE: Final[float] = 0.05
PROJECTION_STEP_YEARS: Final[int] = 5
PROJECTION_STEPS: Final[int] = 6

# Profile thresholds for the category rule table
SENIOR_AGE_THRESHOLD: Final[int] = 50
LARGE_FAMILY_THRESHOLD: Final[int] = 3
