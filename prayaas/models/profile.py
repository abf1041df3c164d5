from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IncomeRange(str, Enum):
    """Annual income brackets, declared low to high."""

    UP_TO_2_5_LAKH = "Up to ₹2.5 Lakh"
    LAKH_2_5_TO_5 = "₹2.5 Lakh - ₹5 Lakh"
    LAKH_5_TO_7_5 = "₹5 Lakh - ₹7.5 Lakh"
    LAKH_7_5_TO_10 = "₹7.5 Lakh - ₹10 Lakh"
    LAKH_10_TO_15 = "₹10 Lakh - ₹15 Lakh"
    LAKH_15_TO_20 = "₹15 Lakh - ₹20 Lakh"
    LAKH_20_TO_30 = "₹20 Lakh - ₹30 Lakh"
    LAKH_30_TO_50 = "₹30 Lakh - ₹50 Lakh"
    LAKH_50_TO_1_CRORE = "₹50 Lakh - ₹1 Crore"
    CRORE_1_TO_2 = "₹1 Crore - ₹2 Crore"
    CRORE_2_TO_3 = "₹2 Crore - ₹3 Crore"
    ABOVE_3_CRORE = "Above ₹3 Crore"

    @property
    def rank(self) -> int:
        """Position of the bracket in the low-to-high ordering (0-based)."""
        return list(IncomeRange).index(self)


class Occupation(str, Enum):
    FARMER = "Farmer/Agricultural Worker"
    DAILY_WAGE_LABORER = "Daily Wage Laborer"
    SHOPKEEPER = "Shopkeeper/Retailer"
    DRIVER = "Driver (Taxi, Truck, Auto)"
    DOMESTIC_WORKER = "Household Help/Domestic Worker"
    CONSTRUCTION_WORKER = "Construction Worker"
    SMALL_BUSINESS_OWNER = "Small Business Owner"
    GOVERNMENT_EMPLOYEE = "Government Employee"
    PRIVATE_SECTOR_EMPLOYEE = "Private Sector Employee"
    TEACHER = "Teacher/Educator"
    HEALTHCARE_WORKER = "Healthcare Worker"
    IT_PROFESSIONAL = "IT Professional"
    ENGINEER = "Engineer"
    STUDENT = "Student"
    HOMEMAKER = "Homemaker"
    RETIRED = "Retired"
    UNEMPLOYED = "Unemployed"
    OTHER = "Other"


class InsuranceType(str, Enum):
    TERM_LIFE = "Term Life"
    HEALTH = "Health Insurance"
    CAR = "Car Insurance"
    HOME = "Home Insurance"
    INVESTMENT = "Investment Plans"
    NONE = "None"


class HealthCondition(str, Enum):
    NONE = "None"
    DIABETES = "Diabetes"
    HYPERTENSION = "Hypertension"
    HEART_CONDITION = "Heart Condition"
    RESPIRATORY = "Respiratory Issues"
    OTHER_CHRONIC = "Other Chronic Condition"


class Language(str, Enum):
    """Display language. Has no effect on classification or scoring."""

    ENGLISH = "English"
    HINDI = "Hindi"
    GUJARATI = "Gujarati"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    BENGALI = "Bengali"
    MARATHI = "Marathi"
    KANNADA = "Kannada"


class UserProfile(BaseModel):
    """
    Demographic and financial profile captured by the hosting UI.

    Read-only to the advisory services. Every enum field resolves to one of the
    fixed label sets; pydantic rejects anything else at the boundary.
    """

    model_config = ConfigDict(frozen=True)

    age: int = Field(ge=18, le=80, description="Age in years")
    income_range: IncomeRange = Field(description="Annual income bracket")
    occupation: Occupation
    family_members: int = Field(ge=1, le=10, description="Number of family members, including the user")
    existing_insurance: frozenset[InsuranceType] = Field(default_factory=frozenset)
    health_conditions: frozenset[HealthCondition] = Field(
        default_factory=lambda: frozenset({HealthCondition.NONE})
    )
    language: Language = Language.ENGLISH


def get_default_profile() -> UserProfile:
    return UserProfile(
        age=30,
        income_range=IncomeRange.LAKH_5_TO_7_5,
        occupation=Occupation.PRIVATE_SECTOR_EMPLOYEE,
        family_members=4,
        existing_insurance=frozenset(),
        health_conditions=frozenset({HealthCondition.NONE}),
        language=Language.ENGLISH,
    )


def get_profile_options() -> dict[str, list[str]]:
    """Labels for every fixed enumeration, in declaration order."""
    return {
        "income_range": [item.value for item in IncomeRange],
        "occupation": [item.value for item in Occupation],
        "existing_insurance": [item.value for item in InsuranceType],
        "health_conditions": [item.value for item in HealthCondition],
        "language": [item.value for item in Language],
    }
