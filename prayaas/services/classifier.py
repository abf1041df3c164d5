from typing import Callable, NamedTuple

from loguru import logger

from prayaas.core.constants import LARGE_FAMILY_THRESHOLD, SENIOR_AGE_THRESHOLD
from prayaas.models.profile import UserProfile
from prayaas.models.recommendation import CategoryDistribution, CategoryShare


class CategoryRule(NamedTuple):
    name: str
    predicate: Callable[[UserProfile], bool]
    shares: tuple[tuple[str, int, str], ...]


# Evaluated top to bottom, first match wins. The last rule always matches.
# Income, occupation and existing cover do not take part yet.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        name="senior",
        predicate=lambda p: p.age > SENIOR_AGE_THRESHOLD,
        shares=(
            ("Health Insurance", 45, "#ef4444"),
            ("Critical Illness", 35, "#f97316"),
            ("Senior Benefits", 20, "#eab308"),
        ),
    ),
    CategoryRule(
        name="large_family",
        predicate=lambda p: p.family_members > LARGE_FAMILY_THRESHOLD,
        shares=(
            ("Family Health", 40, "#22c55e"),
            ("Term Life", 35, "#3b82f6"),
            ("Child Education", 25, "#a855f7"),
        ),
    ),
    CategoryRule(
        name="default",
        predicate=lambda p: True,
        shares=(
            ("Term Life", 45, "#3b82f6"),
            ("Health Insurance", 35, "#22c55e"),
            ("Investment", 20, "#f59e0b"),
        ),
    ),
)


class ProfileClassifier:
    """
    Maps a profile to a distribution of recommended insurance focus areas.

    A small set of archetypal profiles rather than a continuous model.
    """

    def __init__(self, rules: tuple[CategoryRule, ...] = CATEGORY_RULES):
        self.rules = rules

    def match_rule(self, profile: UserProfile) -> CategoryRule:
        for rule in self.rules:
            if rule.predicate(profile):
                return rule
        # CATEGORY_RULES ends with a catch-all; a custom table might not.
        raise LookupError("No category rule matched the profile")

    def classify(self, profile: UserProfile) -> CategoryDistribution:
        rule = self.match_rule(profile)
        logger.debug(f"Profile (age={profile.age}, family={profile.family_members}) matched rule '{rule.name}'")
        return CategoryDistribution(
            shares=[CategoryShare(label=label, weight=weight, color=color) for label, weight, color in rule.shares]
        )


profile_classifier = ProfileClassifier()
