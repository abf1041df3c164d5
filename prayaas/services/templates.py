"""
Response skeletons for the chat assistant.

Each topic template is a fixed jinja2 string with named slots filled from the
profile. No randomness; the same profile always renders the same text.
"""

from typing import NamedTuple

from jinja2 import DictLoader, Environment, StrictUndefined

from prayaas.core.config import settings
from prayaas.models.profile import UserProfile

LIFE_INSURANCE = """\
Based on your profile (age {{ age }}, income {{ income_range }}), I'd recommend considering term life insurance. \
Term life provides high coverage at low premiums, which is ideal for your family of {{ family_members }} members.

For someone in your income bracket, a coverage of 10-15 times your annual income is generally recommended. \
This would provide financial security for your family in case of unforeseen circumstances.

Would you like me to recommend specific term life insurance policies that match your profile?"""

HEALTH_INSURANCE = """\
Health insurance is crucial for your family! With {{ family_members }} members, \
I'd suggest looking at family floater health insurance policies.

Key considerations for your profile:
- Family floater vs individual policies
- Coverage amount (₹5-10 lakhs minimum recommended)
- Network hospitals in your area
- Pre-existing disease coverage
- Maternity benefits (if applicable)

Some good options include Star Health Red Carpet, HDFC Ergo My Health Suraksha, and Care Supreme. \
Would you like detailed comparisons?"""

TAX_BENEFITS = """\
Great question about tax benefits! Insurance policies offer excellent tax advantages:

**Section 80C Benefits:**
- Life insurance premiums: Up to ₹1.5 lakh deduction
- ELSS, PPF, and other investments also count

**Section 80D Benefits:**
- Health insurance premiums: Up to ₹25,000 for self/family
- Additional ₹25,000 for parents (₹50,000 if parents are senior citizens)

**Section 10(10D):**
- Life insurance maturity proceeds are tax-free

Given your income range of {{ income_range }}, you could save significant taxes while securing your family's future!"""

ULIP_VS_TRADITIONAL = """\
ULIPs vs Traditional Insurance - good question for someone in your income bracket!

**ULIPs (Unit Linked Insurance Plans):**
- ✅ Market-linked returns potential
- ✅ Flexibility to switch funds
- ❌ Higher charges and complexity
- ❌ Market risk

**Traditional Insurance:**
- ✅ Guaranteed returns
- ✅ Simple and transparent
- ❌ Lower returns compared to equity markets

For your profile, I'd generally recommend:
1. Pure term insurance for protection
2. Separate mutual fund SIPs for investment
This typically gives better returns with lower costs!"""

CLAIMS = """\
Insurance claim settlement is crucial! Here's what to look for:

**Top insurers by claim settlement ratio (2023-24):**
{% for insurer, ratio in insurer_ranking -%}
- {{ insurer }}: {{ ratio }}
{% endfor %}
**Tips for smooth claims:**
1. Always disclose health conditions honestly
2. Keep all policy documents updated
3. Inform nominees about policies
4. Submit claims promptly with complete documentation
5. Follow up regularly

The key is choosing insurers with good claim settlement ratios and maintaining transparency throughout!"""

DEFAULT = """\
Thank you for your question! As your insurance assistant, I'm here to help you make informed decisions about insurance.

Based on your profile:
- Age: {{ age }}
- Income: {{ income_range }}
- Family: {{ family_members }} members
- Occupation: {{ occupation }}

I can provide personalized advice on life insurance, health insurance, investment plans, and more. \
Feel free to ask specific questions, or try one of the suggested topics below!

Is there a particular insurance type or concern you'd like to discuss?"""

GREETING = """\
Hello! I'm {{ assistant_name }}, your insurance assistant. I can help you understand insurance policies, \
answer your questions, and provide personalized advice based on your profile. \
Feel free to ask me anything about insurance!"""

INSURER_CLAIM_RANKING: tuple[tuple[str, str], ...] = (
    ("Max Life", "99.34%"),
    ("HDFC Life", "98.01%"),
    ("ICICI Prudential", "97.90%"),
    ("SBI Life", "97.83%"),
)

SUGGESTED_QUESTIONS: tuple[str, ...] = (
    "What's the difference between term life and whole life insurance?",
    "How much life insurance coverage do I need?",
    "Which health insurance is best for my family?",
    "What are the tax benefits of insurance policies?",
    "Should I invest in ULIPs or traditional insurance?",
    "How to claim insurance benefits quickly?",
)

jinja_env = Environment(
    loader=DictLoader(
        {
            "life_insurance": LIFE_INSURANCE,
            "health_insurance": HEALTH_INSURANCE,
            "tax_benefits": TAX_BENEFITS,
            "ulip_vs_traditional": ULIP_VS_TRADITIONAL,
            "claims": CLAIMS,
            "default": DEFAULT,
            "greeting": GREETING,
        }
    ),
    undefined=StrictUndefined,
    autoescape=False,
)


def _profile_slots(profile: UserProfile) -> dict[str, object]:
    return {
        "age": profile.age,
        "income_range": profile.income_range.value,
        "family_members": profile.family_members,
        "occupation": profile.occupation.value,
    }


class TopicTemplate(NamedTuple):
    """A keyword set and the response skeleton it selects."""

    topic: str
    keywords: tuple[str, ...]
    slots: tuple[str, ...] = ()

    def matches(self, lowered_query: str) -> bool:
        return any(keyword in lowered_query for keyword in self.keywords)

    def render(self, profile: UserProfile) -> str:
        available = _profile_slots(profile)
        context = {slot: available[slot] for slot in self.slots}
        if self.topic == "claims":
            context["insurer_ranking"] = INSURER_CLAIM_RANKING
        return jinja_env.get_template(self.topic).render(**context)


# Checked in order; the first matching topic wins. Claims sits ahead of ULIP so
# that "tell me about claim settlement ulip" gets the claims answer.
TOPIC_TEMPLATES: tuple[TopicTemplate, ...] = (
    TopicTemplate("life_insurance", ("term life", "life insurance"), ("age", "income_range", "family_members")),
    TopicTemplate("health_insurance", ("health insurance", "medical"), ("family_members",)),
    TopicTemplate("tax_benefits", ("tax benefit", "80c"), ("income_range",)),
    TopicTemplate("claims", ("claim", "settlement")),
    TopicTemplate("ulip_vs_traditional", ("ulip", "investment")),
)

DEFAULT_TEMPLATE = TopicTemplate("default", (), ("age", "income_range", "family_members", "occupation"))


def render_greeting() -> str:
    return jinja_env.get_template("greeting").render(assistant_name=settings.ASSISTANT_NAME)
