from typing import Sequence

from loguru import logger

from prayaas.models.conversation import ConversationTurn
from prayaas.models.profile import UserProfile
from prayaas.services.templates import DEFAULT_TEMPLATE, TOPIC_TEMPLATES, TopicTemplate


class IntentRouter:
    """
    Routes a free-text question to one of the fixed topic templates.

    Closed-vocabulary keyword matching: the query is lower-cased and checked for
    substring containment against each topic's keywords in table order.
    Stateless; conversation history is accepted but not consulted.
    """

    def __init__(
        self,
        topics: Sequence[TopicTemplate] = TOPIC_TEMPLATES,
        fallback: TopicTemplate = DEFAULT_TEMPLATE,
    ):
        self.topics = tuple(topics)
        self.fallback = fallback

    def match(self, query: str) -> TopicTemplate:
        lowered = (query or "").lower()
        for template in self.topics:
            if template.matches(lowered):
                return template
        return self.fallback

    def classify(self, query: str) -> str:
        return self.match(query).topic

    def respond(
        self,
        profile: UserProfile,
        query: str,
        history: Sequence[ConversationTurn] = (),
    ) -> str:
        template = self.match(query)
        logger.info(f"Routed chat query to topic '{template.topic}' (history={len(history)} turns)")
        reply = template.render(profile)
        if not reply.strip():
            # Only reachable with a custom table carrying an empty skeleton.
            reply = self.fallback.render(profile)
        return reply


intent_router = IntentRouter()
