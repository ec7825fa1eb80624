"""
Canned course FAQ answers.

answer_question() walks FAQ_RULES in order and returns the answer of the first
rule whose trigger appears in the lower-cased question. Nothing matched means
FALLBACK_ANSWER. No scoring or ranking, just substring checks.
"""

from typing import NamedTuple

TA_ANSWER = (
    "Jyothi (Email: jyothi2215@vt.edu) is the GTA (Graduate Teaching Assistant) of this course. "
    "Note: GTA is often used interchangeably with TA, but technically GTA stands for "
    "Graduate Teaching Assistant."
)

LATE_POLICY_ANSWER = (
    "Late submissions are penalized by 5% project points for every 12 hours late, "
    "up to a maximum of 48 hours late. Project submissions that are 48+ hours past "
    "the deadline are not accepted unless explicit permission is given by the instructor."
)

FALLBACK_ANSWER = (
    "I'm sorry, I don't have an answer for that. I am a simple dummy bot. "
    "Please try asking about the TA or the late submission penalty."
)


class FaqRule(NamedTuple):
    triggers: tuple[str, ...]   # lower-case substrings
    answer: str


# Order matters: first match wins
FAQ_RULES: tuple[FaqRule, ...] = (
    FaqRule(triggers=("ta of this course",), answer=TA_ANSWER),
    FaqRule(triggers=("late penalty", "late submission"), answer=LATE_POLICY_ANSWER),
)


def answer_question(question: str) -> str:
    text = question.lower()
    for rule in FAQ_RULES:
        if any(trigger in text for trigger in rule.triggers):
            return rule.answer
    return FALLBACK_ANSWER
