from faq.rules import answer_question, FALLBACK_ANSWER, LATE_POLICY_ANSWER, TA_ANSWER

__all__ = ["answer_question", "FALLBACK_ANSWER", "LATE_POLICY_ANSWER", "TA_ANSWER"]
