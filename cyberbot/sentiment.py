from cyberbot.utils import contains_any

WORRIED = "worried"
POSITIVE = "positive"
NEGATIVE = "negative"
CURIOUS = "curious"
NEUTRAL = "neutral"

SENTIMENT_LABELS = (WORRIED, POSITIVE, NEGATIVE, CURIOUS, NEUTRAL)

# Checked in this order, first match wins. Substring tests, so "unscared" still counts as scared.
SENTIMENT_RULES = [
    (WORRIED, ("worried", "scared", "concerned")),
    (POSITIVE, ("happy", "great", "awesome", "excited")),
    (NEGATIVE, ("angry", "frustrated", "upset")),
    (CURIOUS, ("?", "how", "what", "why", "explain")),
]

SENTIMENT_PREFIXES = {
    WORRIED: "I understand this can feel concerning. ",
    POSITIVE: "Glad you're excited! ",
    NEGATIVE: "Sorry you're feeling frustrated. ",
    CURIOUS: "Good question! ",
    NEUTRAL: "",
}


class SentimentClassifier:
    """Very small rule-based sentiment detector.

    Only used to personalize replies a little; it is not a real sentiment engine.
    """

    def __init__(self, rules=None, prefixes=None):
        self.rules = rules or SENTIMENT_RULES
        self.prefixes = prefixes or SENTIMENT_PREFIXES

    def classify(self, text: str) -> str:
        if not text or not text.strip():
            return NEUTRAL
        for label, triggers in self.rules:
            if contains_any(text, triggers):
                return label
        return NEUTRAL

    def prefix_for(self, label: str) -> str:
        if label not in self.prefixes:
            raise ValueError(f"Unknown sentiment label: {label!r}")
        return self.prefixes[label]
