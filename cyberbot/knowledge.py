import random
from typing import Dict, List, Optional, Sequence

from cyberbot.config import META_TOPICS, STOP_WORDS
from cyberbot.utils import normalize

# -----------------------------
# Topic Responses
# -----------------------------
TOPIC_RESPONSES: Dict[str, List[str]] = {
    "how are you": ["I'm functioning optimally. Ready to talk cybersecurity!"],
    "purpose": ["I help people understand how to stay safer online."],
    "help": ["I can talk about: passwords, 2FA, phishing, VPN, Wi-Fi, email, privacy, malware, ransomware, scams, backups and updates."],
    "password": [
        "Use at least 14-16 characters. Include uppercase, lowercase, numbers, and symbols.",
        "Passphrases are often better: e.g. \"Coffee$IsGreatAt42C!\"",
        "Never reuse passwords across sites. A password manager helps a lot.",
        "Change passwords immediately after a known breach.",
    ],
    "2fa": [
        "2FA = something you know + something you have. Authenticator apps > SMS.",
        "Enable 2FA everywhere important, especially email and banking.",
        "Hardware keys (YubiKey, Titan) offer the strongest 2FA.",
    ],
    "phishing": [
        "Urgency + strange sender = classic phishing red flag.",
        "Hover over links, never trust what is displayed.",
        "Real companies rarely ask for passwords via email.",
    ],
    "privacy": [
        "Check and tighten privacy settings on social media regularly.",
        "Think twice before posting personal information.",
        "Consider privacy-respecting browsers and search engines.",
    ],
    "vpn": [
        "VPN encrypts traffic, very useful on public Wi-Fi.",
        "Choose providers with audited no-logs policy.",
        "VPN improves privacy, but does not make you fully anonymous.",
    ],
    "wifi": [
        "On public Wi-Fi: always use VPN, avoid banking.",
        "At home: use WPA3, strong admin password, disable WPS.",
        "Create a guest network for visitors.",
    ],
    "email": [
        "Red flags: urgent language, bad grammar, unexpected attachments.",
        "Never click links or open files from unknown senders.",
        "Use different emails for banking vs. casual registrations.",
    ],
    "malware": [
        "Only install software from official stores or the vendor's own site.",
        "Keep an up-to-date antivirus running and scan downloads before opening them.",
        "Unexpected pop-ups and a sudden slow machine can be signs of malware.",
    ],
    "ransomware": [
        "Offline backups are the best defence against ransomware.",
        "Paying the ransom does not guarantee you get your files back.",
        "Disconnect an infected machine from the network straight away.",
    ],
    "scam": [
        "If an offer sounds too good to be true, it usually is.",
        "Scammers push you to act fast. Slow down and verify through another channel.",
        "Nobody legitimate asks to be paid in gift cards or crypto.",
    ],
    "backup": [
        "Follow the 3-2-1 rule: 3 copies, 2 different media, 1 off-site.",
        "Test restoring your backups, not just making them.",
    ],
    "updates": [
        "Turn on automatic updates for your OS, browser and apps.",
        "Most attacks use known bugs that an update already fixed.",
    ],
}


# -----------------------------
# Knowledge Base
# -----------------------------
class KnowledgeBase:
    def __init__(self, rng: Optional[random.Random] = None,
                 topics: Optional[Dict[str, Sequence[str]]] = None,
                 stop_words: Sequence[str] = STOP_WORDS):
        self.rng = rng or random.Random()
        self.stop_words = frozenset(normalize(w) for w in stop_words)
        self._topics: Dict[str, tuple] = {}
        for key, variants in (TOPIC_RESPONSES if topics is None else topics).items():
            self.add_topic(key, variants)

    def add_topic(self, key: str, variants: Sequence[str]):
        key = normalize(key)
        if not key:
            raise ValueError("Topic key cannot be empty.")
        if not variants:
            raise ValueError(f"Topic '{key}' needs at least one response.")
        self._topics[key] = tuple(variants)

    def get_response(self, topic: str) -> Optional[str]:
        variants = self._topics.get(normalize(topic))
        if not variants:
            return None
        if len(variants) == 1:
            return variants[0]
        return self.rng.choice(variants)

    def is_ignored_word(self, word: str) -> bool:
        word = normalize(word)
        return bool(word) and word in self.stop_words

    def has_topic(self, topic: str) -> bool:
        return normalize(topic) in self._topics

    def list_topics(self) -> List[str]:
        return [k for k in self._topics if k not in META_TOPICS]
