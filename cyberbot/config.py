# -----------------------------
# Config & Constants
# -----------------------------
DATA_FILE = "user_keywords.txt"
CRASH_LOG = "crash.log"
DEFAULT_USER_NAME = "User"
MAX_NAME_ATTEMPTS = 4
CHAT_BUFFER_SIZE = 40
MIN_KEYWORD_LENGTH = 3

# Typing animation, milliseconds per character
RESPONSE_TYPING_DELAY_MS = 22
SYSTEM_TYPING_DELAY_MS = 20
FAREWELL_TYPING_DELAY_MS = 30

VOICE_RATE = 150

# space, comma, period, ! ? ; :
KEYWORD_DELIMITER_PATTERN = r"[\s,.!?;:]+"

EXIT_COMMANDS = {"exit", "quit", "bye", "goodbye"}
HELP_COMMANDS = {"help", "options", "topics", "?"}
NAME_QUERY_PHRASES = ("what is my name", "who am i", "my name")
FREQUENT_QUERY_PHRASES = ("frequent", "most asked", "faq", "common question", "what do i ask most")

EMPTY_INPUT_MESSAGE = "Please enter your question."
FAREWELL_MESSAGE = "Stay safe online! Goodbye."
FALLBACK_RESPONSE = "I'm not sure about that topic yet. Try 'help' for options."
HELP_HEADER = "I can help with these cybersecurity topics:"
HELP_FOOTER = "You can also ask 'what is my name', 'what do I ask most', or type 'exit' to quit."
NO_QUESTIONS_MESSAGE = "You haven't asked many questions yet."

# Meta topics answer small talk but are not advertised as topics
META_TOPICS = {"help", "purpose", "how are you"}

STOP_WORDS = (
    "a", "an", "the", "is", "are", "am", "do", "does", "can", "could",
    "what", "how", "why", "who", "tell", "me", "about", "please", "thank", "thanks",
)

# Contextual prefixes by repeat count. {keyword} and {count} are filled in.
REPEAT_PREFIXES = {
    2: [
        "About {keyword} again: ",
        "Back to {keyword}, I see. ",
        "You asked about {keyword} before, so here's another tip: ",
    ],
    3: [
        "You seem quite interested in {keyword}. ",
        "You are clearly interested in {keyword}, so here is more: ",
    ],
    4: [
        "You've asked about {keyword} {count} times now. ",
        "That's {count} questions about {keyword} so far. ",
    ],
}

BANNER = [
    r"   ______      __              ____        __ ",
    r"  / ____/_  __/ /_  ___  _____/ __ )____  / /_",
    r" / /   / / / / __ \/ _ \/ ___/ __  / __ \/ __/",
    r"/ /___/ /_/ / /_/ /  __/ /  / /_/ / /_/ / /_  ",
    r"\____/\__, /_.___/\___/_/  /_____/\____/\__/  ",
    r"     /____/   Cybersecurity Awareness Bot     ",
]

WELCOME_GREETING = "Hello! Welcome to the Cybersecurity Awareness Bot. I'm here to help you stay safe online."
