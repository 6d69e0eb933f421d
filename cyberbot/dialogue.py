from typing import Callable, List, Optional, Tuple

from cyberbot.config import (
    EMPTY_INPUT_MESSAGE, EXIT_COMMANDS, FALLBACK_RESPONSE, FAREWELL_MESSAGE,
    FREQUENT_QUERY_PHRASES, HELP_COMMANDS, HELP_FOOTER, HELP_HEADER, NAME_QUERY_PHRASES,
)
from cyberbot.keywords import KeywordExtractor
from cyberbot.knowledge import KnowledgeBase
from cyberbot.memory import UsageMemory
from cyberbot.sentiment import NEUTRAL, SentimentClassifier
from cyberbot.utils import contains_any

AWAITING_INPUT = "awaiting_input"
HANDLING_COMMAND = "handling_command"
HANDLING_QUERY = "handling_query"
TERMINATED = "terminated"


class ConversationDispatcher:
    """Runs the conversation one turn at a time.

    Each line is either a meta command (exit, help, name recall, frequent
    topic) or a natural-language question. Questions go through keyword
    extraction, the knowledge base, usage memory and the sentiment prefix.

    ``ui`` provides ``read_line(user_name)``, ``show_response(text)``,
    ``display_system_message(text)`` and ``display_error(text)``.
    """

    def __init__(self, knowledge_base: KnowledgeBase, memory: UsageMemory, ui,
                 extractor: Optional[KeywordExtractor] = None,
                 sentiment: Optional[SentimentClassifier] = None):
        self.kb = knowledge_base
        self.m = memory
        self.ui = ui
        self.extractor = extractor or KeywordExtractor()
        self.sentiment = sentiment or SentimentClassifier()
        self.state = AWAITING_INPUT
        # Order matters: exit, help, name recall, frequent topic
        self.commands: List[Tuple[Callable[[str], bool], Callable[[str], None]]] = [
            (self.is_exit_command, self.handle_exit),
            (self.is_help_command, self.display_help),
            (self.is_name_query, self.handle_name_query),
            (self.is_frequent_query, self.handle_frequent_query),
        ]

    @property
    def terminated(self) -> bool:
        return self.state == TERMINATED

    def run(self):
        while self.process_turn():
            pass

    def process_turn(self) -> bool:
        """Reads one line and handles it. Returns False once the conversation is over."""
        if self.terminated:
            return False
        try:
            line = self.ui.read_line(self.m.user_name)
        except Exception as e:
            self.ui.display_error(f"Conversation error: {e}")
            return True
        if line is None:
            # Input exhausted, same as an explicit exit
            self.handle_exit("")
            return False
        self.handle_input(line)
        return not self.terminated

    def handle_input(self, raw: str) -> str:
        if self.terminated:
            return self.state
        try:
            text = (raw or "").strip()
            if not text:
                self.ui.display_error(EMPTY_INPUT_MESSAGE)
                return self.state

            for matches, handler in self.commands:
                if matches(text):
                    self.state = HANDLING_COMMAND
                    handler(text)
                    break
            else:
                self.state = HANDLING_QUERY
                self.respond(text)
        except Exception as e:
            self.ui.display_error(f"Conversation error: {e}")

        if self.state != TERMINATED:
            self.state = AWAITING_INPUT
        return self.state

    # --- Command detection ---
    @staticmethod
    def is_exit_command(text: str) -> bool:
        return text.strip().lower() in EXIT_COMMANDS

    @staticmethod
    def is_help_command(text: str) -> bool:
        return text.strip().lower() in HELP_COMMANDS

    @staticmethod
    def is_name_query(text: str) -> bool:
        return contains_any(text, NAME_QUERY_PHRASES)

    @staticmethod
    def is_frequent_query(text: str) -> bool:
        return contains_any(text, FREQUENT_QUERY_PHRASES)

    # --- Command handlers ---
    def handle_exit(self, text: str):
        self.ui.display_system_message(FAREWELL_MESSAGE)
        self.state = TERMINATED

    def display_help(self, text: str):
        self.ui.display_system_message(HELP_HEADER)
        for topic in self.kb.list_topics():
            self.ui.display_system_message(f"- {topic}")
        self.ui.display_system_message(HELP_FOOTER)

    def handle_name_query(self, text: str):
        self.ui.show_response(self.m.name_recall_message())

    def handle_frequent_query(self, text: str):
        self.ui.show_response(self.m.most_frequent_topic_message())

    # --- Natural language ---
    def respond(self, text: str) -> List[str]:
        sentiment = self.sentiment.classify(text)
        keywords = self.extractor.distinct(self.extractor.extract(text, self.kb))

        responses = []
        for keyword in keywords:
            self.m.record_keyword(keyword)

            base_response = self.kb.get_response(keyword)
            if not base_response:
                continue

            count = self.m.get_count(keyword)
            final_response = base_response
            # Add context if the topic came up before
            if count > 1:
                final_response = self.m.contextual_prefix(keyword, base_response, count)
            if sentiment != NEUTRAL:
                final_response = self.sentiment.prefix_for(sentiment) + final_response

            self.ui.show_response(final_response)
            responses.append(final_response)

        if not responses:
            self.ui.show_response(FALLBACK_RESPONSE)
        return responses
