import tkinter as tk
from tkinter import scrolledtext, simpledialog
from tkinter import ttk

from cyberbot.config import DEFAULT_USER_NAME, FAREWELL_MESSAGE, MAX_NAME_ATTEMPTS, WELCOME_GREETING
from cyberbot.dialogue import ConversationDispatcher
from cyberbot.display import ChatDisplayBuffer
from cyberbot.knowledge import KnowledgeBase
from cyberbot.memory import UsageMemory
from cyberbot.systems import VoiceIO
from cyberbot.utils import is_valid_name


class CyberBotGUI:
    """Tkinter window around the same dispatcher the console uses.

    Turns run synchronously on the Tk thread when the user presses Enter.
    """

    def __init__(self, knowledge_base: KnowledgeBase, memory: UsageMemory, voice: VoiceIO = None):
        self.kb = knowledge_base
        self.m = memory
        self.voice = voice
        self.history = ChatDisplayBuffer()
        self.dispatcher = ConversationDispatcher(knowledge_base, memory, self)

        self.root = tk.Tk()
        self.root.title("CyberBot - Cybersecurity Awareness Assistant")
        self.root.geometry("900x600")
        self.root.configure(bg='#1a1a1a')
        self.root.grid_rowconfigure(0, weight=1)
        self.root.grid_columnconfigure(0, weight=3)
        self.root.grid_columnconfigure(1, weight=1)

        # --- Chat Log ---
        self.chat_log = scrolledtext.ScrolledText(self.root, wrap=tk.WORD, fg='#abb2bf', bg='#282c34', font=('Consolas', 11))
        self.chat_log.grid(row=0, column=0, sticky="nsew", padx=(10, 5), pady=10)
        self.chat_log.tag_config('user', foreground='#e5c07b')
        self.chat_log.tag_config('bot', foreground='#c678dd')
        self.chat_log.tag_config('system', foreground='#56b6c2', font=('Consolas', 10, 'italic'))
        self.chat_log.tag_config('error', foreground='#e06c75')
        self.chat_log.config(state=tk.DISABLED)

        # --- Topics Panel ---
        topics_frame = tk.Frame(self.root, bg='#282c34', bd=1, relief=tk.SOLID)
        topics_frame.grid(row=0, column=1, sticky="nsew", padx=(5, 10), pady=10)
        topics_frame.grid_rowconfigure(1, weight=1)
        topics_frame.grid_columnconfigure(0, weight=1)
        tk.Label(topics_frame, text="Topics", font=('Consolas', 14, 'bold'), bg='#282c34', fg='#c678dd').grid(row=0, column=0, pady=5)
        self.topics_tree = ttk.Treeview(topics_frame, columns=("count",), show="tree headings", selectmode="browse")
        self.topics_tree.heading("#0", text="Topic")
        self.topics_tree.heading("count", text="Asked")
        self.topics_tree.column("count", width=60, anchor=tk.CENTER)
        self.topics_tree.grid(row=1, column=0, sticky="nsew", padx=5, pady=5)
        self.topics_tree.bind("<Double-1>", self.ask_selected_topic)

        # --- Input ---
        input_frame = tk.Frame(self.root, bg='#1a1a1a')
        input_frame.grid(row=1, column=0, columnspan=2, sticky="ew", padx=10, pady=(0, 10))
        input_frame.grid_columnconfigure(0, weight=1)
        self.input_entry = tk.Entry(input_frame, bg='#282c34', fg='white', insertbackground='white', font=('Consolas', 11))
        self.input_entry.grid(row=0, column=0, sticky="ew")
        self.input_entry.bind("<Return>", self.send_message)
        self.send_button = tk.Button(input_frame, text="Send", command=self.send_message, bg='#61afef', fg='white', relief=tk.FLAT)
        self.send_button.grid(row=0, column=1, padx=(5, 0))

        self._update_topics_panel()
        self.input_entry.focus_set()

    def start(self):
        """Asks for the user's name, greets them and enters the Tk main loop."""
        self.m.user_name = self.ask_user_name()
        self.display_system_message(f"Hello, {self.m.user_name}! {WELCOME_GREETING}")
        self.display_system_message("Type 'help' to see available topics or 'exit' to quit.")
        if self.voice:
            self.root.after(100, lambda: self.voice.speak(WELCOME_GREETING))
        self.root.mainloop()

    def ask_user_name(self) -> str:
        for _ in range(MAX_NAME_ATTEMPTS):
            name = simpledialog.askstring("Welcome", "Enter your name:", parent=self.root)
            if name is None:
                break
            if is_valid_name(name):
                return name.strip()
            self.display_error("Only letters and spaces allowed.")
        return DEFAULT_USER_NAME

    # --- Output contract used by the dispatcher ---
    def read_line(self, user_name: str):
        # Input arrives through send_message; the GUI never blocks for a line.
        return None

    def show_response(self, text: str):
        self.post_message(f"ChatBot: {text.strip()}", 'bot')

    def display_system_message(self, text: str):
        self.post_message(text, 'system')

    def display_error(self, text: str):
        self.post_message(f"Error: {text}", 'error')

    # --- Chat log ---
    def post_message(self, text: str, tag: str):
        self.history.add((text, tag))
        # Redraw from the buffer so only the last few lines stay on screen
        self.chat_log.config(state=tk.NORMAL)
        self.chat_log.delete("1.0", tk.END)
        for line, line_tag in self.history.lines():
            self.chat_log.insert(tk.END, line + "\n", line_tag)
        self.chat_log.config(state=tk.DISABLED)
        self.chat_log.see(tk.END)

    def _update_topics_panel(self):
        for item in self.topics_tree.get_children():
            self.topics_tree.delete(item)
        for topic in sorted(self.kb.list_topics()):
            self.topics_tree.insert("", "end", iid=topic, text=topic, values=(self.m.get_count(topic),))

    def ask_selected_topic(self, event=None):
        selection = self.topics_tree.selection()
        if selection:
            self.input_entry.delete(0, tk.END)
            self.input_entry.insert(0, f"tell me about {selection[0]}")
            self.send_message()

    def send_message(self, event=None):
        user_input = self.input_entry.get()
        self.input_entry.delete(0, tk.END)
        if user_input.strip():
            self.post_message(f"{self.m.user_name}: {user_input.strip()}", 'user')

        self.dispatcher.handle_input(user_input)
        self._update_topics_panel()

        if self.dispatcher.terminated:
            if self.voice:
                self.voice.speak(FAREWELL_MESSAGE)
            self.input_entry.config(state=tk.DISABLED)
            self.send_button.config(state=tk.DISABLED)
            self.root.after(1500, self.root.quit)
