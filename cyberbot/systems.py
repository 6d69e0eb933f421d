from cyberbot.config import VOICE_RATE


# -----------------------------
# Voice Output
# -----------------------------
class VoiceIO:
    """Optional text-to-speech through pyttsx3. Silent when unavailable."""

    def __init__(self, rate: int = VOICE_RATE, enabled: bool = True):
        self.tts = None
        if not enabled:
            return
        try:
            pyttsx3 = __import__('pyttsx3')
            self.tts = pyttsx3.init()
            self.tts.setProperty('rate', rate)
        except Exception:
            print("VoiceIO: pyttsx3 initialization failed, spoken greeting will be disabled.")
            self.tts = None

    @property
    def available(self) -> bool:
        return self.tts is not None

    def speak(self, text: str):
        if not self.tts or not text:
            return
        try:
            self.tts.say(text)
            self.tts.runAndWait()
        except Exception as e:
            print(f"VoiceIO: speech failed: {e}")
