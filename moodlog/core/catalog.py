"""Built-in mood catalog."""

from moodlog.models import MoodEntry, SessionState

# (label, description, tip)
BUILTIN_MOODS = [
    ("😊 Happy", "Feeling or showing pleasure or contentment.",
     "Share your happiness with someone today!"),
    ("😢 Sad", "Feeling or showing sorrow; unhappy.",
     "Talk to a friend or write down your feelings."),
    ("😡 Angry", "Feeling or showing strong annoyance, displeasure, or hostility.",
     "Take deep breaths or go for a walk to cool down."),
    ("😱 Surprised", "Feeling or showing surprise because of something unexpected.",
     "Embrace the unexpected and stay open-minded."),
    ("😴 Tired", "In need of sleep or rest; weary.",
     "Take a short nap or get some fresh air."),
    ("😌 Calm", "Not showing or feeling nervousness, anger, or other strong emotions.",
     "Enjoy the peace and do something you love."),
    ("🤔 Thoughtful", "Absorbed in or involving thought.",
     "Write down your thoughts or share them with someone."),
    ("😇 Grateful", "Feeling or showing an appreciation of kindness; thankful.",
     "Express your gratitude to someone today."),
]


def create_session() -> SessionState:
    """Create a fresh session holding the built-in moods."""
    state = SessionState()
    for label, description, tip in BUILTIN_MOODS:
        state.catalog.append(MoodEntry(
            id=state.allocate_id(),
            label=label,
            description=description,
            tip=tip,
        ))
    return state
