"""
Structured drop reasons for words the layout could not place.
Use these keys in WordPlacement.drop_reason; map to user-facing messages in callers.
"""

# Known drop reasons
NO_ROOM = "no_room"
NO_ROOM_AFTER_EXTENSION = "no_room_after_extension"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    NO_ROOM: "No free space left for this word. Enable field extension or lower the font sizes.",
    NO_ROOM_AFTER_EXTENSION: "No free space for this word even after growing the field once.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given drop reason."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
