"""Chat configuration constants.

These are build-time values; nothing reads them from the environment.
"""

# Scripted reply appended after every successful send
AUTO_REPLY_TEXT = "재미있어! 과제다하고 연락할게!"

# Seconds between a send and its auto-reply
AUTO_REPLY_DELAY = 0.5

# Message timestamp display format (24-hour, local time)
TIME_FORMAT = "%H:%M"

# Component name used in debug callbacks
LOG_COMPONENT = "Chat"
