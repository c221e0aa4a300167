"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Design Philosophy:
- Contact list on a sunny backdrop with translucent dark rows
- Chat on a plain surface with a solid title bar
- Sent bubbles on the right in light blue, received on the left in grey
"""

APP_CSS = """
/* ============================================
   Contact List Screen
   ============================================ */
ContactListScreen {
    background: $accent;
}

#contact-list-title {
    width: 100%;
    height: 1;
    padding: 0 2;
    margin-top: 1;
    color: $foreground;
    text-style: bold;
}

#contact-list {
    height: 1fr;
    padding: 1 2;
    background: transparent;

    & > ContactItem {
        height: 3;
        margin: 0 0 1 0;
        padding: 1 2;
        background: black 30%;
        color: white;

        &.-highlight {
            background: black 50%;
        }
    }
}

ContactItem {
    & Horizontal {
        height: 1;
    }

    & .contact-avatar {
        width: 2;
        margin-right: 1;
    }

    & .contact-name {
        width: 1fr;
        text-style: bold;
    }
}

/* ============================================
   Chat Screen
   ============================================ */
ChatScreen {
    background: $background;
    layout: vertical;
}

#chat-title {
    width: 100%;
    height: 3;
    content-align: center middle;
    background: $primary;
    color: white;
    text-style: bold;
}

/* Decorative rows: sun top-right, moon bottom-left */
.decor-row {
    width: 100%;
    height: 1;
    padding: 0 2;
    background: transparent;
}

#sun-row {
    align-horizontal: right;
}

#moon-row {
    align-horizontal: left;
}

#sun {
    width: auto;
    color: $accent;
    text-style: bold;
}

#moon {
    width: auto;
    color: $secondary;
}

/* ============================================
   Chat History - Message Bubbles
   ============================================ */
#chat-history {
    height: 1fr;
    padding: 1 1 0 1;
    background: transparent;
    scrollbar-gutter: stable;
}

.message-row {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;

    &.sent {
        align-horizontal: right;

        & .message-bubble {
            background: $primary 30%;
        }
    }

    &.received {
        align-horizontal: left;

        & .message-bubble {
            background: $secondary 30%;
        }
    }
}

.message-time {
    width: auto;
    height: 1;
    color: $text-muted;
}

.message-bubble {
    width: auto;
    max-width: 70%;
    height: auto;
    padding: 0 1;
    color: $foreground;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: auto;
    padding: 0 1;
    background: $panel;
}

#chat-input {
    width: 1fr;
    height: 3;
    background: $background;
    border: round $border;

    &:focus {
        border: round $primary;
    }
}

#send-btn {
    width: 7;
    min-width: 7;
    height: 3;
    margin: 0 0 0 1;
    background: transparent;
    border: none;
    color: $primary;
    text-style: bold;

    &:hover {
        background: $primary 15%;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 4;
    max-height: 10;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
}

/* ============================================
   Footer - Keyboard Shortcuts
   ============================================ */
Footer {
    height: auto;
}
"""
