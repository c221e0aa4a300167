"""Unit tests for the chat session."""
from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from daynight.chat import AUTO_REPLY_DELAY, AUTO_REPLY_TEXT, ChatSession, ReplyScheduler, ScheduledCall


whitespace = st.text(alphabet=" \t\n\r　", max_size=10)
non_blank = st.text(min_size=1).filter(lambda text: text.strip() != "")


class TestSendMessage:
    """Tests for ChatSession.send_message."""

    def test_new_session_is_empty(self, session):
        """Test that a session starts with no messages and no draft."""
        assert session.messages == []
        assert session.draft == ""
        assert session.pending_replies == 0

    def test_send_hello(self, session, scheduler):
        """Test the basic send then auto-reply scenario."""
        session.draft = "hello"
        sent = session.send_message("hello")

        assert sent is not None
        assert [(m.text, m.is_sent_by_me) for m in session.messages] == [("hello", True)]
        assert session.draft == ""

        scheduler.advance(AUTO_REPLY_DELAY)

        assert [(m.text, m.is_sent_by_me) for m in session.messages] == [
            ("hello", True),
            (AUTO_REPLY_TEXT, False),
        ]

    def test_reply_not_delivered_early(self, session, scheduler):
        """Test that the reply waits the full delay."""
        session.send_message("hello")
        scheduler.advance(AUTO_REPLY_DELAY - 0.01)

        assert len(session.messages) == 1
        assert session.pending_replies == 1

    def test_reply_timestamp_is_firing_time(self, session, scheduler, clock):
        """Test that the reply is stamped when it fires, not when it was scheduled."""
        sent = session.send_message("hello")
        scheduler.advance(AUTO_REPLY_DELAY)

        reply = session.messages[-1]
        assert sent.timestamp == datetime(2024, 5, 17, 9, 5, 0)
        assert reply.timestamp == clock.now()
        assert (reply.timestamp - sent.timestamp).total_seconds() == pytest.approx(AUTO_REPLY_DELAY)

    def test_text_is_stored_untrimmed(self, session):
        """Test that surrounding whitespace is kept in the stored text."""
        sent = session.send_message("  hi there \n")
        assert sent.text == "  hi there \n"

    def test_whitespace_only_is_rejected(self, session, scheduler):
        """Test that whitespace-only input is a silent no-op."""
        session.draft = "   "
        result = session.send_message("   ")

        assert result is None
        assert session.messages == []
        assert session.draft == "   "

        scheduler.advance(AUTO_REPLY_DELAY * 4)
        assert session.messages == []

    def test_empty_string_is_rejected(self, session):
        """Test that the empty string is rejected."""
        assert session.send_message("") is None
        assert session.pending_replies == 0

    def test_submit_draft_sends_draft(self, session):
        """Test that submit_draft sends and clears the draft."""
        session.draft = "from the input field"
        sent = session.submit_draft()

        assert sent.text == "from the input field"
        assert session.draft == ""

    def test_two_rapid_sends(self, session, scheduler):
        """Test that each send gets its own reply after both sends."""
        session.send_message("a")
        scheduler.advance(0.1)
        session.send_message("b")

        assert session.pending_replies == 2

        scheduler.advance(AUTO_REPLY_DELAY)

        texts = [m.text for m in session.messages]
        assert texts == ["a", "b", AUTO_REPLY_TEXT, AUTO_REPLY_TEXT]
        assert [m.is_sent_by_me for m in session.messages] == [True, True, False, False]
        assert session.pending_replies == 0

    def test_send_after_reply_interleaves(self, session, scheduler):
        """Test that a reply lands between sends spaced beyond the delay."""
        session.send_message("first")
        scheduler.advance(AUTO_REPLY_DELAY + 0.1)
        session.send_message("second")
        scheduler.advance(AUTO_REPLY_DELAY)

        texts = [m.text for m in session.messages]
        assert texts == ["first", AUTO_REPLY_TEXT, "second", AUTO_REPLY_TEXT]

    def test_message_ids_are_unique(self, session, scheduler):
        """Test that every message gets its own id."""
        for text in ("one", "two", "three"):
            session.send_message(text)
        scheduler.advance(AUTO_REPLY_DELAY)

        ids = [m.id for m in session.messages]
        assert len(ids) == 6
        assert len(set(ids)) == 6

    def test_messages_returns_snapshot(self, session):
        """Test that callers cannot mutate the session history."""
        session.send_message("hello")
        snapshot = session.messages
        snapshot.clear()

        assert len(session.messages) == 1

    @given(non_blank)
    def test_non_blank_text_appends_one_message(self, session_factory, text: str):
        """Property test: non-blank text appends exactly one self message."""
        session, _ = session_factory()
        session.draft = text
        sent = session.send_message(text)

        assert session.messages == [sent]
        assert sent.text == text
        assert sent.is_sent_by_me is True
        assert session.draft == ""

    @given(whitespace)
    def test_blank_text_changes_nothing(self, session_factory, text: str):
        """Property test: whitespace-only text leaves messages and draft alone."""
        session, scheduler = session_factory()
        session.draft = text
        assert session.send_message(text) is None

        scheduler.advance(AUTO_REPLY_DELAY * 2)
        assert session.messages == []
        assert session.draft == text

    @given(st.lists(st.tuples(non_blank, st.floats(min_value=0.0, max_value=1.0)), max_size=8))
    def test_every_send_gets_one_reply_after_it(self, session_factory, sends):
        """Property test: N sends yield N replies, each after its trigger."""
        session, scheduler = session_factory()
        for text, gap in sends:
            session.send_message(text)
            scheduler.advance(gap)
        scheduler.advance(AUTO_REPLY_DELAY)

        messages = session.messages
        mine = [m for m in messages if m.is_sent_by_me]
        replies = [m for m in messages if not m.is_sent_by_me]
        assert [m.text for m in mine] == [text for text, _ in sends]
        assert len(replies) == len(sends)
        assert all(m.text == AUTO_REPLY_TEXT for m in replies)

        # The k-th reply comes after the k-th send
        positions_mine = [i for i, m in enumerate(messages) if m.is_sent_by_me]
        positions_reply = [i for i, m in enumerate(messages) if not m.is_sent_by_me]
        for sent_at, reply_at in zip(positions_mine, positions_reply, strict=True):
            assert reply_at > sent_at

        # Append order is timestamp order
        stamps = [m.timestamp for m in messages]
        assert stamps == sorted(stamps)


class TestClose:
    """Tests for session teardown."""

    def test_close_cancels_pending_replies(self, session, scheduler):
        """Test that closing drops replies that have not fired yet."""
        session.send_message("a")
        session.send_message("b")
        session.close()

        assert session.closed is True
        assert session.pending_replies == 0
        assert scheduler.pending == 0

        scheduler.advance(AUTO_REPLY_DELAY * 2)
        assert [m.text for m in session.messages] == ["a", "b"]

    def test_close_is_idempotent(self, session):
        """Test that closing twice is harmless."""
        session.close()
        session.close()
        assert session.closed is True

    def test_send_after_close_is_ignored(self, session):
        """Test that a closed session accepts no new messages."""
        session.close()
        assert session.send_message("late") is None
        assert session.messages == []

    def test_close_keeps_delivered_history(self, session, scheduler):
        """Test that delivered messages survive close."""
        session.send_message("hello")
        scheduler.advance(AUTO_REPLY_DELAY)
        session.close()

        assert len(session.messages) == 2


class ImmediateScheduler(ReplyScheduler):
    """Scheduler that runs the callback before call_later returns."""

    def call_later(self, delay, callback):
        callback()
        return ScheduledCall(lambda: None)


class TestSchedulingOrder:
    """Tests for replies delivered while they are still being scheduled."""

    def test_immediate_reply_leaves_nothing_pending(self, contact, clock):
        """Test that a reply fired inside call_later is not counted as pending."""
        session = ChatSession(contact, ImmediateScheduler(), clock=clock)
        session.send_message("now")

        assert [(m.text, m.is_sent_by_me) for m in session.messages] == [
            ("now", True),
            (AUTO_REPLY_TEXT, False),
        ]
        assert session.pending_replies == 0

    def test_close_after_immediate_reply(self, contact, clock):
        """Test that close reports no cancelled replies when all were delivered."""
        records = []
        session = ChatSession(contact, ImmediateScheduler(), clock=clock)
        session.set_debug_callback(lambda level, component, message: records.append(message))
        session.send_message("now")
        session.close()

        assert "0 pending replies cancelled" in records[-1]


class TestCallbacks:
    """Tests for message and debug callbacks."""

    def test_message_callback_sees_every_append(self, session, scheduler):
        """Test that the message callback receives sends and replies in order."""
        seen = []
        session.set_message_callback(seen.append)

        session.send_message("hello")
        scheduler.advance(AUTO_REPLY_DELAY)

        assert seen == session.messages

    def test_message_callback_not_called_on_reject(self, session):
        """Test that rejected input produces no callback."""
        seen = []
        session.set_message_callback(seen.append)
        session.send_message(" ")
        assert seen == []

    def test_debug_callback_receives_records(self, session, scheduler):
        """Test that the debug callback receives level, component and message."""
        records = []
        session.set_debug_callback(lambda level, component, message: records.append((level, component, message)))

        session.send_message(" ")
        session.send_message("hello")
        session.close()

        levels = [level for level, _, _ in records]
        components = {component for _, component, _ in records}
        assert "debug" in levels
        assert "info" in levels
        assert components == {"Chat"}
        assert any("Rejected" in message for _, _, message in records)
        assert any("1 pending replies cancelled" in message for _, _, message in records)

    def test_send_after_close_logs_warning(self, session):
        """Test that a late send is reported at warning level."""
        records = []
        session.set_debug_callback(lambda level, component, message: records.append(level))
        session.close()
        session.send_message("late")

        assert records[-1] == "warning"


class TestIsolation:
    """Tests for separation between sessions."""

    def test_new_session_for_other_contact_is_empty(self, contacts, scheduler, clock):
        """Test that sessions do not share history."""
        first = ChatSession(contacts[0], scheduler, clock=clock)
        first.send_message("hello")
        scheduler.advance(AUTO_REPLY_DELAY)

        second = ChatSession(contacts[1], scheduler, clock=clock)
        assert second.messages == []
        assert second.contact == contacts[1]
        assert len(first.messages) == 2

    def test_reopening_same_contact_starts_empty(self, contact, scheduler, clock):
        """Test that a new session for the same contact starts fresh."""
        first = ChatSession(contact, scheduler, clock=clock)
        first.send_message("hello")
        first.close()

        again = ChatSession(contact, scheduler, clock=clock)
        assert again.messages == []
