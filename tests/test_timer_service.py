"""Tests for the countdown engine and its status transitions."""

import unittest
from datetime import datetime

from PySide6.QtCore import QCoreApplication

from BackEnd.core.session import SessionStatus
from BackEnd.core.selector import ERR_ZERO
from BackEnd.repos.history_repo import HISTORY_KEY, HistoryStore
from BackEnd.services.timer_service import TimerService
from fakes import BrokenStore, FakeTimer, MemoryStore

app = QCoreApplication.instance() or QCoreApplication([])


class TimerServiceCase(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.history = HistoryStore(self.store)
        self.timer = FakeTimer()
        self.svc = TimerService(self.history, timer=self.timer)
        self.states = []
        self.remaining = []
        self.history_events = []
        self.svc.state_changed.connect(self.states.append)
        self.svc.remaining_changed.connect(self.remaining.append)
        self.svc.history_changed.connect(lambda: self.history_events.append(True))

    def stored_statuses(self):
        return [r["status"] for r in self.store.data.get(HISTORY_KEY, [])]


class TestStart(TimerServiceCase):

    def test_start_from_idle(self):
        self.assertEqual(self.svc.state, "idle")
        self.assertTrue(self.svc.start())
        self.assertTrue(self.svc.running)
        self.assertTrue(self.timer.isActive())
        self.assertEqual(self.svc.remaining, 65)
        self.assertEqual(self.svc.total_duration, 65)
        head = self.history.head
        self.assertEqual((head.duration, head.status, head.label), (65, SessionStatus.ACTIVE, "01:05"))
        self.assertEqual(self.stored_statuses(), ["active"])
        self.assertEqual(self.states, ["active"])

    def test_start_matches_selected_duration(self):
        for m in (0, 1, 30, 60):
            for s in (0, 5, 55, 60):
                svc = TimerService(HistoryStore(MemoryStore()), timer=FakeTimer())
                svc.select_minutes(m)
                svc.select_seconds(s)
                svc.start()
                expected = m * 60 + s
                self.assertEqual(svc.remaining, expected)
                self.assertEqual(svc.total_duration, expected)
                self.assertEqual(svc.history.head.duration, expected)
                self.assertEqual(svc.history.head.status, SessionStatus.ACTIVE)

    def test_preset_start(self):
        self.svc.select_preset("5m")
        self.svc.start()
        self.assertEqual(self.svc.total_duration, 300)
        self.assertEqual(self.history.head.label, "5m")

    def test_custom_start(self):
        self.assertIsNone(self.svc.set_custom_time(2, 30))
        self.svc.start()
        self.assertEqual(self.svc.total_duration, 150)
        self.assertEqual(self.history.head.label, "Custom")

    def test_rejected_custom_time_changes_nothing(self):
        selections = []
        self.svc.selection_changed.connect(lambda: selections.append(True))
        self.assertEqual(self.svc.set_custom_time(0, 0), ERR_ZERO)
        self.assertEqual(selections, [])
        self.assertEqual(len(self.history), 0)
        self.assertEqual(self.svc.selector.total_seconds(), 65)

    def test_start_ignored_while_active_or_paused(self):
        self.svc.start()
        self.assertFalse(self.svc.start())
        self.svc.pause()
        self.assertFalse(self.svc.start())
        self.assertEqual(len(self.history), 1)

    def test_restart_after_finish_and_cancel(self):
        self.svc.select_minutes(0)
        self.svc.select_seconds(5)
        self.svc.start()
        self.timer.fire(5)
        self.assertEqual(self.svc.state, "finished")
        self.assertTrue(self.svc.start())
        self.svc.cancel()
        self.assertTrue(self.svc.start())
        self.assertEqual(len(self.history), 3)
        self.assertEqual(self.stored_statuses(), ["active", "cancelled", "finished"])

    def test_history_order_and_old_entries_untouched(self):
        for _ in range(4):
            self.svc.start()
            self.svc.cancel()
        self.svc.start()
        self.svc.pause()
        sessions = self.history.sessions
        self.assertEqual(len(sessions), 5)
        self.assertEqual(sessions[0].status, SessionStatus.PAUSED)
        self.assertTrue(all(s.status == SessionStatus.CANCELLED for s in sessions[1:]))


class TestTick(TimerServiceCase):

    def test_counts_down_to_finished(self):
        self.svc.start()
        self.timer.fire(64)
        self.assertEqual(self.svc.remaining, 1)
        self.assertEqual(self.history.head.status, SessionStatus.ACTIVE)
        self.timer.fire()
        self.assertEqual(self.svc.remaining, 0)
        self.assertFalse(self.svc.running)
        self.assertFalse(self.timer.isActive())
        self.assertEqual(self.history.head.status, SessionStatus.FINISHED)
        self.assertEqual(self.stored_statuses(), ["finished"])

    def test_ticks_at_zero_finish_once(self):
        self.svc.select_minutes(0)
        self.svc.select_seconds(5)
        self.svc.start()
        for _ in range(10):
            self.svc.tick()
        self.assertEqual(self.svc.remaining, 0)
        self.assertEqual(self.states.count("finished"), 1)
        self.assertTrue(all(r >= 0 for r in self.remaining))

    def test_zero_duration_finishes_on_first_tick(self):
        self.svc.select_minutes(0)
        self.svc.select_seconds(0)
        self.svc.start()
        self.assertEqual(self.history.head.status, SessionStatus.ACTIVE)
        self.timer.fire()
        self.assertEqual(self.svc.state, "finished")
        self.assertEqual(self.history.head.status, SessionStatus.FINISHED)

    def test_tick_while_paused_is_noop(self):
        self.svc.start()
        self.svc.pause()
        self.svc.tick()
        self.assertEqual(self.svc.remaining, 65)


class TestPauseResume(TimerServiceCase):

    def test_pause_resume_preserves_remaining(self):
        self.svc.start()
        self.timer.fire(10)
        self.assertTrue(self.svc.pause())
        self.assertFalse(self.timer.isActive())
        self.assertEqual(self.svc.remaining, 55)
        self.assertEqual(self.history.head.status, SessionStatus.PAUSED)
        self.timer.fire(3)
        self.assertTrue(self.svc.resume())
        self.assertEqual(self.svc.remaining, 55)
        self.assertTrue(self.svc.running)
        self.assertEqual(self.history.head.status, SessionStatus.ACTIVE)
        self.assertEqual(len(self.history), 1)
        self.assertEqual(self.states, ["active", "paused", "active"])

    def test_pause_requires_running(self):
        self.assertFalse(self.svc.pause())
        self.assertEqual(len(self.history), 0)

    def test_resume_guards(self):
        self.assertFalse(self.svc.resume())
        self.svc.start()
        self.assertFalse(self.svc.resume())
        self.svc.cancel()
        self.assertFalse(self.svc.resume())
        self.assertEqual(self.history.head.status, SessionStatus.CANCELLED)

    def test_single_live_timer_after_resume(self):
        self.svc.start()
        self.svc.pause()
        self.svc.resume()
        self.timer.fire()
        self.assertEqual(self.svc.remaining, 64)


class TestCancel(TimerServiceCase):

    def test_cancel_active(self):
        self.svc.start()
        self.timer.fire(3)
        self.assertTrue(self.svc.cancel())
        self.assertEqual((self.svc.remaining, self.svc.total_duration, self.svc.running), (0, 0, False))
        self.assertFalse(self.timer.isActive())
        self.assertEqual(self.stored_statuses(), ["cancelled"])

    def test_cancel_paused(self):
        self.svc.start()
        self.svc.pause()
        self.assertTrue(self.svc.cancel())
        self.assertEqual((self.svc.remaining, self.svc.total_duration, self.svc.running), (0, 0, False))
        self.assertEqual(self.history.head.status, SessionStatus.CANCELLED)

    def test_cancel_when_idle_or_finished_is_noop(self):
        self.assertFalse(self.svc.cancel())
        self.svc.select_minutes(0)
        self.svc.select_seconds(0)
        self.svc.start()
        self.timer.fire()
        self.assertFalse(self.svc.cancel())
        self.assertEqual(self.history.head.status, SessionStatus.FINISHED)


class TestHistoryAndViews(TimerServiceCase):

    def test_clear_history(self):
        self.svc.start()
        self.svc.cancel()
        self.history_events.clear()
        self.svc.clear_history()
        self.assertEqual(self.svc.recent_history(), ())
        self.assertNotIn(HISTORY_KEY, self.store.data)
        self.assertEqual(self.history_events, [True])
        self.assertEqual(HistoryStore(self.store).load(), ())

    def test_selected_time(self):
        self.assertEqual(self.svc.selected_time(), 65)
        self.svc.select_preset("10m")
        self.svc.start()
        self.svc.select_minutes(1)
        self.assertEqual(self.svc.selected_time(), 600)

    def test_progress_and_finish_time(self):
        self.assertEqual(self.svc.progress(), 0.0)
        self.svc.select_preset("1m")
        self.svc.start()
        self.timer.fire(30)
        self.assertAlmostEqual(self.svc.progress(), 0.5)
        now = datetime(2026, 1, 1, 9, 59, 45)
        self.assertEqual(self.svc.estimated_finish_time(now), "10:00")

    def test_broken_storage_keeps_timer_working(self):
        svc = TimerService(HistoryStore(BrokenStore()), timer=FakeTimer())
        with self.assertLogs("BackEnd.repos.history_repo", level="ERROR"):
            self.assertTrue(svc.start())
            self.assertTrue(svc.pause())
            self.assertTrue(svc.cancel())
        self.assertEqual(svc.history.head.status, SessionStatus.CANCELLED)


if __name__ == "__main__":
    unittest.main()
