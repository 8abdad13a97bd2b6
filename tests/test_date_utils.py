import datetime
import os
import sys
import unittest
from zoneinfo import ZoneInfo

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from date_utils import (format_event_duration, get_day_window, get_event_time_string,
                        get_events_for_day, is_event_in_date_range, resolve_timezone,
                        split_all_day_events, to_timed_event, to_timed_events)
from error_messages import EventParseError

UTC = datetime.timezone.utc


class TestDayWindow(unittest.TestCase):

    def test_naive_window_is_midnight_to_midnight(self):
        day_start, day_end = get_day_window(datetime.date(2025, 8, 15))

        self.assertEqual(day_start, datetime.datetime(2025, 8, 15, 0, 0))
        self.assertEqual(day_end, datetime.datetime(2025, 8, 16, 0, 0))

    def test_aware_window_uses_given_timezone(self):
        seoul = ZoneInfo("Asia/Seoul")
        day_start, day_end = get_day_window(datetime.date(2025, 8, 15), seoul)

        self.assertEqual(day_start.tzinfo, seoul)
        self.assertEqual(day_start.astimezone(UTC), datetime.datetime(2025, 8, 14, 15, 0, tzinfo=UTC))
        self.assertEqual(day_end - day_start, datetime.timedelta(days=1))


class TestDayEventFilter(unittest.TestCase):

    def setUp(self):
        self.day_start, self.day_end = get_day_window(datetime.date(2025, 8, 15))

    def _event(self, event_id, start, end, all_day=False):
        return {'id': event_id, 'start': start, 'end': end, 'allDay': all_day}

    def test_range_touch_is_inclusive(self):
        ends_at_midnight = self._event('a', datetime.datetime(2025, 8, 14, 23), self.day_start)
        self.assertTrue(is_event_in_date_range(ends_at_midnight, self.day_start, self.day_end))

    def test_get_events_for_day(self):
        events = [
            self._event('yesterday', datetime.datetime(2025, 8, 14, 9), datetime.datetime(2025, 8, 14, 10)),
            self._event('today', datetime.datetime(2025, 8, 15, 9), datetime.datetime(2025, 8, 15, 10)),
            self._event('overnight', datetime.datetime(2025, 8, 14, 22), datetime.datetime(2025, 8, 15, 2)),
            self._event('tomorrow', datetime.datetime(2025, 8, 16, 9), datetime.datetime(2025, 8, 16, 10)),
        ]

        day_events = get_events_for_day(events, self.day_start, self.day_end)
        self.assertEqual([e['id'] for e in day_events], ['today', 'overnight'])

    def test_all_day_end_is_exclusive(self):
        yesterday = self._event('yesterday', datetime.datetime(2025, 8, 14), self.day_start, all_day=True)
        today = self._event('today', self.day_start, self.day_end, all_day=True)
        tomorrow = self._event('tomorrow', self.day_end, datetime.datetime(2025, 8, 17), all_day=True)

        day_events = get_events_for_day([yesterday, today, tomorrow], self.day_start, self.day_end)
        self.assertEqual([e['id'] for e in day_events], ['today'])

    def test_multi_day_all_day_event_covers_each_day(self):
        trip = self._event('trip', datetime.datetime(2025, 8, 14), datetime.datetime(2025, 8, 17), all_day=True)

        for day in (14, 15, 16):
            day_start, day_end = get_day_window(datetime.date(2025, 8, day))
            self.assertTrue(is_event_in_date_range(trip, day_start, day_end))
        day_start, day_end = get_day_window(datetime.date(2025, 8, 17))
        self.assertFalse(is_event_in_date_range(trip, day_start, day_end))

    def test_split_all_day_events(self):
        events = [
            self._event('timed', datetime.datetime(2025, 8, 15, 9), datetime.datetime(2025, 8, 15, 10)),
            self._event('holiday', self.day_start, self.day_end, all_day=True),
            {'id': 'no_flag', 'start': self.day_start, 'end': self.day_end},
        ]

        timed, all_day = split_all_day_events(events)
        self.assertEqual([e['id'] for e in timed], ['timed', 'no_flag'])
        self.assertEqual([e['id'] for e in all_day], ['holiday'])


class TestProviderConversion(unittest.TestCase):

    def setUp(self):
        self.user_tz = ZoneInfo("Asia/Seoul")

    def test_date_time_event_is_converted_to_user_timezone(self):
        event = to_timed_event({
            'id': 'evt-1',
            'summary': '주간 회의',
            'start': {'dateTime': '2025-08-15T00:00:00Z'},
            'end': {'dateTime': '2025-08-15T01:30:00Z'},
        }, self.user_tz)

        self.assertEqual(event['id'], 'evt-1')
        self.assertEqual(event['summary'], '주간 회의')
        self.assertFalse(event['allDay'])
        self.assertEqual(event['start'], datetime.datetime(2025, 8, 15, 9, 0, tzinfo=self.user_tz))
        self.assertEqual(event['start'].hour, 9)
        self.assertEqual(event['end'].minute, 30)

    def test_naive_date_time_is_read_in_user_timezone(self):
        event = to_timed_event({
            'id': 'evt-2',
            'start': {'dateTime': '2025-08-15T09:00:00'},
            'end': {'dateTime': '2025-08-15T10:00:00'},
        }, self.user_tz)

        self.assertEqual(event['start'].tzinfo, self.user_tz)
        self.assertEqual(event['start'].hour, 9)

    def test_date_only_event_is_all_day(self):
        event = to_timed_event({
            'id': 'evt-3',
            'start': {'date': '2025-08-15'},
            'end': {'date': '2025-08-16'},
        }, self.user_tz)

        self.assertTrue(event['allDay'])
        self.assertEqual(event['start'], datetime.datetime(2025, 8, 15, tzinfo=self.user_tz))

    def test_malformed_event_raises(self):
        with self.assertRaises(EventParseError) as ctx:
            to_timed_event({
                'id': 'broken',
                'start': {'dateTime': 'not a date'},
                'end': {'dateTime': '2025-08-15T10:00:00'},
            }, self.user_tz)
        self.assertEqual(ctx.exception.error_code, 'EVENT_001')

    def test_missing_end_raises(self):
        with self.assertRaises(EventParseError):
            to_timed_event({'id': 'no-end', 'start': {'date': '2025-08-15'}}, self.user_tz)

    def test_non_dict_entry_raises_parse_error(self):
        with self.assertRaises(EventParseError) as ctx:
            to_timed_event("oops", self.user_tz)
        self.assertIn("str", str(ctx.exception))

    def test_batch_conversion_skips_bad_events(self):
        events = to_timed_events([
            {'id': 'good', 'start': {'date': '2025-08-15'}, 'end': {'date': '2025-08-16'}},
            {'id': 'bad', 'start': {}, 'end': {}},
            "oops",
            None,
        ], self.user_tz)

        self.assertEqual([e['id'] for e in events], ['good'])

    def test_resolve_timezone_falls_back_to_default(self):
        self.assertEqual(resolve_timezone("Asia/Seoul"), ZoneInfo("Asia/Seoul"))
        self.assertEqual(resolve_timezone("Not/AZone"), ZoneInfo("UTC"))
        self.assertEqual(resolve_timezone(None), ZoneInfo("UTC"))


class TestDisplayStrings(unittest.TestCase):

    def test_same_day_time_string(self):
        text = get_event_time_string(
            datetime.datetime(2025, 8, 15, 9, 0), datetime.datetime(2025, 8, 15, 10, 30), False)
        self.assertEqual(text, "09:00 - 10:30")

    def test_multi_day_time_string(self):
        text = get_event_time_string(
            datetime.datetime(2025, 8, 15, 22, 0), datetime.datetime(2025, 8, 16, 2, 0), False)
        self.assertEqual(text, "8/15 22:00 - 8/16 02:00")

    def test_all_day_time_string(self):
        text = get_event_time_string(
            datetime.datetime(2025, 8, 15), datetime.datetime(2025, 8, 16), True)
        self.assertEqual(text, "All day")

    def test_format_event_duration(self):
        start = datetime.datetime(2025, 8, 15, 9, 0)
        self.assertEqual(format_event_duration(start, start + datetime.timedelta(minutes=45)), "45m")
        self.assertEqual(format_event_duration(start, start + datetime.timedelta(hours=2)), "2h")
        self.assertEqual(format_event_duration(start, start + datetime.timedelta(minutes=90)), "1h 30m")


if __name__ == '__main__':
    unittest.main()
