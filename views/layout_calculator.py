# views/layout_calculator.py
import logging

from config import COLUMN_MODE_CLUSTER, COLUMN_MODES, DEFAULT_DAY_COLUMN_MODE
from constants import Duration, DayViewLayout
from error_messages import (InvalidDayWindowError, InvalidEventRangeError,
                            LayoutConfigurationError)

logger = logging.getLogger(__name__)


def _overlaps(start_a, end_a, start_b, end_b):
    # 끝과 시작이 맞닿은 경우는 겹침이 아님
    return start_a < end_b and end_a > start_b


class DayLayoutCalculator:
    """
    Lays out the timed events of a single day side by side.

    Events are dicts with 'id', 'start', 'end' (datetime) and an optional
    'allDay' flag. All-day events are skipped; the caller lists them
    separately. Each remaining event gets a rect dict of percentages:
    top/height on the 24-hour axis, left/width from its column, and a
    stack_order for painting.
    """

    def __init__(self, events, day_start, day_end, column_mode=DEFAULT_DAY_COLUMN_MODE):
        if column_mode not in COLUMN_MODES:
            raise LayoutConfigurationError.from_catalog(
                'INVALID_LAYOUT_MODE', detail=f"column_mode={column_mode!r}")
        if day_end <= day_start:
            raise InvalidDayWindowError.from_catalog(
                'INVALID_DAY_WINDOW', detail=f"{day_start} - {day_end}")

        self.day_start = day_start
        self.day_end = day_end
        self.column_mode = column_mode

        time_events = [e for e in events if not e.get('allDay', False)]
        for event in time_events:
            if self._get_start_dt(event) > self._get_end_dt(event):
                raise InvalidEventRangeError.from_catalog(
                    'INVALID_EVENT_RANGE', detail=f"id={event.get('id')}")

        # 시작 오름차순, 같은 시작이면 늦게 끝나는 이벤트 먼저 (안정 정렬이라 나머지는 입력 순서 유지)
        time_events.sort(key=self._get_end_dt, reverse=True)
        time_events.sort(key=self._get_start_dt)
        self.time_events = time_events

        self.event_infos = []
        self.total_columns = 0

    def _get_start_dt(self, event):
        return event['start']

    def _get_end_dt(self, event):
        return event['end']

    def _minutes_from_day_start(self, dt):
        clamped = min(max(dt, self.day_start), self.day_end)
        return int((clamped - self.day_start).total_seconds() // 60)

    def calculate(self):
        if not self.time_events:
            self.event_infos = []
            self.total_columns = 0
            return {}

        self.event_infos = [self._build_event_info(event) for event in self.time_events]

        self.total_columns = self._assign_columns(self.event_infos)
        self._count_overlaps(self.event_infos)

        if self.column_mode == COLUMN_MODE_CLUSTER:
            for group in self._group_overlapping_events_for_layout(self.event_infos):
                group_columns = 1 + max(info['column_index'] for info in group)
                for info in group:
                    info['group_columns'] = group_columns
        else:
            for info in self.event_infos:
                info['group_columns'] = self.total_columns

        logger.debug(
            "Day layout: %d timed events, %d columns (%s mode)",
            len(self.event_infos), self.total_columns, self.column_mode)

        return {info['id']: self._to_rect(info) for info in self.event_infos}

    def _build_event_info(self, event):
        start_minutes = self._minutes_from_day_start(self._get_start_dt(event))
        end_minutes = self._minutes_from_day_start(self._get_end_dt(event))
        return {
            'id': event['id'],
            'start_minutes': start_minutes,
            'end_minutes': end_minutes,
            'column_index': 0,
            'max_overlap': 1,
            'group_columns': 1,
        }

    def _assign_columns(self, infos):
        """Greedy packing: each event takes the lowest column with no overlapping event placed so far."""
        columns = []
        for info in infos:
            start, end = info['start_minutes'], info['end_minutes']
            for index, placed in enumerate(columns):
                if not any(_overlaps(start, end, s, e) for s, e in placed):
                    break
            else:
                index = len(columns)
                columns.append([])
            columns[index].append((start, end))
            info['column_index'] = index
        return max(1, len(columns))

    def _count_overlaps(self, infos):
        for info in infos:
            overlapping = sum(
                1 for other in infos
                if other is not info and _overlaps(
                    info['start_minutes'], info['end_minutes'],
                    other['start_minutes'], other['end_minutes']))
            info['max_overlap'] = overlapping + 1

    def _group_overlapping_events_for_layout(self, infos):
        """Connected groups of events linked by strict overlap, the same test the packing uses."""
        groups = []
        for info in infos:
            merged = [info]
            remaining = []
            for group in groups:
                if any(_overlaps(info['start_minutes'], info['end_minutes'],
                                 other['start_minutes'], other['end_minutes']) for other in group):
                    merged.extend(group)
                else:
                    remaining.append(group)
            remaining.append(merged)
            groups = remaining
        return groups

    def _to_rect(self, info):
        minutes_per_day = Duration.MINUTES_PER_DAY
        top = info['start_minutes'] / minutes_per_day * DayViewLayout.FULL_PERCENT
        height = (info['end_minutes'] - info['start_minutes']) / minutes_per_day * DayViewLayout.FULL_PERCENT

        width = DayViewLayout.FULL_PERCENT / info['group_columns']
        left = info['column_index'] * width

        return {
            'top': top,
            'height': max(height, DayViewLayout.MIN_EVENT_HEIGHT_PERCENT),
            'left': left,
            'width': width,
            'stack_order': info['column_index'] + DayViewLayout.STACK_ORDER_BASE,
        }


def calculate_day_event_layout(events, day_start, day_end, column_mode=DEFAULT_DAY_COLUMN_MODE):
    """Map event id -> rect dict for the timed events of one day. See DayLayoutCalculator."""
    return DayLayoutCalculator(events, day_start, day_end, column_mode).calculate()
