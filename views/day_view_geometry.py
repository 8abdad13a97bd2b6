# views/day_view_geometry.py
from PyQt6.QtCore import QRectF

from constants import DayViewLayout


def day_canvas_height(hour_height=DayViewLayout.HOUR_HEIGHT):
    return hour_height * 24


def layout_rect_to_qrectf(rect, canvas_width, canvas_height,
                          left_offset=DayViewLayout.TIME_GRID_LEFT,
                          gap=DayViewLayout.HORIZONTAL_EVENT_GAP):
    """Translate a percentage rect from the day layout into pixel geometry on the event canvas."""
    area_width = max(0.0, canvas_width - left_offset)

    x = left_offset + area_width * rect['left'] / DayViewLayout.FULL_PERCENT
    y = canvas_height * rect['top'] / DayViewLayout.FULL_PERCENT
    width = area_width * rect['width'] / DayViewLayout.FULL_PERCENT - gap
    height = canvas_height * rect['height'] / DayViewLayout.FULL_PERCENT

    return QRectF(x, y, max(width, 0.0), height)


def paint_order(layout):
    # 낮은 stack_order부터 그려야 오른쪽 컬럼이 위에 올라감
    return sorted(layout, key=lambda event_id: (layout[event_id]['stack_order'], layout[event_id]['top']))


def build_event_rects(layout, canvas_width, canvas_height, **kwargs):
    """Return [(event_id, QRectF)] in paint order, ready for hit testing and drawing."""
    return [
        (event_id, layout_rect_to_qrectf(layout[event_id], canvas_width, canvas_height, **kwargs))
        for event_id in paint_order(layout)
    ]
