# date_utils.py
"""
Helpers that prepare events for the day view: day boundaries, the
"touches this day" filter, provider payload conversion and display strings.
"""
import datetime
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as dateutil_parser

from config import DEFAULT_USER_TIMEZONE
from constants import DateTimeFormat
from error_messages import EventParseError

logger = logging.getLogger(__name__)


def resolve_timezone(tz_name):
    """Return a ZoneInfo for tz_name, falling back to the default timezone."""
    try:
        return ZoneInfo(tz_name or DEFAULT_USER_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"알 수 없는 시간대 '{tz_name}', {DEFAULT_USER_TIMEZONE} 사용")
        return ZoneInfo(DEFAULT_USER_TIMEZONE)


def get_day_window(day, tz=None):
    """Start and end instants of the calendar day: midnight to the next midnight."""
    day_start = datetime.datetime.combine(day, datetime.time.min, tzinfo=tz)
    day_end = day_start + datetime.timedelta(days=1)
    return day_start, day_end


def is_event_in_date_range(event, range_start, range_end):
    if event.get('allDay', False):
        # 종일 이벤트의 end 는 다음 날 0시 (포함하지 않음)
        return event['start'] < range_end and event['end'] > range_start
    # 경계에 닿기만 해도 포함
    return event['start'] <= range_end and event['end'] >= range_start


def get_events_for_day(events, day_start, day_end):
    return [e for e in events if is_event_in_date_range(e, day_start, day_end)]


def split_all_day_events(events):
    """Split events into (timed, all_day); all-day events are listed outside the time grid."""
    timed_events, all_day_events = [], []
    for event in events:
        if event.get('allDay', False):
            all_day_events.append(event)
        else:
            timed_events.append(event)
    return timed_events, all_day_events


def _parse_provider_time(time_info, user_tz):
    if 'dateTime' in time_info:
        parsed = dateutil_parser.isoparse(time_info['dateTime'])
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=user_tz)
        return parsed.astimezone(user_tz)
    naive = datetime.datetime.fromisoformat(time_info['date'])
    return naive.replace(tzinfo=user_tz)


def to_timed_event(provider_event, user_tz):
    """
    Convert a provider event ({'start': {'dateTime'|'date': ...}, ...}) into
    the dict the day layout consumes, with instants in user_tz.

    Raises:
        EventParseError: if the start/end payload is missing or malformed.
    """
    if not isinstance(provider_event, dict):
        raise EventParseError.from_catalog(
            'EVENT_PARSE_ERROR', detail=f"expected an event object, got {type(provider_event).__name__}")

    try:
        start_info = provider_event['start']
        end_info = provider_event['end']
        start_dt = _parse_provider_time(start_info, user_tz)
        end_dt = _parse_provider_time(end_info, user_tz)
    except (KeyError, TypeError, ValueError) as e:
        raise EventParseError.from_catalog(
            'EVENT_PARSE_ERROR', detail=f"id={provider_event.get('id')}: {e}") from e

    return {
        'id': provider_event.get('id'),
        'summary': provider_event.get('summary', ''),
        'start': start_dt,
        'end': end_dt,
        'allDay': 'date' in start_info,
    }


def to_timed_events(provider_events, user_tz):
    """Convert a batch of provider events, skipping and logging the ones that fail to parse."""
    converted = []
    for provider_event in provider_events:
        try:
            converted.append(to_timed_event(provider_event, user_tz))
        except EventParseError as e:
            logger.warning(f"일간뷰 이벤트 시간 파싱 오류: {e}")
    return converted


def get_event_time_string(start_dt, end_dt, all_day):
    if all_day:
        return "All day"

    if start_dt.date() == end_dt.date():
        return f"{start_dt.strftime(DateTimeFormat.TIME_SHORT)} - {end_dt.strftime(DateTimeFormat.TIME_SHORT)}"

    return (f"{start_dt.month}/{start_dt.day} {start_dt.strftime(DateTimeFormat.TIME_SHORT)} - "
            f"{end_dt.month}/{end_dt.day} {end_dt.strftime(DateTimeFormat.TIME_SHORT)}")


def format_event_duration(start_dt, end_dt):
    total_minutes = int((end_dt - start_dt).total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)

    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"
