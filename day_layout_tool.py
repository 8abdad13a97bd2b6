#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
일간뷰 레이아웃 확인 스크립트

사용법: python day_layout_tool.py events.json 2025-08-15
events.json 은 provider 이벤트 목록 (start/end 에 dateTime 또는 date).
결과는 이벤트 id -> 사각형(퍼센트) JSON 으로 출력되고, 종일 이벤트는 따로 나열됩니다.
"""

import datetime
import json
import logging
import sys

from date_utils import (get_day_window, get_events_for_day, resolve_timezone,
                        split_all_day_events, to_timed_events)
from error_messages import CalendarError, ErrorMessages
from logger_config import setup_logger
from settings_manager import get_day_layout_options, load_settings
from views.layout_calculator import calculate_day_event_layout

logger = logging.getLogger(__name__)

def build_day_view(provider_events, day, settings):
    """
    provider 이벤트로부터 하루치 일간뷰 데이터를 만듭니다.

    Returns:
        dict: {'layout': {id: rect}, 'all_day': [id, ...], 'event_count': int}
    """
    options = get_day_layout_options(settings)
    user_tz = resolve_timezone(options['user_timezone'])
    day_start, day_end = get_day_window(day, user_tz)

    events = to_timed_events(provider_events, user_tz)
    day_events = get_events_for_day(events, day_start, day_end)
    timed_events, all_day_events = split_all_day_events(day_events)

    layout = calculate_day_event_layout(timed_events, day_start, day_end, options['column_mode'])
    logger.info(f"{day}: 시간 이벤트 {len(timed_events)}개, 종일 이벤트 {len(all_day_events)}개")

    return {
        'layout': layout,
        'all_day': [e['id'] for e in all_day_events],
        'event_count': len(day_events),
    }

def main(argv=None):
    """메인 실행 함수"""
    argv = sys.argv[1:] if argv is None else argv
    setup_logger()

    if len(argv) != 2:
        print(__doc__)
        return 2

    events_path, day_text = argv
    try:
        day = datetime.date.fromisoformat(day_text)
        with open(events_path, "r", encoding="utf-8") as f:
            provider_events = json.load(f)
        if not isinstance(provider_events, list):
            logger.error(f"이벤트 파일은 JSON 배열이어야 합니다: {events_path}")
            return 1
        result = build_day_view(provider_events, day, load_settings())
    except CalendarError as e:
        logger.error(f"일간뷰 레이아웃 실패: {e}")
        print(ErrorMessages.format_suggestions(e.suggestions))
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"입력을 읽을 수 없습니다: {e}")
        return 1

    print(json.dumps(result, indent=4))
    return 0

if __name__ == "__main__":
    sys.exit(main())
