# constants/__init__.py
"""
상수 패키지 초기화
모든 상수들을 중앙에서 관리하고 쉽게 import할 수 있도록 함
"""

from .ui_constants import Duration, DateTimeFormat, DayViewLayout

__all__ = [
    'Duration', 'DateTimeFormat', 'DayViewLayout',
]
