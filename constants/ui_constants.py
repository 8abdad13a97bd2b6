"""
UI 관련 상수 정의
일간뷰 레이아웃 크기, 여백, 비율 등을 중앙에서 관리
"""

# ============================================================================
# 시간/기간 상수
# ============================================================================
class Duration:
    MINUTES_PER_DAY = 1440  # 24 * 60


# ============================================================================
# 날짜/시간 형식 상수
# ============================================================================
class DateTimeFormat:
    TIME_SHORT = "%H:%M"


# ============================================================================
# 일간뷰 상수
# ============================================================================
class DayViewLayout:
    # 세로축 (퍼센트)
    MIN_EVENT_HEIGHT_PERCENT = 2    # 짧은 이벤트도 클릭 가능하도록 최소 높이
    FULL_PERCENT = 100

    # 겹침 순서
    STACK_ORDER_BASE = 10           # 시간 그리드 배경보다 위에 그려지도록

    # 픽셀 렌더링
    TIME_GRID_LEFT = 50             # 시간 그리드 왼쪽 여백
    HOUR_HEIGHT = 80                # 1시간 높이 (px)
    HORIZONTAL_EVENT_GAP = 2        # 나란히 놓인 이벤트 사이 간격
