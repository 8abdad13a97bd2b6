import json
import logging
import os

from config import (COLUMN_MODES, DEFAULT_DAY_COLUMN_MODE, DEFAULT_USER_TIMEZONE,
                    SETTINGS_FILE)
from error_messages import SettingsError

logger = logging.getLogger(__name__)

def load_settings():
    """설정 파일(settings.json)을 읽어와서 딕셔너리로 반환합니다."""
    if os.path.exists(SETTINGS_FILE):
        with open(SETTINGS_FILE, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"설정 파일이 손상되어 기본값을 사용합니다: {SETTINGS_FILE}")
                return {} # 파일이 손상되었을 경우 빈 딕셔너리 반환
    return {} # 파일이 없을 경우 빈 딕셔너리 반환

def save_settings(data):
    """설정 데이터(딕셔너리)를 settings.json 파일에 저장합니다."""
    try:
        with open(SETTINGS_FILE, "w") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        raise SettingsError.from_catalog('SETTINGS_ERROR', detail=str(e)) from e

def get_day_layout_options(settings):
    """
    일간뷰 레이아웃 옵션을 설정에서 읽어 기본값과 합칩니다.

    Returns:
        dict: {'column_mode': str, 'user_timezone': str}

    Raises:
        SettingsError: column mode 값이 지원되지 않을 때
    """
    column_mode = settings.get("day_view_column_mode", DEFAULT_DAY_COLUMN_MODE)
    if column_mode not in COLUMN_MODES:
        raise SettingsError.from_catalog('INVALID_LAYOUT_MODE', detail=f"day_view_column_mode={column_mode!r}")

    return {
        'column_mode': column_mode,
        'user_timezone': settings.get("user_timezone", DEFAULT_USER_TIMEZONE),
    }
