"""
로깅 설정 모듈
모든 디버그 출력을 통합 관리
"""
import logging
import sys

def setup_logger(level=logging.INFO):
    """로거 설정"""
    root_logger = logging.getLogger()

    # 이미 핸들러가 있으면 중복 추가 방지
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '[%(levelname)s] %(name)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    return root_logger


# 전역 로거 초기화
setup_logger()
