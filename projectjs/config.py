import logging
import os
from dotenv import load_dotenv

# .env 파일에서 환경 변수를 로드합니다.
load_dotenv()

# --- 로깅 설정 ---
LOG_LEVEL = os.getenv("PROJECTJS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# --- 스키마 설정 ---
# project.json 의 schema.name 으로 허용되는 값입니다 (대소문자 구분).
SCHEMA_NAMES = ("projectjs", "project.js")
TEMPLATE_SCHEMA_NAME = "project.js"

# --- 파일/경로 설정 ---
PROJECT_FILE_NAME = "project.json"
DEFAULT_BUILD_DIR = "build"
FILE_ENCODING = "utf-8"

# --- 레지스트리 기본값 ---
DEFAULT_COMPILE_SUFFIX = ".tmp"
PACKAGE_SEPARATOR = "."


def configure_logging(level: str = None) -> None:
    """기본 로깅 핸들러 설정 및 projectjs 로거 레벨 지정"""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("projectjs").setLevel(level)
