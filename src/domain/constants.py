"""
Domain Constants: 사이트 전역 기본값.

default.yaml에 값이 없을 때 사용되는 값들.
"""

# =============================================================================
# Server
# =============================================================================
# ":8000" 과 동일 (모든 인터페이스, Docker 호환)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000

# =============================================================================
# Pages
# =============================================================================

HOME_TITLE = "My Website"
HOME_HEADING = "Home Page"
CONTACT_TITLE = "Contact Us"
CONTACT_HEADING = "Get in Touch"

# =============================================================================
# Upload
# =============================================================================
# POST /upload 의 file 필드 저장 위치 (실행 디렉토리 기준)

UPLOAD_OUTPUT_FILENAME = "uploaded_file.txt"

# =============================================================================
# Static
# =============================================================================
# /.well-known/<path> → <WELL_KNOWN_DIR>/<path>

WELL_KNOWN_PREFIX = "/.well-known"
WELL_KNOWN_DIR = "/"
