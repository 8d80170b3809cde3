"""
App layer: FastAPI 서버.

역할:
- 라우트 등록 (페이지, 폼 echo, 업로드, .well-known 정적 파일)
- 페이지 컴포넌트 조립 (components/)
- 요청 로그, SiteError → HTTP 응답 변환
"""
