"""
공통 도메인 에러
엔티티/서비스에서 발생시키고 라우터에서 HTTP 응답으로 변환합니다.
"""


class DomainError(Exception):
    """도메인 규칙(불변식) 위반"""

    default_code = "ERR-IVD-VALUE"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message


class NotFoundError(Exception):
    """조회 대상이 존재하지 않음"""

    default_code = "ERR-NOT-FOUND"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
