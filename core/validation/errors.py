"""
검증 오류 타입

모든 검증 오류는 TransactionValidationError(ValueError)를 상속.
호출자는 상위 클래스 하나로 잡거나 분류별로 구분해 처리할 수 있음.

분류:
- RequiredFieldError: 필수 필드 누락 (asset, value, account, source/distribute)
- FormatError: 형식 오류 (자산 코드, 거래 코드, 외부 계정)
- AssetMismatchError: 외부 계정 자산 ≠ 거래 자산
- BoundError: 길이/크기 제한 초과, 빈 메타데이터 키
"""


class TransactionValidationError(ValueError):
    """거래 입력 검증 실패"""

    def wrap(self, prefix: str) -> "TransactionValidationError":
        """같은 분류를 유지한 채 메시지 앞에 컨텍스트 추가

        예: "value must be greater than 0"
            → "invalid send operation: value must be greater than 0"
        """
        return type(self)(f"{prefix}: {self}")


class RequiredFieldError(TransactionValidationError):
    """필수 필드 누락"""

    pass


class FormatError(TransactionValidationError):
    """형식 오류"""

    pass


class AssetMismatchError(TransactionValidationError):
    """외부 계정 자산 코드 불일치"""

    pass


class BoundError(TransactionValidationError):
    """길이/크기 제한 위반"""

    pass
