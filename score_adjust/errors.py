"""
예외 모듈

성적 조정 파이프라인에서 발생하는 오류 유형을 정의합니다.
"""


class ScoreAdjustError(Exception):
    """모든 성적 조정 오류의 기본 클래스"""


class InputMissingError(ScoreAdjustError):
    """입력 파일이 지정되지 않았을 때"""


class FileReadError(ScoreAdjustError):
    """입력 파일을 열거나 파싱할 수 없을 때"""


class FileWriteError(ScoreAdjustError):
    """결과 파일을 저장할 수 없을 때"""


class InvalidInputError(ScoreAdjustError):
    """입력 데이터가 계산에 사용할 수 없는 상태일 때"""


class EmptyRosterError(InvalidInputError):
    """유효한 학생 행이 하나도 없을 때"""

    def __init__(self, message: str = "유효한 학생 데이터가 없습니다."):
        super().__init__(message)


class MalformedRowError(InvalidInputError):
    """strict 모드에서 숫자 셀을 해석할 수 없을 때"""

    def __init__(self, row: int, column: str, raw):
        self.row = row
        self.column = column
        self.raw = raw
        super().__init__(f"{row}행 '{column}' 값을 숫자로 변환할 수 없습니다: {raw!r}")
