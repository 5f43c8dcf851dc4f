"""
데이터 로더 모듈

학생 점수 엑셀 파일(学号, 学生, 性别, 客观题得分, 主观题得分, 对分易总分, 平时分)을 읽어
명단 DataFrame 으로 변환하는 기능을 제공합니다.
"""

import logging
from typing import NamedTuple, Union

import pandas as pd

from score_adjust.adjuster import compute_final_score
from score_adjust.config import (
    MIN_COLUMNS,
    ROSTER_COLUMNS,
    NUMERIC_COLUMNS,
    OUTPUT_SUFFIX,
    DEFAULT_EXTENSION,
)
from score_adjust.errors import FileReadError, MalformedRowError

logger = logging.getLogger(__name__)


class ParseFailure(NamedTuple):
    """숫자로 해석하지 못한 셀 값"""
    raw: object


def parse_score(value) -> Union[float, ParseFailure]:
    """
    셀 값을 점수(float)로 변환합니다.

    Args:
        value: 엑셀 셀 값 (문자열, 숫자, NaN)

    Returns:
        Union[float, ParseFailure]: 변환된 점수 또는 변환 실패 표시

    Examples:
        >>> parse_score("85.5")
        85.5
        >>> parse_score("결석")
        ParseFailure(raw='결석')
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ParseFailure(value)
    text = str(value)
    # 공백·밑줄이 섞인 값은 숫자로 보지 않는다
    if text != text.strip() or '_' in text:
        return ParseFailure(value)
    try:
        return float(text)
    except ValueError:
        return ParseFailure(value)


def count_populated_columns(row: pd.Series) -> int:
    """
    행에서 마지막으로 값이 있는 셀까지의 칸 수를 반환합니다.

    중간의 빈 셀도 칸 수에 포함합니다.

    Examples:
        >>> count_populated_columns(pd.Series(['1', None, '3', None]))
        3
    """
    populated = [i for i, v in enumerate(row.tolist()) if not pd.isna(v) and str(v) != '']
    return populated[-1] + 1 if populated else 0


def read_raw_sheet(source) -> pd.DataFrame:
    """
    엑셀 파일의 첫 번째 시트를 문자열 DataFrame 으로 읽습니다.

    확장자가 .xls 여도 내용이 xlsx 형식이면 읽을 수 있도록 파일 핸들로 전달합니다.
    'NA', '#N/A', 'None' 같은 셀 문자열은 결측값으로 바꾸지 않고 그대로 읽습니다.

    Args:
        source: 파일 경로 또는 업로드된 파일 객체

    Raises:
        FileReadError: 파일을 열거나 파싱할 수 없을 때
    """
    name = getattr(source, 'name', source)
    try:
        if hasattr(source, 'read'):
            return pd.read_excel(source, sheet_name=0, header=None, engine='openpyxl', dtype=str,
                                 keep_default_na=False, na_filter=False)
        with open(source, 'rb') as fh:
            return pd.read_excel(fh, sheet_name=0, header=None, engine='openpyxl', dtype=str,
                                 keep_default_na=False, na_filter=False)
    except Exception as e:
        raise FileReadError(f"'{name}' 파일을 읽을 수 없습니다: {e}") from e


def rows_to_roster(raw: pd.DataFrame, strict: bool = False) -> pd.DataFrame:
    """
    원시 시트 데이터를 명단 DataFrame 으로 변환합니다.

    Args:
        raw (pd.DataFrame): header=None 으로 읽은 시트 (첫 행은 헤더)
        strict (bool): True 이면 숫자 변환 실패 시 MalformedRowError 발생,
            False 이면 0.0 으로 대체하고 경고 로그를 남깁니다.

    Returns:
        pd.DataFrame: ROSTER_COLUMNS + Final_Score 컬럼을 가진 명단

    Raises:
        MalformedRowError: strict=True 이고 숫자 셀을 해석할 수 없을 때
    """
    records = []

    for r_idx in range(1, len(raw)):
        row = raw.iloc[r_idx]
        if count_populated_columns(row) < MIN_COLUMNS:
            logger.debug("%d행 건너뜀: 열 개수 부족", r_idx + 1)
            continue

        values = row.tolist()[:MIN_COLUMNS]
        record = {}
        for col_name, val in zip(ROSTER_COLUMNS, values):
            if col_name not in NUMERIC_COLUMNS:
                record[col_name] = '' if pd.isna(val) else str(val)
                continue

            parsed = parse_score(val)
            if isinstance(parsed, ParseFailure):
                if strict:
                    raise MalformedRowError(r_idx + 1, col_name, parsed.raw)
                logger.warning("%d행 '%s' 값 %r 을(를) 0.0 으로 처리합니다.", r_idx + 1, col_name, parsed.raw)
                parsed = 0.0
            record[col_name] = parsed
        records.append(record)

    roster = pd.DataFrame(records, columns=ROSTER_COLUMNS)
    roster[NUMERIC_COLUMNS] = roster[NUMERIC_COLUMNS].astype(float)
    roster['Final_Score'] = compute_final_score(roster['Peer_Review_Total'], roster['Daily_Score'])
    return roster


def load_roster(source, strict: bool = False) -> pd.DataFrame:
    """
    학생 점수 엑셀 파일을 읽어 명단을 반환합니다.

    Args:
        source: 입력 파일 경로 또는 업로드된 파일 객체
        strict (bool): 숫자 셀 변환 실패를 오류로 처리할지 여부

    Returns:
        pd.DataFrame: 명단 (원본 행 순서)

    Raises:
        FileReadError: 파일을 읽을 수 없을 때
        MalformedRowError: strict=True 이고 잘못된 숫자 셀이 있을 때

    Examples:
        >>> roster = load_roster('scores.xlsx')
        >>> print(roster.columns.tolist())
        ['ID', 'Name', 'Gender', 'Objective_Score', 'Subjective_Score', 'Peer_Review_Total', 'Daily_Score', 'Final_Score']
    """
    raw = read_raw_sheet(source)
    roster = rows_to_roster(raw, strict=strict)
    logger.info("'%s' 에서 %d명 로드", getattr(source, 'name', source), len(roster))
    return roster


def make_output_filename(input_name: str) -> str:
    """
    입력 파일명에서 결과 파일명을 만듭니다.

    Examples:
        >>> make_output_filename("scores.xlsx")
        'scores_adjusted.xlsx'
        >>> make_output_filename("scores.xls")
        'scores_adjusted.xls'
        >>> make_output_filename("scores")
        'scores_adjusted.xls'
    """
    ext = '.xlsx' if input_name.endswith('.xlsx') else DEFAULT_EXTENSION
    base = input_name[:-len(ext)] if input_name.endswith(ext) else input_name
    return f"{base}{OUTPUT_SUFFIX}{ext}"
