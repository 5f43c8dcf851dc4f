"""
엑셀 저장 모듈

조정된 명단을 원본과 같은 열 순서의 엑셀 파일로 저장합니다.
"""

import logging
from io import BytesIO

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, Border, Side
from openpyxl.utils import get_column_letter

from score_adjust.config import SHEET_NAME, OUTPUT_HEADERS
from score_adjust.errors import FileWriteError

logger = logging.getLogger(__name__)


def roster_to_rows(roster: pd.DataFrame) -> list:
    """
    명단을 엑셀에 쓸 행 리스트로 변환합니다.

    평시점수는 소수점 0자리, 총점은 1자리 문자열로 쓰고 나머지 점수는 그대로 둡니다.

    Examples:
        >>> df = pd.DataFrame([{'ID': '1', 'Name': '张三', 'Gender': '男', 'Objective_Score': 30.0,
        ...     'Subjective_Score': 40.5, 'Peer_Review_Total': 50.0, 'Daily_Score': 91.6667, 'Final_Score': 75.0}])
        >>> roster_to_rows(df)
        [['1', '张三', '男', 30.0, 40.5, 50.0, '92', '75.0']]
    """
    rows = []
    for _, r in roster.iterrows():
        rows.append([
            r['ID'],
            r['Name'],
            r['Gender'],
            float(r['Objective_Score']),
            float(r['Subjective_Score']),
            float(r['Peer_Review_Total']),
            f"{r['Daily_Score']:.0f}",
            f"{r['Final_Score']:.1f}",
        ])
    return rows


def build_workbook(roster: pd.DataFrame) -> Workbook:
    """
    헤더(学号 ... 总分)와 학생 행으로 구성된 워크북을 생성합니다.

    Args:
        roster (pd.DataFrame): adjust_scores 결과 명단

    Returns:
        Workbook: openpyxl 워크북
    """
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    thin_border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )
    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center")

    # 헤더
    for col_num, header in enumerate(OUTPUT_HEADERS, 1):
        cell = ws.cell(row=1, column=col_num, value=header)
        cell.font = header_font
        cell.alignment = center
        cell.border = thin_border

    # 데이터
    rows = roster_to_rows(roster)
    for row_num, values in enumerate(rows, 2):
        for col_num, value in enumerate(values, 1):
            cell = ws.cell(row=row_num, column=col_num, value=value)
            cell.border = thin_border

    # 셀 폭 조정 (최소 8, 최대 20)
    for col_num, header in enumerate(OUTPUT_HEADERS, 1):
        max_length = max([len(str(header)) * 2] + [len(str(v[col_num - 1])) + 2 for v in rows])
        ws.column_dimensions[get_column_letter(col_num)].width = min(20, max(8, max_length))

    return wb


def roster_to_bytes(roster: pd.DataFrame) -> bytes:
    """
    워크북을 메모리에 저장해 바이트로 반환합니다 (다운로드 버튼용).
    """
    output = BytesIO()
    build_workbook(roster).save(output)
    output.seek(0)
    return output.getvalue()


def write_roster(roster: pd.DataFrame, path: str) -> None:
    """
    조정된 명단을 엑셀 파일로 저장합니다.

    Args:
        roster (pd.DataFrame): 저장할 명단 (현재 순서대로 기록)
        path (str): 저장 경로

    Raises:
        FileWriteError: 파일을 저장할 수 없을 때
    """
    try:
        build_workbook(roster).save(path)
    except Exception as e:
        raise FileWriteError(f"'{path}' 파일을 저장할 수 없습니다: {e}") from e
    logger.info("'%s' 에 %d명 저장", path, len(roster))
