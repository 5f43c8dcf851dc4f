"""
스타일링 모듈

Streamlit 페이지의 CSS 와 명단 HTML 테이블 렌더링 기능을 제공합니다.
"""

import html as html_lib
from typing import Optional, List

import pandas as pd

from score_adjust.config import OUTPUT_HEADERS
from score_adjust.exporter import roster_to_rows


def get_custom_css() -> str:
    """
    Streamlit 앱에 적용할 커스텀 CSS를 반환합니다.

    Returns:
        str: CSS 스타일 문자열
    """
    return """
    <style>
    /* 폰트 적용 (Pretendard) */
    @import url("https://cdn.jsdelivr.net/gh/orioncactus/pretendard@v1.3.9/dist/web/static/pretendard.min.css");

    html, body, [class*="css"] {
        font-family: 'Pretendard', sans-serif;
    }

    h1 {
        color: #1E3A8A;
        font-weight: 800;
        font-size: 2.2rem !important;
        letter-spacing: -0.05rem;
    }

    /* 메트릭 스타일 */
    [data-testid="stMetricValue"] {
        font-size: 1.8rem;
        font-weight: 700;
        color: #2563EB;
    }
    div[data-testid="metric-container"] {
        background-color: #F8F9FA;
        padding: 15px;
        border-radius: 12px;
        border: 1px solid #E2E8F0;
    }

    [data-testid="stSidebar"] {
        background-color: #F8F9FA;
        border-right: 1px solid #E2E8F0;
    }
    </style>
    """


def get_table_style() -> str:
    """
    HTML 테이블 스타일 CSS를 반환합니다.
    """
    return """
    <style>
    .styled-table {
        width: 100%;
        border-collapse: collapse;
        font-size: 0.85rem;
        font-family: 'Pretendard', sans-serif;
    }
    .styled-table th {
        background-color: #f0f2f6;
        font-weight: 700;
        text-align: center;
        padding: 10px 8px;
        border: 1px solid #e0e0e0;
        position: sticky;
        top: 0;
    }
    .styled-table td {
        text-align: center;
        padding: 8px 6px;
        border: 1px solid #e0e0e0;
    }
    .styled-table tr.raised {
        background-color: #EFF6FF;
    }
    .styled-table td.left-align {
        text-align: left !important;
    }
    .table-container {
        max-height: 450px;
        overflow-y: auto;
        border: 1px solid #e0e0e0;
        border-radius: 8px;
    }
    </style>
    """


def make_html_table(
    df: pd.DataFrame,
    left_align_cols: Optional[List[str]] = None,
    highlight_rows: Optional[List[bool]] = None
) -> str:
    """
    DataFrame을 HTML 테이블로 변환합니다.

    Args:
        df (pd.DataFrame): 변환할 DataFrame
        left_align_cols (Optional[List[str]]): 왼쪽 정렬할 컬럼 리스트
        highlight_rows (Optional[List[bool]]): 행별 강조 여부 (점수가 오른 학생 표시용)

    Returns:
        str: HTML 테이블 문자열

    Examples:
        >>> df = pd.DataFrame({'学生': ['张三'], '总分': ['75.0']})
        >>> html = make_html_table(df, left_align_cols=['学生'], highlight_rows=[True])
    """
    left_align_cols = left_align_cols or []
    highlight_rows = highlight_rows or [False] * len(df)

    out = '<table class="styled-table">'

    # Header
    out += '<thead><tr>'
    for col in df.columns:
        out += f'<th>{html_lib.escape(str(col))}</th>'
    out += '</tr></thead>'

    # Body
    out += '<tbody>'
    for (_, row), highlight in zip(df.iterrows(), highlight_rows):
        out += '<tr class="raised">' if highlight else '<tr>'
        for col in df.columns:
            val = html_lib.escape(str(row[col]))
            if col in left_align_cols:
                out += f'<td class="left-align">{val}</td>'
            else:
                out += f'<td>{val}</td>'
        out += '</tr>'
    out += '</tbody></table>'

    return out


def make_roster_display(roster: pd.DataFrame) -> pd.DataFrame:
    """
    명단을 출력 파일과 같은 헤더·서식의 표시용 DataFrame 으로 변환합니다.
    """
    return pd.DataFrame(roster_to_rows(roster), columns=OUTPUT_HEADERS)
