"""
공용 테스트 픽스처
"""

import pytest
import pandas as pd
from openpyxl import Workbook

from score_adjust.adjuster import compute_final_score
from score_adjust.config import OUTPUT_HEADERS


def make_roster(rows):
    """(ID, 对分易总分, 平时分) 튜플 리스트로 명단 DataFrame 을 만듭니다."""
    df = pd.DataFrame([
        {
            'ID': str(sid),
            'Name': f'学生{sid}',
            'Gender': '男',
            'Objective_Score': 20.0,
            'Subjective_Score': 30.0,
            'Peer_Review_Total': float(peer),
            'Daily_Score': float(daily),
        }
        for sid, peer, daily in rows
    ], columns=['ID', 'Name', 'Gender', 'Objective_Score', 'Subjective_Score',
                'Peer_Review_Total', 'Daily_Score'])
    df['Final_Score'] = compute_final_score(df['Peer_Review_Total'], df['Daily_Score'])
    return df


@pytest.fixture
def write_workbook(tmp_path):
    """행 리스트를 엑셀 파일로 저장하고 경로를 반환하는 함수"""
    def _write(rows, name='scores.xlsx', header=True):
        wb = Workbook()
        ws = wb.active
        ws.title = 'Sheet1'
        if header:
            ws.append(OUTPUT_HEADERS[:7])
        for row in rows:
            ws.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return path
    return _write


@pytest.fixture
def roster_factory():
    return make_roster
