"""
데이터 로더 모듈 테스트
"""

import logging

import pytest
import pandas as pd

from score_adjust.data_loader import (
    ParseFailure,
    parse_score,
    count_populated_columns,
    rows_to_roster,
    load_roster,
    make_output_filename,
)
from score_adjust.errors import FileReadError, MalformedRowError


class TestParseScore:
    """셀 값 변환 테스트"""

    def test_numeric_strings(self):
        assert parse_score("85") == 85.0
        assert parse_score(90) == 90.0

    def test_failures(self):
        """변환 실패는 ParseFailure 로 반환"""
        assert parse_score("缺考") == ParseFailure("缺考")
        assert isinstance(parse_score(""), ParseFailure)
        assert isinstance(parse_score(None), ParseFailure)
        assert isinstance(parse_score(float('nan')), ParseFailure)

    def test_whitespace_and_underscore_rejected(self):
        """앞뒤 공백이나 밑줄 구분자가 있는 값은 숫자로 보지 않음"""
        assert parse_score(" 72.5 ") == ParseFailure(" 72.5 ")
        assert parse_score("72.5\n") == ParseFailure("72.5\n")
        assert parse_score("1_000") == ParseFailure("1_000")


class TestCountPopulatedColumns:
    """열 개수 판정 테스트"""

    def test_trailing_blanks_ignored(self):
        assert count_populated_columns(pd.Series(['1', 'a', None, None])) == 2

    def test_inner_blanks_counted(self):
        assert count_populated_columns(pd.Series(['1', None, None, '4'])) == 4

    def test_empty_row(self):
        assert count_populated_columns(pd.Series([None, None])) == 0


class TestRowsToRoster:
    """원시 시트 → 명단 변환 테스트"""

    def _raw(self, rows):
        header = ['学号', '学生', '性别', '客观题得分', '主观题得分', '对分易总分', '平时分']
        return pd.DataFrame([header] + rows)

    def test_header_skipped_and_final_computed(self):
        raw = self._raw([['2023001', '张三', '男', '30', '40', '50', '50']])

        roster = rows_to_roster(raw)

        assert len(roster) == 1
        assert roster.loc[0, 'ID'] == '2023001'
        assert roster.loc[0, 'Peer_Review_Total'] == 50.0
        assert roster.loc[0, 'Final_Score'] == pytest.approx(50.0)

    def test_short_rows_skipped(self):
        """7개 열 미만 행은 건너뜀"""
        raw = self._raw([
            ['1', '张三', '男', '30', '40', '50', None],
            ['2', '李四', '女', '30', '40', '50', '60'],
        ])

        roster = rows_to_roster(raw)

        assert roster['ID'].tolist() == ['2']

    def test_malformed_cell_defaults_to_zero(self, caplog):
        raw = self._raw([['1', '张三', '男', '30', '40', '50', '缺考']])

        with caplog.at_level(logging.WARNING):
            roster = rows_to_roster(raw)

        assert roster.loc[0, 'Daily_Score'] == 0.0
        assert roster.loc[0, 'Final_Score'] == pytest.approx(20.0)
        assert '缺考' in caplog.text

    def test_strict_mode_raises(self):
        raw = self._raw([['1', '张三', '男', '30', '40', '50', '缺考']])

        with pytest.raises(MalformedRowError) as exc_info:
            rows_to_roster(raw, strict=True)

        assert exc_info.value.row == 2
        assert exc_info.value.column == 'Daily_Score'

    def test_blank_text_cell(self):
        """중간 빈 문자열 셀은 빈 문자열로 유지"""
        raw = self._raw([['1', '张三', None, '30', '40', '50', '60']])
        assert rows_to_roster(raw).loc[0, 'Gender'] == ''

    def test_header_only(self):
        roster = rows_to_roster(self._raw([]))

        assert roster.empty
        assert 'Final_Score' in roster.columns


class TestLoadRoster:
    """엑셀 파일 로딩 테스트"""

    def test_load_xlsx(self, write_workbook):
        path = write_workbook([
            ['2023001', '张三', '男', 30, 40.5, 50, 50],
            ['2023002', '李四', '女', 35, 45, 90, 80],
            ['2023003', '王五', '男', 35, 45],
        ])

        roster = load_roster(str(path))

        assert roster['ID'].tolist() == ['2023001', '2023002']
        assert roster['Subjective_Score'].tolist() == [40.5, 45.0]
        assert roster['Final_Score'].tolist() == pytest.approx([50.0, 84.0])

    def test_load_xls_named_workbook(self, write_workbook):
        """확장자가 .xls 인 xlsx 파일도 읽음"""
        path = write_workbook([['1', '张三', '男', 30, 40, 50, 50]], name='scores.xls')
        assert len(load_roster(str(path))) == 1

    def test_na_like_text_kept(self, write_workbook):
        """'#N/A', 'None', 'NA' 셀도 결측값이 아닌 문자열로 읽음"""
        path = write_workbook([
            ['1', '张三', '男', 30, 40, 50, '#N/A'],
            ['2', 'None', 'NA', 30, 40, 50, 60],
        ])

        roster = load_roster(str(path))

        assert roster['ID'].tolist() == ['1', '2']
        assert roster.loc[0, 'Daily_Score'] == 0.0
        assert roster.loc[1, 'Name'] == 'None'
        assert roster.loc[1, 'Gender'] == 'NA'

    def test_na_like_text_strict(self, write_workbook):
        path = write_workbook([['1', '张三', '男', 30, 40, 50, '#N/A']])

        with pytest.raises(MalformedRowError):
            load_roster(str(path), strict=True)

    def test_load_file_object(self, write_workbook):
        path = write_workbook([['1', '张三', '男', 30, 40, 50, 50]])
        with open(path, 'rb') as fh:
            assert len(load_roster(fh)) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            load_roster(str(tmp_path / 'missing.xlsx'))

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_not_a_workbook(self, tmp_path):
        path = tmp_path / 'broken.xlsx'
        path.write_text('not a workbook')

        with pytest.raises(FileReadError):
            load_roster(str(path))


class TestMakeOutputFilename:
    """결과 파일명 생성 테스트"""

    def test_xlsx(self):
        assert make_output_filename('成绩.xlsx') == '成绩_adjusted.xlsx'

    def test_xls(self):
        assert make_output_filename('data/scores.xls') == 'data/scores_adjusted.xls'

    def test_no_extension_defaults_to_xls(self):
        assert make_output_filename('scores') == 'scores_adjusted.xls'

    def test_other_extension_kept(self):
        assert make_output_filename('scores.csv') == 'scores.csv_adjusted.xls'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
