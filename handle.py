"""
명령줄 실행 진입점

    python handle.py -n scores.xlsx

엑셀 명단을 읽어 평시점수를 조정하고 '<파일명>_adjusted.<확장자>' 로 저장한 뒤 통계를 출력합니다.
"""

import argparse
import logging
import sys
from typing import List, Optional

from score_adjust.adjuster import adjust_scores, adjustment_summary
from score_adjust.data_loader import load_roster, make_output_filename
from score_adjust.errors import (
    InputMissingError,
    FileReadError,
    FileWriteError,
    InvalidInputError,
    EmptyRosterError,
)
from score_adjust.exporter import write_roster
from score_adjust.statistics import summarize_scores, format_summary

logger = logging.getLogger("score_adjust")


def setup_logging(verbose: bool = False) -> None:
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))

    if not logger.handlers:
        logger.addHandler(ch)


def run(name: Optional[str], strict: bool = False) -> str:
    """
    로드 → 조정 → 저장 → 통계 출력을 실행하고 결과 파일 경로를 반환합니다.

    Raises:
        InputMissingError: 파일명이 없을 때
        FileReadError: 입력 파일을 읽을 수 없을 때
        InvalidInputError: 명단이 비었거나 (strict) 잘못된 셀이 있을 때
        FileWriteError: 결과 파일을 저장할 수 없을 때
    """
    if not name:
        raise InputMissingError("-n 옵션으로 파일명을 지정하세요.")

    roster = load_roster(name, strict=strict)
    if roster.empty:
        raise EmptyRosterError()

    adjusted = adjust_scores(roster)
    counts = adjustment_summary(roster, adjusted)
    logger.info(
        "과락 보정 %d명, 분포 조정 %d명, 변동 없음 %d명",
        counts['floor_raised'], counts['reshape_raised'], counts['unchanged']
    )

    output_name = make_output_filename(name)
    write_roster(adjusted, output_name)

    print(f"성적 조정 완료! 저장 위치: {output_name}")
    print("\n통계 정보:")
    print(format_summary(summarize_scores(adjusted)))
    return output_name


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='handle',
        description='엑셀 성적의 평시점수를 조정해 총점을 정규분포에 가깝게 만듭니다.'
    )
    parser.add_argument('--name', '-n', help='처리할 엑셀 파일명')
    parser.add_argument('--strict', action='store_true', help='숫자로 읽을 수 없는 셀이 있으면 중단')
    parser.add_argument('--verbose', '-v', action='store_true', help='상세 로그 출력')
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        run(args.name, strict=args.strict)
    except InputMissingError as e:
        print(e)
    except FileReadError as e:
        print(f"파일 읽기 실패: {e.__cause__ or e}")
    except InvalidInputError as e:
        print(f"입력 데이터 오류: {e}")
    except FileWriteError as e:
        print(f"파일 쓰기 실패: {e.__cause__ or e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
