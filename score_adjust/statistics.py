"""
통계 계산 모듈

조정된 명단의 총점 통계량(평균, 표준편차, 최저/최고점, 왜도/첨도)을 계산하는 기능을 제공합니다.
"""

from typing import Dict

import numpy as np
import pandas as pd
from scipy import stats

from score_adjust.errors import EmptyRosterError


def _final_scores(df: pd.DataFrame, score_col: str) -> np.ndarray:
    scores = pd.to_numeric(df[score_col], errors='coerce').to_numpy(dtype=float)
    if len(scores) == 0:
        raise EmptyRosterError()
    return scores


def summarize_scores(df: pd.DataFrame, score_col: str = 'Final_Score') -> Dict[str, float]:
    """
    총점 요약 통계를 계산합니다.

    Args:
        df (pd.DataFrame): 학생 명단
        score_col (str): 점수 컬럼명 (기본값: 'Final_Score')

    Returns:
        Dict[str, float]: {'mean', 'stddev', 'min', 'max'}

    Raises:
        EmptyRosterError: 명단이 비어 있을 때

    Note:
        - 표준편차는 모표준편차(n으로 나눔)입니다.
        - 최저/최고점은 정렬 순서와 무관하게 직접 계산합니다.

    Examples:
        >>> df = pd.DataFrame({'Final_Score': [60.0, 70.0, 80.0]})
        >>> summary = summarize_scores(df)
        >>> print(f"{summary['mean']:.1f} {summary['stddev']:.3f}")
        70.0 8.165
    """
    scores = _final_scores(df, score_col)

    mean = scores.sum() / len(scores)
    return {
        'mean': float(mean),
        'stddev': float(np.sqrt(((scores - mean) ** 2).sum() / len(scores))),
        'min': float(scores.min()),
        'max': float(scores.max()),
    }


def calculate_normality(df: pd.DataFrame, score_col: str = 'Final_Score') -> Dict[str, float]:
    """
    총점 분포의 왜도와 첨도를 계산합니다.

    정규분포에 가까울수록 두 값 모두 0에 가깝습니다 (첨도는 Fisher 정의).

    Args:
        df (pd.DataFrame): 학생 명단
        score_col (str): 점수 컬럼명

    Returns:
        Dict[str, float]: {'skewness', 'kurtosis'}. 모든 점수가 같으면 0.0

    Raises:
        EmptyRosterError: 명단이 비어 있을 때
    """
    scores = _final_scores(df, score_col)

    if len(scores) < 2 or np.ptp(scores) == 0:
        return {'skewness': 0.0, 'kurtosis': 0.0}

    return {
        'skewness': float(stats.skew(scores)),
        'kurtosis': float(stats.kurtosis(scores)),
    }


def format_summary(summary: Dict[str, float]) -> str:
    """
    요약 통계를 출력용 문자열로 만듭니다.

    Examples:
        >>> print(format_summary({'mean': 70, 'stddev': 8.0, 'min': 60, 'max': 80}))
        평균: 70.00
        표준편차: 8.00
        최저점: 60.00
        최고점: 80.00
    """
    return "\n".join([
        f"평균: {summary['mean']:.2f}",
        f"표준편차: {summary['stddev']:.2f}",
        f"최저점: {summary['min']:.2f}",
        f"최고점: {summary['max']:.2f}",
    ])
