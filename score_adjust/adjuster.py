"""
성적 조정 모듈

평시점수(Daily_Score)를 올려 총점을 조정하는 2단계 알고리즘을 제공합니다.

    1단계: 총점 60점 미만 학생의 평시점수를 60점이 되도록 올림 (상한 없음)
    2단계: 순위 백분위를 정규분포 N(75, 8) 목표점수로 변환해 평시점수를 올림 (상한 100)

어떤 단계도 점수를 내리지 않습니다.
"""

import logging
from typing import Dict

import numpy as np
import pandas as pd

from score_adjust.config import (
    PEER_REVIEW_WEIGHT,
    DAILY_WEIGHT,
    PASSING_SCORE,
    MAX_SCORE,
    TARGET_MEAN,
    TARGET_STD,
)
from score_adjust.normal_dist import inverse_normal_cdf_array

logger = logging.getLogger(__name__)

# 정수형 컬럼에 소수 평시점수를 대입할 수 있도록 실수형으로 맞춘다
_SCORE_DTYPES = {'Peer_Review_Total': float, 'Daily_Score': float, 'Final_Score': float}


def compute_final_score(peer_review_total, daily_score):
    """
    총점 = 对分易总分 * 0.4 + 平时分 * 0.6

    스칼라, ndarray, Series 모두 받습니다.

    Examples:
        >>> compute_final_score(50, 50)
        50.0
    """
    return peer_review_total * PEER_REVIEW_WEIGHT + daily_score * DAILY_WEIGHT


def required_daily_score(target, peer_review_total):
    """목표 총점을 얻기 위해 필요한 평시점수를 계산합니다."""
    return (target - peer_review_total * PEER_REVIEW_WEIGHT) / DAILY_WEIGHT


def apply_passing_floor(roster: pd.DataFrame) -> pd.DataFrame:
    """
    1단계: 총점 60점 미만 학생의 평시점수를 올립니다.

    필요 평시점수가 100을 넘어도 자르지 않습니다.

    Args:
        roster (pd.DataFrame): Peer_Review_Total, Daily_Score, Final_Score 컬럼을 가진 명단

    Returns:
        pd.DataFrame: 조정된 새 명단 (행 순서 유지)
    """
    df = roster.astype(_SCORE_DTYPES)
    required = required_daily_score(PASSING_SCORE, df['Peer_Review_Total'])
    raise_mask = (df['Final_Score'] < PASSING_SCORE) & (required > df['Daily_Score'])

    df.loc[raise_mask, 'Daily_Score'] = required[raise_mask]
    df['Final_Score'] = compute_final_score(df['Peer_Review_Total'], df['Daily_Score'])

    logger.debug("과락 보정 대상: %d명", int(raise_mask.sum()))
    return df


def reshape_to_normal(roster: pd.DataFrame) -> pd.DataFrame:
    """
    2단계: 총점 순위를 정규분포 목표점수로 변환해 평시점수를 올립니다.

    Args:
        roster (pd.DataFrame): 1단계를 거친 명단

    Returns:
        pd.DataFrame: 2단계 이전 총점 오름차순으로 정렬된 새 명단

    Note:
        - 정렬은 안정 정렬이며 동점자는 입력 순서를 유지합니다.
        - 백분위 = (순위+1) / (n+1) 이므로 0과 1에 닿지 않습니다.
        - 목표점수는 [60, 100] 으로 자르고, 필요 평시점수가 100을 넘으면 적용하지 않습니다.
    """
    df = roster.astype(_SCORE_DTYPES).sort_values('Final_Score', kind='mergesort').reset_index(drop=True)
    n = len(df)
    if n == 0:
        return df

    percentiles = np.arange(1, n + 1) / (n + 1)
    targets = TARGET_MEAN + inverse_normal_cdf_array(percentiles) * TARGET_STD
    targets = np.clip(targets, PASSING_SCORE, MAX_SCORE)

    required = required_daily_score(targets, df['Peer_Review_Total'].to_numpy())
    raise_mask = (
        (targets > df['Final_Score'].to_numpy())
        & (required > df['Daily_Score'].to_numpy())
        & (required <= MAX_SCORE)
    )

    df.loc[raise_mask, 'Daily_Score'] = required[raise_mask]
    df['Final_Score'] = compute_final_score(df['Peer_Review_Total'], df['Daily_Score'])

    logger.debug("정규분포 조정 대상: %d명", int(raise_mask.sum()))
    return df


def adjust_scores(roster: pd.DataFrame) -> pd.DataFrame:
    """
    과락 보정과 정규분포 조정을 차례로 적용합니다.

    입력 명단은 변경하지 않습니다.

    Args:
        roster (pd.DataFrame): load_roster 로 읽은 명단

    Returns:
        pd.DataFrame: 조정된 명단 (2단계 이전 총점 오름차순)

    Examples:
        >>> df = pd.DataFrame({'Peer_Review_Total': [50.0], 'Daily_Score': [50.0], 'Final_Score': [50.0]})
        >>> round(adjust_scores(df).loc[0, 'Final_Score'], 1)
        75.0
    """
    return reshape_to_normal(apply_passing_floor(roster))


def adjusted_order(roster: pd.DataFrame) -> np.ndarray:
    """
    adjust_scores 결과의 각 행이 원본 명단의 몇 번째 행인지 반환합니다.

    ID 는 중복될 수 있으므로 2단계와 같은 안정 정렬로 위치를 맞춥니다.

    Examples:
        >>> df = pd.DataFrame({'Peer_Review_Total': [90.0, 50.0], 'Daily_Score': [90.0, 50.0],
        ...                    'Final_Score': [90.0, 50.0]})
        >>> adjusted_order(df).tolist()
        [1, 0]
    """
    floored = apply_passing_floor(roster)['Final_Score'].to_numpy()
    return np.argsort(floored, kind='stable')


def adjustment_summary(before: pd.DataFrame, after: pd.DataFrame) -> Dict[str, int]:
    """
    조정 전후 명단을 같은 학생끼리 맞춰 비교하고 단계별 조정 인원을 집계합니다.

    Args:
        before (pd.DataFrame): 원본 명단
        after (pd.DataFrame): adjust_scores 결과

    Returns:
        Dict[str, int]: {'total', 'floor_raised', 'reshape_raised', 'unchanged'}
            floor_raised 는 원래 60점 미만이던 인원, reshape_raised 는 그 외에 점수가 오른 인원입니다.
    """
    original = before['Final_Score'].to_numpy()[adjusted_order(before)]

    raised = after['Final_Score'].to_numpy() > original
    was_failing = original < PASSING_SCORE

    return {
        'total': len(after),
        'floor_raised': int((raised & was_failing).sum()),
        'reshape_raised': int((raised & ~was_failing).sum()),
        'unchanged': int((~raised).sum()),
    }
