"""
역정규분포 모듈

Beasley-Springer-Moro 유리 근사식으로 표준정규분포의 분위수(역누적분포함수)를 계산합니다.
"""

import math

import numpy as np

from score_adjust.config import P_LOW, P_HIGH, Z_CLAMP

# 중앙 구간 계수
A = [-3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
     1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00]
B = [-5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
     6.680131188771972e+01, -1.328068155288572e+01]

# 꼬리 구간 계수
C = [-7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
     -2.549732539343734e+00, 4.374664141464968e+00, 2.938163982698783e+00]
D = [7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
     3.754408661907416e+00]


def _tail(q: float) -> float:
    num = ((((C[0] * q + C[1]) * q + C[2]) * q + C[3]) * q + C[4]) * q + C[5]
    den = (((D[0] * q + D[1]) * q + D[2]) * q + D[3]) * q + 1
    return num / den


def inverse_normal_cdf(p: float) -> float:
    """
    확률 p에 대응하는 표준정규분포 분위수를 반환합니다.

    Args:
        p (float): 누적확률

    Returns:
        float: z 점수. p <= 0 이면 -10, p >= 1 이면 10

    Note:
        - p < 0.02425: 하위 꼬리 근사식
        - 0.02425 <= p <= 0.97575: 중앙 근사식
        - p > 0.97575: 하위 꼬리 근사식을 1-p 에 적용 후 부호 반전
        - Newton 보정은 하지 않습니다.

    Examples:
        >>> round(inverse_normal_cdf(0.5), 6)
        0.0
        >>> round(inverse_normal_cdf(0.975), 2)
        1.96
    """
    if p <= 0:
        return -Z_CLAMP
    if p >= 1:
        return Z_CLAMP

    if p < P_LOW:
        return _tail(math.sqrt(-2 * math.log(p)))
    if p <= P_HIGH:
        q = p - 0.5
        r = q * q
        num = (((((A[0] * r + A[1]) * r + A[2]) * r + A[3]) * r + A[4]) * r + A[5]) * q
        den = ((((B[0] * r + B[1]) * r + B[2]) * r + B[3]) * r + B[4]) * r + 1
        return num / den
    return -_tail(math.sqrt(-2 * math.log(1 - p)))


def inverse_normal_cdf_array(ps) -> np.ndarray:
    """
    inverse_normal_cdf 를 배열의 각 원소에 적용합니다.

    Args:
        ps: 누적확률 배열 (list, ndarray, Series)

    Returns:
        np.ndarray: z 점수 배열 (float64)
    """
    ps = np.asarray(ps, dtype=float)
    return np.fromiter((inverse_normal_cdf(p) for p in ps.ravel()), dtype=float, count=ps.size).reshape(ps.shape)
