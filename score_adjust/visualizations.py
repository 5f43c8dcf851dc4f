"""
시각화 모듈

Plotly 기반의 조정 전후 점수 분포 차트를 생성합니다.
"""

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from scipy.stats import norm

from score_adjust.config import TARGET_MEAN, TARGET_STD, PASSING_SCORE


SERIES_COLORS = {
    '조정 전': '#868E96',  # 회색
    '조정 후': '#54A0FF',  # 파랑색
    '목표 분포': '#FF6348',  # 주황색
}


def create_adjustment_distribution_chart(
    before: pd.DataFrame,
    after: pd.DataFrame,
    score_col: str = 'Final_Score',
    bin_width: int = 5
) -> go.Figure:
    """
    조정 전후 총점 분포 막대 그래프와 목표 정규분포 곡선을 생성합니다.

    Args:
        before (pd.DataFrame): 원본 명단
        after (pd.DataFrame): 조정된 명단
        score_col (str): 점수 컬럼명
        bin_width (int): 구간 폭 (기본값: 5점)

    Returns:
        go.Figure: Plotly Figure 객체
    """
    all_scores = pd.concat([before[score_col], after[score_col]])
    lower = min(0, int(np.floor(all_scores.min() / bin_width)) * bin_width) if len(all_scores) else 0
    upper = max(100, int(np.ceil(all_scores.max() / bin_width)) * bin_width) if len(all_scores) else 100
    bins = np.arange(lower, upper + bin_width, bin_width)
    bin_labels = [f"{int(left)}-{int(right)}" for left, right in zip(bins[:-1], bins[1:])]
    centers = (bins[:-1] + bins[1:]) / 2

    fig = go.Figure()

    for label, df in [('조정 전', before), ('조정 후', after)]:
        counts, _ = np.histogram(df[score_col], bins=bins)
        fig.add_trace(go.Bar(
            x=bin_labels,
            y=counts,
            name=label,
            hovertemplate="점수 범위: %{x}<br>학생 수: %{y}명<extra>" + label + "</extra>",
            marker=dict(
                color=SERIES_COLORS[label],
                line=dict(color='rgba(0,0,0,0.4)', width=1)
            )
        ))

    # 목표 분포 N(75, 8) 의 기대 인원
    expected = norm.pdf(centers, loc=TARGET_MEAN, scale=TARGET_STD) * bin_width * len(after)
    fig.add_trace(go.Scatter(
        x=bin_labels,
        y=expected,
        mode='lines',
        name='목표 분포',
        line=dict(color=SERIES_COLORS['목표 분포'], width=3, dash='dash'),
        hovertemplate="기대 인원: %{y:.1f}명<extra></extra>"
    ))

    fig.update_layout(
        title="<b>총점 분포 (조정 전후)</b>",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(240,242,246,0.3)",
        font_family="Pretendard",
        height=400,
        showlegend=True,
        xaxis_title="점수",
        yaxis_title="학생수",
        barmode='group',
        bargap=0.1,
        margin=dict(l=60, r=40, t=80, b=60),
        legend=dict(
            orientation="v",
            yanchor="top",
            y=0.99,
            xanchor="left",
            x=0.01
        )
    )

    return fig


def create_score_shift_chart(after: pd.DataFrame, before_scores: pd.Series) -> go.Figure:
    """
    학생별(정렬 순서) 조정 전후 총점을 선 그래프로 비교합니다.

    Args:
        after (pd.DataFrame): 조정된 명단 (정렬 순서)
        before_scores (pd.Series): after 와 같은 순서로 맞춘 조정 전 총점

    Returns:
        go.Figure: Plotly Line 차트
    """
    rank = np.arange(1, len(after) + 1)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=rank, y=before_scores, mode='lines+markers', name='조정 전',
        line=dict(color=SERIES_COLORS['조정 전'], width=2),
        text=after['Name'], hovertemplate="%{text}: %{y:.1f}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=rank, y=after['Final_Score'], mode='lines+markers', name='조정 후',
        line=dict(color=SERIES_COLORS['조정 후'], width=3),
        text=after['Name'], hovertemplate="%{text}: %{y:.1f}<extra></extra>"
    ))
    fig.add_hline(
        y=PASSING_SCORE,
        line_dash="dash",
        line_color="gray",
        annotation_text=f"과락 기준 ({PASSING_SCORE:.0f})"
    )

    fig.update_layout(
        title="<b>순위별 총점 변화</b>",
        xaxis_title="순위 (낮은 점수부터)",
        yaxis_title="총점",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(240,242,246,0.3)",
        font_family="Pretendard",
        height=400,
        font=dict(size=12),
        hovermode='x unified'
    )

    return fig
