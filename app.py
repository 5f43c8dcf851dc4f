import streamlit as st
import pandas as pd

from score_adjust.adjuster import adjust_scores, adjusted_order, adjustment_summary
from score_adjust.config import TARGET_MEAN, TARGET_STD, PASSING_SCORE
from score_adjust.data_loader import load_roster, make_output_filename
from score_adjust.errors import FileReadError, InvalidInputError
from score_adjust.exporter import roster_to_bytes
from score_adjust.statistics import summarize_scores, calculate_normality
from score_adjust.styles import get_custom_css, get_table_style, make_html_table, make_roster_display
from score_adjust.visualizations import create_adjustment_distribution_chart, create_score_shift_chart


# --- 페이지 설정 ---
st.set_page_config(
    page_title="평시점수 정규분포 조정",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="expanded"
)
st.markdown(get_custom_css(), unsafe_allow_html=True)
st.markdown(get_table_style(), unsafe_allow_html=True)


# --- 데이터 처리 로직 ---
@st.cache_data(ttl=3600)
def load_and_adjust(uploaded_file, strict: bool):
    roster = load_roster(uploaded_file, strict=strict)
    if roster.empty:
        return roster, roster
    return roster, adjust_scores(roster)


with st.sidebar:
    st.markdown("### 📂 성적 파일")

    st.info(
        "🔒 **데이터 보안 안내**\n\n"
        "업로드한 파일은 조정 계산에만 사용되며 저장되지 않습니다."
    )

    st.markdown("---")

    uploaded = st.file_uploader(
        "학생 점수 엑셀 (学号, 学生, 性别, 客观题得分, 主观题得分, 对分易总分, 平时分)",
        type=["xlsx", "xls"]
    )
    strict = st.checkbox("숫자가 아닌 셀이 있으면 중단", value=False)

    st.markdown("---")
    st.caption(
        f"총점 = 对分易总分 × 0.4 + 平时分 × 0.6\n\n"
        f"1단계: 총점 {PASSING_SCORE:.0f}점 미만 → {PASSING_SCORE:.0f}점으로 보정\n\n"
        f"2단계: 순위 백분위 → N({TARGET_MEAN:.0f}, {TARGET_STD:.0f}) 목표점수"
    )


st.title("🎓 평시점수 정규분포 조정")

if uploaded is None:
    st.info("👈 **시작하려면 왼쪽 사이드바에서 엑셀 파일을 업로드하세요.**")
    st.stop()

try:
    roster, adjusted = load_and_adjust(uploaded, strict)
except FileReadError as e:
    st.error(f"❌ 파일을 읽을 수 없습니다: {e.__cause__ or e}")
    st.stop()
except InvalidInputError as e:
    st.error(f"❌ 입력 데이터 오류: {e}")
    st.stop()

if roster.empty:
    st.warning("⚠️ 분석할 학생 데이터가 없습니다. 첫 행은 헤더, 이후 행은 7개 열이 필요합니다.")
    st.stop()

before_stats = summarize_scores(roster)
after_stats = summarize_scores(adjusted)
counts = adjustment_summary(roster, adjusted)
before_sorted = roster['Final_Score'].to_numpy()[adjusted_order(roster)]

tab_summary, tab_chart, tab_data = st.tabs(["📊 요약", "📈 분포", "📋 조정 결과"])

# --- [Tab 1] 요약 ---
with tab_summary:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("평균", f"{after_stats['mean']:.2f}", delta=f"{after_stats['mean'] - before_stats['mean']:.2f}")
    col2.metric("표준편차", f"{after_stats['stddev']:.2f}", delta=f"{after_stats['stddev'] - before_stats['stddev']:.2f}")
    col3.metric("최저점", f"{after_stats['min']:.2f}", delta=f"{after_stats['min'] - before_stats['min']:.2f}")
    col4.metric("최고점", f"{after_stats['max']:.2f}", delta=f"{after_stats['max'] - before_stats['max']:.2f}")

    col1, col2, col3 = st.columns(3)
    col1.metric("과락 보정", f"{counts['floor_raised']}명")
    col2.metric("분포 조정", f"{counts['reshape_raised']}명")
    col3.metric("변동 없음", f"{counts['unchanged']}명")

    normality = calculate_normality(adjusted)
    st.markdown(
        f"- 학생 수: **{counts['total']}명**\n"
        f"- 조정 후 왜도: **{normality['skewness']:.3f}**, 첨도: **{normality['kurtosis']:.3f}** (0에 가까울수록 정규분포)"
    )

# --- [Tab 2] 분포 ---
with tab_chart:
    st.plotly_chart(create_adjustment_distribution_chart(roster, adjusted), use_container_width=True)
    st.plotly_chart(create_score_shift_chart(adjusted, pd.Series(before_sorted)), use_container_width=True)

# --- [Tab 3] 조정 결과 ---
with tab_data:
    display = make_roster_display(adjusted)
    raised = (adjusted['Final_Score'].to_numpy() > before_sorted).tolist()
    st.markdown(
        f'<div class="table-container">{make_html_table(display, left_align_cols=["学生"], highlight_rows=raised)}</div>',
        unsafe_allow_html=True
    )
    st.caption("파란 배경: 점수가 조정된 학생")

    st.download_button(
        label="⬇️ 조정 결과 엑셀 다운로드",
        data=roster_to_bytes(adjusted),
        file_name=make_output_filename(uploaded.name),
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True
    )
