"""
평시점수 조정 모듈 패키지

학생 점수 엑셀을 읽어 과락 보정과 정규분포 조정을 적용하고 결과를 저장합니다.

Modules:
    - config: 조정 기준 및 엑셀 레이아웃 상수
    - errors: 오류 유형
    - normal_dist: 역정규분포(분위수) 근사
    - adjuster: 2단계 성적 조정 알고리즘
    - statistics: 통계 계산 (평균, 표준편차, 왜도 등)
    - data_loader: 엑셀 명단 로딩 및 파싱
    - exporter: 조정 결과 엑셀 저장
    - visualizations: Plotly 기반 시각화
    - styles: HTML/CSS 스타일 처리
"""

__version__ = "1.0.0"
