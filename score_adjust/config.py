"""
설정 모듈

성적 조정 알고리즘과 엑셀 입출력에 사용되는 상수를 정의합니다.
"""

# ============= 총점 산출 비율 =============
PEER_REVIEW_WEIGHT = 0.4   # 对分易总分 반영비율
DAILY_WEIGHT = 0.6         # 平时分 반영비율

# ============= 조정 기준 =============
PASSING_SCORE = 60.0
MAX_SCORE = 100.0
TARGET_MEAN = 75.0
TARGET_STD = 8.0

# ============= 역정규분포 근사 =============
P_LOW = 0.02425
P_HIGH = 1 - P_LOW
Z_CLAMP = 10.0

# ============= 엑셀 레이아웃 =============
SHEET_NAME = 'Sheet1'
MIN_COLUMNS = 7

ROSTER_COLUMNS = [
    'ID', 'Name', 'Gender',
    'Objective_Score', 'Subjective_Score',
    'Peer_Review_Total', 'Daily_Score',
]
NUMERIC_COLUMNS = ROSTER_COLUMNS[3:]

OUTPUT_HEADERS = ['学号', '学生', '性别', '客观题得分', '主观题得分', '对分易总分', '平时分', '总分']

OUTPUT_SUFFIX = '_adjusted'
DEFAULT_EXTENSION = '.xls'
