"""Application constants.

Contains the career map field limits, purpose labels, form labels and the
localized (ja-JP) validation and outcome messages.
"""

# ---------------------------------------------------------------------------
# Field limits
# ---------------------------------------------------------------------------
USERNAME_MIN_LENGTH: int = 2
USERNAME_MAX_LENGTH: int = 50
AGE_MIN: int = 18
AGE_MAX: int = 60
YEARS_OF_EXPERIENCE_MIN: int = 1
ANNUAL_SALARY_MIN: int = 0
SKILLS_MIN_COUNT: int = 1

# Numeric text inputs accept digits only (empty clears the field)
NUMERIC_INPUT_PATTERN: str = r"^[0-9]*$"

# ---------------------------------------------------------------------------
# Form presentation
# ---------------------------------------------------------------------------
FORM_TITLE: str = "guputo_kun"
FORM_SUBTITLE: str = "キャリアマインドマップ自動生成システム"
SUBMIT_LABEL: str = "キャリアパスマップを作成する"

FIELD_LABELS: dict[str, str] = {
    "username": "名前",
    "age": "年齢",
    "yearsOfExperience": "経験",
    "skills": "スキル",
    "annualSalary": "年収",
    "purpose": "目的",
}

PURPOSE_LABELS: dict[str, str] = {
    "work_life_balance": "ワークライフバランス",
    "earn_more": "稼ぎたい",
    "skill_up": "スキルアップ",
    "management_track": "上流工程に携わりたい",
}

# ---------------------------------------------------------------------------
# Validation messages (ja-JP)
# Keyed by field, then by error kind.
# ---------------------------------------------------------------------------
VALIDATION_MESSAGES: dict[str, dict[str, str]] = {
    "username": {
        "missing": "名前を入力してください",
        "too_short": f"名前は{USERNAME_MIN_LENGTH}文字以上で入力してください",
        "too_long": f"名前は{USERNAME_MAX_LENGTH}文字以内で入力してください",
        "invalid": "名前は文字列で入力してください",
    },
    "age": {
        "missing": "年齢を入力してください",
        "too_small": f"年齢は{AGE_MIN}歳以上で入力してください",
        "too_large": f"年齢は{AGE_MAX}歳以下で入力してください",
        "invalid": "年齢は数値で入力してください",
    },
    "yearsOfExperience": {
        "missing": "経験年数を入力してください",
        "too_small": f"経験年数は{YEARS_OF_EXPERIENCE_MIN}年以上で入力してください",
        "invalid": "経験年数は数値で入力してください",
    },
    "annualSalary": {
        "too_small": "年収は0以上で入力してください",
        "invalid": "年収は数値で入力してください",
    },
    "purpose": {
        "invalid": "目的を選択肢から選んでください",
    },
    "skills": {
        "missing": f"スキルを{SKILLS_MIN_COUNT}つ以上入力してください",
        "too_short": f"スキルを{SKILLS_MIN_COUNT}つ以上入力してください",
        "invalid": "スキルの形式が正しくありません",
    },
    "skills.name": {
        "missing": "スキル名を入力してください",
        "too_short": "スキル名を入力してください",
        "invalid": "スキル名は文字列で入力してください",
    },
}

DEFAULT_VALIDATION_MESSAGE: str = "入力内容が正しくありません"

# ---------------------------------------------------------------------------
# Submission outcome messages (ja-JP)
# ---------------------------------------------------------------------------
MESSAGE_SUBMIT_SUCCESS: str = "キャリアマップ作成成功しました（beta）"
MESSAGE_SUBMISSION_FAILED: str = "データ保存に失敗しました（基本情報）"
MESSAGE_SKILLS_FAILED: str = "データ保存に失敗しました（スキル）"
MESSAGE_UNEXPECTED_ERROR: str = "予期せぬエラーが発生しました"
MESSAGE_VALIDATION_FAILED: str = "入力内容を確認してください"
