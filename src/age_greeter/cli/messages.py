"""User-facing message templates for the greeting flow.

All wording shown on stdout lives here.  Templates that mention the age
range, the quit keyword or the fallback value read them from
:class:`~age_greeter.core.models.AgeLimits`.
"""

from __future__ import annotations

from age_greeter.core.models import DEFAULT_LIMITS, AgeLimits, Greeting

NAME_PROMPT = "이름: "
AGE_LABEL = "나이: "
QUIT_NOTICE = "입력을 종료합니다."
NOT_A_NUMBER = "숫자를 올바르게 입력하세요. 예: 23"


def age_prompt(label: str, limits: AgeLimits = DEFAULT_LIMITS) -> str:
    """Build ``"<label> (0~150, 종료: q) "``, printed without a newline."""
    quit_key = limits.quit_keywords[0] if limits.quit_keywords else "q"
    return f"{label} ({limits.minimum}~{limits.maximum}, 종료: {quit_key}) "


def out_of_range(limits: AgeLimits = DEFAULT_LIMITS) -> str:
    return f"범위를 벗어났습니다. {limits.minimum}~{limits.maximum} 사이로 입력하세요."


def remaining_attempts(count: int) -> str:
    return f"남은 시도: {count}"


def attempts_exhausted(limits: AgeLimits = DEFAULT_LIMITS) -> str:
    return f"시도 횟수를 초과했습니다. 기본값 {limits.default}을 사용합니다."


def greeting(value: Greeting) -> str:
    return f"안녕하세요 {value.name}님, 내년엔 {value.next_year_age}살이에요."
