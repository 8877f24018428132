"""
Keyword-matched canned replies for the customer-service chat.

Used whenever the chat-completion API is not configured or fails.
Rules are checked in order against the lower-cased message; the first
rule with a matching keyword wins. A rule may hold nested rules that
refine the answer (vaccination for dogs vs. cats, for instance) and a
reply used when none of them match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Rule:
    keywords: Tuple[str, ...]
    reply: str
    refinements: Tuple["Rule", ...] = field(default_factory=tuple)

    def matches(self, text: str) -> bool:
        return any(k in text for k in self.keywords)


DOG = ("강아지", "개")
CAT = ("고양이", "고양")
MEAL = ("먹이", "사료", "식사")
BATH = ("목욕", "샴푸")

GREETING = (
    "안녕하세요! ACN 고객센터입니다. 반려동물 관련하여 사료, 간식, 용품, 동물병원, "
    "펫보험, 유기동물, 예방접종 등 다양한 정보를 제공하고 있습니다. "
    "구체적으로 어떤 도움이 필요하신가요? 😊"
)

RULES: Tuple[Rule, ...] = (
    Rule(
        ("예방접종", "접종", "백신"),
        "예방접종에 대해 물어보셨네요! 💉\n\n"
        "**강아지 필수 접종:** 종합백신(DHPPL), 코로나바이러스, 광견병\n"
        "**고양이 필수 접종:** 3종 혼합백신(FVRCP), 광견병\n\n"
        "구체적인 일정은 마이페이지의 '예방접종 캘린더'를 이용해보세요!",
        (
            Rule(
                DOG,
                "강아지 예방접종 정보입니다! 💉\n\n"
                "• 종합백신(DHPPL): 6~8주부터 3~4주 간격으로 3회\n"
                "• 코로나바이러스, 켄넬코프: 6~8주부터\n"
                "• 광견병: 3개월 이상, 1년마다 접종",
            ),
            Rule(
                CAT,
                "고양이 예방접종 정보입니다! 💉\n\n"
                "• 3종 혼합백신(FVRCP): 6~8주부터 3~4주 간격으로 2~3회\n"
                "• 광견병: 3개월 이상, 1~3년마다 접종",
            ),
        ),
    ),
    Rule(
        ("사료", "먹이"),
        "사료 관련 문의사항이시군요! 상품 페이지에서 카테고리를 선택하시면 "
        "원하시는 사료를 찾으실 수 있습니다. 🐕",
    ),
    Rule(
        ("간식",),
        "간식에 대해 물어보셨네요! 간식 카테고리를 확인해보세요! 🦴",
    ),
    Rule(
        ("병원", "의원"),
        "동물병원 찾기는 상단 메뉴의 '동물병원조회'를 이용해주세요. 🏥",
    ),
    Rule(
        ("보험", "펫보험"),
        "상단 메뉴의 '반려동물 보험'에서 보험 상품을 비교하고 가입하실 수 있습니다. 💳",
    ),
    Rule(
        ("유기동물", "유기"),
        "상단 메뉴의 '유기동물 현황'에서 보호 중인 동물들을 확인하실 수 있습니다. 🐾",
    ),
    Rule(
        ("주문", "배송"),
        "주문 및 배송 내역은 마이페이지에서 확인하실 수 있습니다. 📦",
    ),
    Rule(
        ("반품", "교환"),
        "반품/교환은 상품 수령 후 7일 이내에 마이페이지에서 신청하실 수 있습니다. 🔄",
    ),
    Rule(
        DOG,
        "강아지에 대해 물어보셨네요! 🐕 식사, 산책, 목욕, 예방접종 중 "
        "어떤 것이 궁금하신가요?",
        (
            Rule(MEAL, "강아지 식사: 성견은 하루 1~2회, 어린 강아지는 3~4회 급여해주세요. 🐕"),
            Rule(("산책", "운동"), "강아지 산책: 하루 2~3회, 총 30분~2시간이 적당합니다. 🐕"),
            Rule(BATH, "강아지 목욕: 보통 2~4주에 1회, 전용 샴푸를 사용해주세요. 🐕"),
        ),
    ),
    Rule(
        CAT,
        "고양이에 대해 물어보셨네요! 🐱 식사, 화장실, 목욕, 예방접종 중 "
        "어떤 것이 궁금하신가요?",
        (
            Rule(MEAL, "고양이 식사: 성묘는 하루 2~3회, 새끼고양이는 4~6회 급여해주세요. 🐱"),
            Rule(("화장실", "배변", "모래"), "고양이 화장실은 고양이 수 + 1개, 모래 깊이는 5~7cm가 좋습니다. 🐱"),
            Rule(BATH, "고양이는 보통 목욕이 필요 없습니다. 필요할 때만 전용 샴푸를 사용해주세요. 🐱"),
        ),
    ),
    Rule(
        ("건강", "질병", "병"),
        "정기 검진은 1년에 1~2회 권장됩니다. 이상 징후가 보이면 바로 병원을 방문해주세요. 🏥",
    ),
    Rule(
        ("훈련", "교육"),
        "훈련은 기본 명령어부터, 간식과 칭찬으로 짧게 자주 반복해주세요. 🎓",
    ),
)


def _first_match(rules: Sequence[Rule], text: str) -> Optional[Rule]:
    return next((r for r in rules if r.matches(text)), None)


def canned_reply(message: str) -> str:
    """Return the canned answer for ``message``."""
    text = message.lower()
    rule = _first_match(RULES, text)
    if rule is None:
        return GREETING
    refined = _first_match(rule.refinements, text)
    return refined.reply if refined is not None else rule.reply
