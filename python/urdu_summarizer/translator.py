import re
from types import MappingProxyType
from typing import Iterator, Mapping

# 단어 / 공백 / 구두점 한 글자 / 그 밖의 한 글자
TOKEN_PATTERN = re.compile(r'\w+|\s+|[.,!?;:"]|[^\w\s]')
WORD_PATTERN = re.compile(r'\w+')


def build_dictionary(entries: Mapping[str, str]) -> Mapping[str, str]:
    """키를 소문자로 정규화한 읽기 전용 사전을 만듭니다."""
    return MappingProxyType({key.lower(): value for key, value in entries.items()})


URDU_DICTIONARY = build_dictionary({
    "the": "دی",
    "a": "ایک",
    "an": "ایک",
    "is": "ہے",
    "are": "ہیں",
    "was": "تھا",
    "were": "تھے",
    "and": "اور",
    "or": "یا",
    "but": "لیکن",
    "of": "کا",
    "to": "کو",
    "in": "میں",
    "on": "پر",
    "for": "کیلئے",
    "with": "ساتھ",
    "from": "سے",
    "this": "یہ",
    "that": "وہ",
    "it": "یہ",
    "not": "نہیں",
    "yes": "ہاں",
    "no": "نہیں",
    "we": "ہم",
    "you": "آپ",
    "they": "وہ",
    "he": "وہ",
    "she": "وہ",
    "people": "لوگ",
    "time": "وقت",
    "day": "دن",
    "year": "سال",
    "new": "نیا",
    "good": "اچھا",
    "important": "اہم",
    "article": "مضمون",
    "blog": "بلاگ",
    "summary": "خلاصہ",
    "news": "خبر",
    "country": "ملک",
    "government": "حکومت",
    "city": "شہر",
    "life": "زندگی",
    "work": "کام",
    "health": "صحت",
    "education": "تعلیم",
    "technology": "ٹیکنالوجی",
    "water": "پانی",
    "book": "کتاب",
    "school": "اسکول",
})


def tokenize(text: str) -> Iterator[str]:
    """
    입력을 단어 / 공백 / 구두점 토큰으로 지연 분할합니다.
    토큰을 모두 이어 붙이면 원문과 정확히 같습니다.
    """
    for match in TOKEN_PATTERN.finditer(text):
        yield match.group(0)


def _split_affixes(token: str):
    start = 0
    end = len(token)
    while start < end and not token[start].isalnum():
        start += 1
    while end > start and not token[end - 1].isalnum():
        end -= 1
    return token[:start], token[start:end], token[end:]


def _translate_token(token: str, dictionary: Mapping[str, str]) -> str:
    if not WORD_PATTERN.fullmatch(token):
        return token

    prefix, core, suffix = _split_affixes(token)
    mapped = dictionary.get(core.lower()) if core else None
    if mapped is None:
        return token
    return f"{prefix}{mapped}{suffix}"


def translate(text: str, dictionary: Mapping[str, str] = URDU_DICTIONARY) -> str:
    """
    사전 치환 방식의 영어 -> 우르두어 근사 번역 (업스트림 번역이 없을 때의 대체 경로).
    사전에 없는 단어와 공백, 구두점은 그대로 둡니다.
    """
    return "".join(_translate_token(token, dictionary) for token in tokenize(text))

