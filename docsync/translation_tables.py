"""Static JP -> EN lookup tables for fields that have an official English form."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

COMPANY_TRANSLATIONS = {
    "株式会社LexxPluss": "LexxPluss, Inc.",
    "株式会社Hacobu": "Hacobu, Inc.",
    "株式会社キャディ": "CADDi Inc.",
    "株式会社CIS": "CIS Inc.",
    "フリーランス": "Freelance",
}

CERTIFICATION_TRANSLATIONS = {
    "第一級陸上無線技術士": "First-Class Radio Communications Engineer",
    "基本情報技術者": "Fundamental Information Technology Engineer",
    "応用情報技術者": "Applied Information Technology Engineer",
}

TITLE_TRANSLATIONS = {
    "エンジニア": "Engineer",
    "リードエンジニア": "Lead Engineer",
    "シニアエンジニア": "Senior Engineer",
    "フルスタックエンジニア": "Full Stack Engineer",
    "ソフトウェアエンジニア": "Software Engineer",
    "AIエンジニア": "AI Engineer",
    "MLエンジニア": "ML Engineer",
}


def _frozen(table: Optional[Mapping[str, str]], default: Mapping[str, str]) -> Mapping[str, str]:
    merged = dict(default)
    if table:
        merged.update(table)
    return MappingProxyType(merged)


@dataclass(frozen=True)
class TranslationTables:
    """Read-only company, title and certification tables.

    Entries passed in extend the built-in tables and win on conflict.
    """
    company: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(COMPANY_TRANSLATIONS)))
    title: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(TITLE_TRANSLATIONS)))
    certification: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(CERTIFICATION_TRANSLATIONS)))

    @classmethod
    def with_overrides(cls, company: Optional[Mapping[str, str]] = None,
                       title: Optional[Mapping[str, str]] = None,
                       certification: Optional[Mapping[str, str]] = None) -> "TranslationTables":
        return cls(
            company=_frozen(company, COMPANY_TRANSLATIONS),
            title=_frozen(title, TITLE_TRANSLATIONS),
            certification=_frozen(certification, CERTIFICATION_TRANSLATIONS),
        )

    def translate_company(self, name: str) -> str:
        return self.company.get(name, name)

    def translate_certification(self, name: str) -> str:
        return self.certification.get(name, name)

    def translate_title(self, title: str) -> str:
        """Translate a job title, falling back to the longest known phrase inside it.

        "シニアソフトウェアエンジニア" has both "エンジニア" and
        "ソフトウェアエンジニア" inside it; the longer phrase wins, so the
        result is "シニアSoftware Engineer".  Equal lengths keep table order.
        Only the first occurrence of the phrase is replaced.
        """
        if title in self.title:
            return self.title[title]
        for jp in sorted(self.title, key=len, reverse=True):
            if jp and jp in title:
                return title.replace(jp, self.title[jp], 1)
        return title
