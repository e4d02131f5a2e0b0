"""Shared content records for the test-suite."""

import pytest

from app.models.content import SiteContent


def make_content(**overrides) -> SiteContent:
    """Build a :class:`SiteContent` from camelCase keys, as the editor sends them."""
    data = {
        "pageTitle": "Курсы Х",
        "metaData": {"title": "T", "description": "D"},
        "courses": [{"title": "Курс 1", "school": "Школа А"}],
    }
    data.update(overrides)
    return SiteContent.model_validate(data)


FULL_RECORD = {
    "pageTitle": "Лучшие онлайн курсы программирования 2025",
    "metaData": {
        "title": "Лучшие курсы",
        "description": "Подборка курсов",
        "keywords": "курсы, python",
        "canonicalUrl": "https://site.ru/",
    },
    "author": {"name": "Иван", "description": "<b>Эксперт</b>"},
    "introText": "<p>Вступление</p>",
    "beforeTableBlock": {"title": "Как выбрать", "paragraphs": ["Первый", ""]},
    "courses": [
        {
            "title": "Python",
            "school": "Школа",
            "price": 15000,
            "duration": "3 месяца",
            "features": ["<i>Практика</i>", ""],
            "advantages": ["Диплом", "Поддержка"],
        }
    ],
    "contentBlocks": [{"title": "Итоги", "paragraphs": ["A & B"]}],
    "faqData": [{"question": "Зачем?", "answer": "<p>Потому</p>"}],
    "adDisclosureText": "Реклама",
    "pages": [
        {
            "id": "p1",
            "slug": "abc",
            "title": "Курсы менеджмента",
            "metaData": {"description": "Менеджмент"},
            "introText": "Про менеджмент",
            "faqData": [{"question": "Сколько?", "answer": "Долго"}],
        },
        {
            "id": "p2",
            "slug": "design",
            "title": "Дизайн",
            "metaData": {"title": "Курсы дизайна", "canonicalUrl": "https://other.ru/design/"},
        },
    ],
}


@pytest.fixture
def full_content() -> SiteContent:
    return SiteContent.model_validate(FULL_RECORD)
