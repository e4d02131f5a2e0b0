"""Tests for renderer.render_static_content."""

from app.models.content import Course, SiteContent, SitePage
from app.services.renderer import render_static_content

from conftest import make_content

_EXPECTED_FULL_FRAGMENT = (
    "    <h1>Лучшие онлайн курсы программирования 2025</h1>\n"
    "    <p>Автор: Иван</p>\n"
    "    <p>Эксперт</p>\n"
    "    <article>Вступление</article>\n"
    "    <h2>Как выбрать</h2>\n"
    "    <p>Первый</p>\n"
    "    <p></p>\n"
    "    <h2>Курсы</h2>\n"
    "    <ul>\n"
    "      <li>\n"
    "        <h3>1. Python</h3>\n"
    "        <p>Школа: Школа</p>\n"
    "        <p>Цена: 15000 руб.</p>\n"
    "        <p>Длительность: 3 месяца</p>\n"
    "        <ul>\n"
    "          <li>Практика</li>\n"
    "        </ul>\n"
    "        <p>Преимущества: Диплом, Поддержка</p>\n"
    "      </li>\n"
    "    </ul>\n"
    "    <h2>Итоги</h2>\n"
    "    <p>A &amp; B</p>\n"
    "    <h2>Часто задаваемые вопросы</h2>\n"
    "    <h3>Зачем?</h3>\n"
    "    <p>Потому</p>\n"
    "    <p><small>Реклама</small></p>\n"
)


def _course_fragment(**course) -> str:
    content = SiteContent(page_title="X", courses=[Course(title="C", school="S", **course)])
    return render_static_content(content, is_top_level=True)


class TestFullRecord:
    def test_sections_in_fixed_order(self, full_content):
        assert render_static_content(full_content, is_top_level=True) == _EXPECTED_FULL_FRAGMENT

    def test_deterministic(self, full_content):
        first = render_static_content(full_content, is_top_level=True)
        second = render_static_content(full_content, is_top_level=True)
        assert first == second


class TestOptionalSections:
    def test_minimal_record_is_heading_only(self):
        assert render_static_content(SiteContent(), is_top_level=True) == "    <h1></h1>\n"

    def test_no_none_leakage(self):
        fragment = render_static_content(
            SiteContent.model_validate(
                {"courses": [{"title": None, "school": None, "price": None}], "faqData": [{}]}
            ),
            is_top_level=True,
        )
        assert "None" not in fragment
        assert "<h3>1. </h3>" in fragment
        assert "<p>Школа: </p>" in fragment

    def test_empty_courses_emit_no_course_markup(self):
        fragment = render_static_content(
            make_content(pageTitle="Подборка", courses=[]), is_top_level=True
        )
        assert "Курсы" not in fragment
        assert "<ul>" not in fragment
        assert "<li>" not in fragment

    def test_author_description_needs_author_name(self):
        fragment = render_static_content(
            make_content(author={"description": "Bio only"}), is_top_level=True
        )
        assert "Bio only" not in fragment
        assert "Автор" not in fragment

    def test_author_without_description(self):
        fragment = render_static_content(make_content(author={"name": "Анна"}), is_top_level=True)
        assert "    <p>Автор: Анна</p>\n    <h2>Курсы</h2>" in fragment

    def test_untitled_block_has_no_heading(self):
        fragment = render_static_content(
            make_content(courses=[], contentBlocks=[{"paragraphs": ["One", "Two"]}]),
            is_top_level=True,
        )
        assert "<h2>" not in fragment
        assert "    <p>One</p>\n    <p>Two</p>\n" in fragment

    def test_content_blocks_keep_order(self):
        fragment = render_static_content(
            make_content(contentBlocks=[{"title": "B1"}, {"title": "B2"}, {"title": "B3"}]),
            is_top_level=True,
        )
        assert fragment.index("B1") < fragment.index("B2") < fragment.index("B3")

    def test_empty_faq_list_has_no_heading(self):
        fragment = render_static_content(make_content(faqData=[]), is_top_level=True)
        assert "Часто задаваемые вопросы" not in fragment

    def test_faq_question_is_escaped_not_stripped(self):
        fragment = render_static_content(
            make_content(faqData=[{"question": "<b>Q</b>", "answer": "<b>A</b>"}]),
            is_top_level=True,
        )
        assert "<h3>&lt;b&gt;Q&lt;/b&gt;</h3>" in fragment
        assert "<p>A</p>" in fragment

    def test_empty_ad_disclosure_omitted(self):
        fragment = render_static_content(make_content(adDisclosureText=""), is_top_level=True)
        assert "<small>" not in fragment


class TestCourses:
    def test_numbered_headings_follow_source_order(self):
        content = make_content(
            courses=[{"title": "Первый"}, {"title": "Второй"}, {"title": "Третий"}]
        )
        fragment = render_static_content(content, is_top_level=True)
        assert fragment.index("<h3>1. Первый</h3>") < fragment.index("<h3>2. Второй</h3>")
        assert fragment.index("<h3>2. Второй</h3>") < fragment.index("<h3>3. Третий</h3>")

    def test_zero_price_omitted(self):
        assert "Цена" not in _course_fragment(price=0)

    def test_nan_price_omitted(self):
        assert "Цена" not in _course_fragment(price=float("nan"))

    def test_missing_price_omitted(self):
        assert "Цена" not in _course_fragment()

    def test_integral_float_price(self):
        assert "<p>Цена: 15000 руб.</p>" in _course_fragment(price=15000.0)

    def test_fractional_price(self):
        assert "<p>Цена: 1999.5 руб.</p>" in _course_fragment(price=1999.5)

    def test_empty_duration_omitted(self):
        assert "Длительность" not in _course_fragment(duration="")

    def test_empty_features_list_has_no_nested_list(self):
        fragment = _course_fragment(features=[])
        assert fragment.count("<ul>") == 1

    def test_blank_features_skipped(self):
        fragment = _course_fragment(features=["", "Видео", None])
        assert fragment.count("<li>Видео</li>") == 1
        assert "<li></li>" not in fragment

    def test_advantages_joined_and_escaped(self):
        fragment = _course_fragment(advantages=["A", "B & C"])
        assert "<p>Преимущества: A, B &amp; C</p>" in fragment

    def test_empty_advantages_omitted(self):
        assert "Преимущества" not in _course_fragment(advantages=[])


class TestAuxiliaryPages:
    def test_page_uses_its_own_title(self):
        page = SitePage(id="1", slug="abc", title="Страница")
        assert render_static_content(page, is_top_level=False).startswith(
            "    <h1>Страница</h1>\n"
        )

    def test_ad_disclosure_only_on_top_level(self):
        content = make_content(adDisclosureText="Реклама")
        assert "Реклама" not in render_static_content(content, is_top_level=False)
        assert "<p><small>Реклама</small></p>" in render_static_content(
            content, is_top_level=True
        )

    def test_page_renders_same_sections_as_top_level(self, full_content):
        page = SitePage.model_validate(
            {
                "id": "x",
                "slug": "x",
                "title": full_content.page_title,
                **full_content.model_dump(
                    include={
                        "author",
                        "intro_text",
                        "before_table_block",
                        "courses",
                        "content_blocks",
                        "faq_data",
                    }
                ),
            }
        )
        expected = _EXPECTED_FULL_FRAGMENT.replace("    <p><small>Реклама</small></p>\n", "")
        assert render_static_content(page, is_top_level=False) == expected
