"""Static fragment rendering: the crawler-visible body placed inside ``<noscript>``.

One renderer serves both the site-wide record and auxiliary pages; they
share the :class:`~app.models.content.RenderableContent` shape and differ
only in the heading source and the trailing ad disclosure, which is emitted
for the top-level record alone.

Sections are emitted in a fixed order and only when their data is present.
Presence is decided per field by the ``_has_*`` predicates below.
"""

import math
from typing import List, Optional, Sequence

from app.models.content import Course, FaqItem, RenderableContent, SiteContent, TextBlock
from app.services.sanitizer import clean_text, escape_html

_INDENT = "    "

COURSES_HEADING = "Курсы"
FAQ_HEADING = "Часто задаваемые вопросы"


def _has_text(value: Optional[str]) -> bool:
    return bool(value)


def _has_items(items: Optional[Sequence]) -> bool:
    return bool(items)


def _has_price(price) -> bool:
    # Zero and NaN are treated as "no price" and the line is omitted.
    if price is None or price == 0:
        return False
    return not (isinstance(price, float) and math.isnan(price))


def _format_price(price) -> str:
    if isinstance(price, float) and price.is_integer():
        price = int(price)
    return escape_html(price)


def _render_author(record: RenderableContent) -> List[str]:
    author = record.author
    if author is None or not _has_text(author.name):
        return []
    lines = [f"<p>Автор: {escape_html(author.name)}</p>"]
    if _has_text(author.description):
        lines.append(f"<p>{clean_text(author.description)}</p>")
    return lines


def _render_text_block(block: Optional[TextBlock]) -> List[str]:
    if block is None:
        return []
    lines: List[str] = []
    if _has_text(block.title):
        lines.append(f"<h2>{escape_html(block.title)}</h2>")
    for paragraph in block.paragraphs or []:
        lines.append(f"<p>{clean_text(paragraph)}</p>")
    return lines


def _render_course(index: int, course: Course) -> List[str]:
    lines = [
        "  <li>",
        f"    <h3>{index + 1}. {escape_html(course.title)}</h3>",
        f"    <p>Школа: {escape_html(course.school)}</p>",
    ]
    if _has_price(course.price):
        lines.append(f"    <p>Цена: {_format_price(course.price)} руб.</p>")
    if _has_text(course.duration):
        lines.append(f"    <p>Длительность: {escape_html(course.duration)}</p>")
    if _has_items(course.features):
        lines.append("    <ul>")
        for feature in course.features:
            if feature:
                lines.append(f"      <li>{clean_text(feature)}</li>")
        lines.append("    </ul>")
    if _has_items(course.advantages):
        joined = ", ".join(a or "" for a in course.advantages)
        lines.append(f"    <p>Преимущества: {escape_html(joined)}</p>")
    lines.append("  </li>")
    return lines


def _render_courses(courses: Optional[List[Course]]) -> List[str]:
    if not _has_items(courses):
        return []
    lines = [f"<h2>{COURSES_HEADING}</h2>", "<ul>"]
    for index, course in enumerate(courses):
        lines.extend(_render_course(index, course))
    lines.append("</ul>")
    return lines


def _render_faq(faq: Optional[List[FaqItem]]) -> List[str]:
    if not _has_items(faq):
        return []
    lines = [f"<h2>{FAQ_HEADING}</h2>"]
    for item in faq:
        lines.append(f"<h3>{escape_html(item.question)}</h3>")
        lines.append(f"<p>{clean_text(item.answer)}</p>")
    return lines


def render_static_content(record: RenderableContent, is_top_level: bool) -> str:
    """Return the ``<noscript>`` fragment for *record*.

    Every line is indented for placement inside the document body and
    terminated with a newline.  For identical input the output is
    byte-identical.
    """
    lines: List[str] = [f"<h1>{escape_html(record.heading)}</h1>"]
    lines.extend(_render_author(record))
    if _has_text(record.intro_text):
        lines.append(f"<article>{clean_text(record.intro_text)}</article>")
    lines.extend(_render_text_block(record.before_table_block))
    lines.extend(_render_courses(record.courses))
    for block in record.content_blocks or []:
        lines.extend(_render_text_block(block))
    lines.extend(_render_faq(record.faq_data))

    if is_top_level and isinstance(record, SiteContent) and _has_text(record.ad_disclosure_text):
        lines.append(f"<p><small>{escape_html(record.ad_disclosure_text)}</small></p>")

    return "".join(f"{_INDENT}{line}\n" for line in lines)
