"""Full HTML document assembly for the main page and auxiliary pages.

Both documents share one header layout (metadata, preconnect hints, favicon,
canonical link, Open Graph and Twitter card tags) and one body layout: a
mount element, the static fragment inside ``<noscript>`` and a script
stanza.  The main page loads its bootstrap module directly; auxiliary pages,
published one folder deeper, carry a :class:`ScriptFallback` lookup instead.
"""

import json
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from app.config import settings
from app.models.content import SiteContent, SitePage
from app.services.renderer import render_static_content
from app.services.sanitizer import escape_html

DEFAULT_AUTHOR = "Автор"
DEFAULT_SITE_NAME = "Сайт"
OG_LOCALE = "ru_RU"

_PRECONNECT = (
    '<link rel="preconnect" href="https://fonts.googleapis.com" />',
    '<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin />',
)


@dataclass(frozen=True)
class ScriptFallback:
    """Ordered list of candidate script paths tried by an auxiliary page.

    In the browser each candidate gets a ``HEAD`` request, in order.  The
    first one answering with an OK status is attached as a module script and
    probing stops.  A failed request moves on to the next candidate.  When
    the list is exhausted nothing is attached and the page keeps only its
    static ``<noscript>`` content.
    """

    candidates: Tuple[str, ...]

    @classmethod
    def from_settings(cls) -> "ScriptFallback":
        return cls(tuple(settings.SCRIPT_CANDIDATES))

    def to_script(self) -> List[str]:
        # "</" inside the JSON literal would close the <script> element early
        candidates = json.dumps(list(self.candidates)).replace("</", "<\\/")
        return [
            '<script type="module">',
            "  (async () => {",
            f"    const candidates = {candidates};",
            "    for (const src of candidates) {",
            "      try {",
            '        const res = await fetch(src, { method: "HEAD" });',
            "        if (!res.ok) continue;",
            '        const s = document.createElement("script");',
            '        s.type = "module";',
            "        s.src = src;",
            "        document.body.appendChild(s);",
            "        return;",
            "      } catch {",
            "        // unreachable candidate, try the next one",
            "      }",
            "    }",
            "  })();",
            "</script>",
        ]


def _trim_slash(url: Optional[str]) -> str:
    if not url:
        return ""
    return url[:-1] if url.endswith("/") else url


def site_base_url(content: SiteContent) -> str:
    """Return the site root without a trailing slash."""
    return _trim_slash(content.meta_data.canonical_url) or _trim_slash(settings.PLACEHOLDER_URL)


def resolve_canonical_url(content: SiteContent, page: Optional[SitePage] = None) -> str:
    """Return the canonical URL of the main page, or of *page* when given.

    An explicit ``canonical_url`` always wins.  Otherwise the main page falls
    back to the placeholder domain and an auxiliary page to
    ``{site base}/{slug}``.
    """
    if page is None:
        return content.meta_data.canonical_url or settings.PLACEHOLDER_URL
    return page.meta_data.canonical_url or f"{site_base_url(content)}/{page.slug}"


def social_image_url(base_url: str) -> str:
    return f"{_trim_slash(base_url)}/favicon.png"


def site_name(page_title: Optional[str]) -> str:
    """First three words of the page title, used as ``og:site_name``."""
    if not page_title:
        return DEFAULT_SITE_NAME
    return " ".join(page_title.split(" ")[:3]) or DEFAULT_SITE_NAME


def _head(
    title: str,
    description: str,
    keywords: str,
    canonical_url: str,
    image_url: str,
    author: Optional[str] = None,
    og_site_name: Optional[str] = None,
    mobile_capable: bool = False,
) -> List[str]:
    title = escape_html(title)
    description = escape_html(description)
    canonical_url = escape_html(canonical_url)
    image_url = escape_html(image_url)

    lines = [
        '<meta charset="UTF-8" />',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0, maximum-scale=5" />',
        f"<title>{title}</title>",
        f'<meta name="description" content="{description}" />',
    ]
    if author is not None:
        lines.append(f'<meta name="author" content="{escape_html(author)}" />')
    lines += [
        '<meta name="robots" content="index, follow" />',
        f'<meta name="keywords" content="{escape_html(keywords)}" />',
        "",
        "<!-- Preconnect for performance -->",
        *_PRECONNECT,
        "",
        "<!-- Favicon -->",
        '<link rel="icon" type="image/png" href="/favicon.png" />',
        '<link rel="apple-touch-icon" href="/favicon.png" />',
        f'<link rel="canonical" href="{canonical_url}" />',
        "",
        "<!-- Open Graph -->",
        f'<meta property="og:title" content="{title}" />',
        f'<meta property="og:description" content="{description}" />',
        '<meta property="og:type" content="article" />',
        f'<meta property="og:url" content="{canonical_url}" />',
        f'<meta property="og:image" content="{image_url}" />',
        f'<meta property="og:locale" content="{OG_LOCALE}" />',
    ]
    if og_site_name is not None:
        lines.append(f'<meta property="og:site_name" content="{escape_html(og_site_name)}" />')
    lines += [
        "",
        "<!-- Twitter Card -->",
        '<meta name="twitter:card" content="summary_large_image" />',
        f'<meta name="twitter:title" content="{title}" />',
        f'<meta name="twitter:description" content="{description}" />',
        f'<meta name="twitter:image" content="{image_url}" />',
        "",
        "<!-- Mobile -->",
        f'<meta name="theme-color" content="{escape_html(settings.THEME_COLOR)}" />',
    ]
    if mobile_capable:
        lines += [
            '<meta name="mobile-web-app-capable" content="yes" />',
            '<meta name="apple-mobile-web-app-capable" content="yes" />',
            '<meta name="apple-mobile-web-app-status-bar-style" content="default" />',
        ]
    return lines


def _document(head: Sequence[str], static_content: str, script: Sequence[str]) -> str:
    def indent(lines: Sequence[str], depth: int) -> List[str]:
        pad = "  " * depth
        return [f"{pad}{line}" if line else "" for line in lines]

    parts = [
        "<!doctype html>",
        '<html lang="ru">',
        "  <head>",
        *indent(head, 2),
        "  </head>",
        "",
        "  <body>",
        '    <div id="root"></div>',
        "",
        "    <!-- SEO: Статический контент для поисковых ботов -->",
        "    <noscript>",
        static_content.rstrip("\n"),
        "    </noscript>",
        "",
        *indent(script, 2),
        "  </body>",
        "</html>",
    ]
    return "\n".join(parts)


def render_main_document(content: SiteContent) -> str:
    """Return the complete ``index.html`` for the site root."""
    meta = content.meta_data
    canonical_url = resolve_canonical_url(content)
    author = content.author.name if content.author and content.author.name else DEFAULT_AUTHOR

    head = _head(
        title=meta.title or "",
        description=meta.description or "",
        keywords=meta.keywords or "",
        canonical_url=canonical_url,
        image_url=social_image_url(canonical_url),
        author=author,
        og_site_name=site_name(content.page_title),
        mobile_capable=True,
    )
    script = [f'<script type="module" src="{escape_html(settings.MAIN_SCRIPT_SRC)}"></script>']
    return _document(head, render_static_content(content, is_top_level=True), script)


def render_page_document(
    page: SitePage,
    content: SiteContent,
    fallback: Optional[ScriptFallback] = None,
) -> str:
    """Return the complete ``index.html`` for the auxiliary *page*.

    The page is rendered from its own metadata; the site-wide record only
    supplies the base URL for the canonical fallback and the social image.
    """
    meta = page.meta_data
    fallback = fallback or ScriptFallback.from_settings()

    head = _head(
        title=meta.title or page.title or "",
        description=meta.description or "",
        keywords=meta.keywords or "",
        canonical_url=resolve_canonical_url(content, page),
        image_url=social_image_url(site_base_url(content)),
    )
    return _document(head, render_static_content(page, is_top_level=False), fallback.to_script())
