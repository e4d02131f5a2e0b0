"""Presentation shell: a single page that shows every generated document.

Each document gets its size badges, a read-only textarea, a download button
and a copy button.  Clipboard and file-save calls run in the browser; a
failure there is reported as a transient notice and the user may simply
click again.
"""

from typing import List

from app.models.export_response import ExportResponse, GeneratedDocument
from app.services.sanitizer import escape_html

# How long the "copied" acknowledgment stays on a button
COPY_ACK_MS = 2000

_STYLE = """
body { font-family: system-ui, sans-serif; max-width: 960px; margin: 2rem auto; padding: 0 1rem; }
section { border: 1px solid #ddd; border-radius: 8px; padding: 1rem; margin-bottom: 1.5rem; }
.badge { display: inline-block; border: 1px solid #ccc; border-radius: 999px; padding: 0 .6rem; margin: 0 .3rem .3rem 0; font-size: .8rem; }
.badge.ok { background: #dcfce7; border-color: #86efac; }
textarea { width: 100%; min-height: 200px; font-family: monospace; font-size: .75rem; }
pre { background: #f0fdf4; padding: .75rem; }
#notice { position: fixed; bottom: 1rem; right: 1rem; padding: .5rem 1rem; border-radius: 6px; background: #111; color: #fff; display: none; }
"""

_SCRIPT = """
const ACK_MS = %d;
function notify(text) {
  const el = document.getElementById("notice");
  el.textContent = text;
  el.style.display = "block";
  setTimeout(() => { el.style.display = "none"; }, ACK_MS);
}
async function copyDocument(button) {
  const id = button.dataset.id;
  try {
    await navigator.clipboard.writeText(document.getElementById(`html-${id}`).value);
  } catch (err) {
    notify("Не удалось скопировать: " + err);
    return;
  }
  button.textContent = "✓";
  setTimeout(() => { button.textContent = "Копировать"; }, ACK_MS);
  notify("Скопировано!");
}
function downloadDocument(id, filename) {
  try {
    const blob = new Blob([document.getElementById(`html-${id}`).value], { type: "text/html" });
    const url = URL.createObjectURL(blob);
    const a = document.createElement("a");
    a.href = url;
    a.download = filename;
    a.click();
    URL.revokeObjectURL(url);
  } catch (err) {
    notify("Не удалось скачать файл: " + err);
    return;
  }
  notify(`Файл ${filename} скачан`);
}
""" % COPY_ACK_MS


def _document_section(document: GeneratedDocument) -> List[str]:
    doc_id = escape_html(document.id)
    heading = "Главная страница" if document.kind == "main" else escape_html(document.path)
    return [
        f'<section id="doc-{doc_id}">',
        f"  <h2>{heading}</h2>",
        f"  <p>Файл: <code>{escape_html(document.path)}</code></p>",
        "  <div>",
        f'    <span class="badge">Title: {document.title_length} символов</span>',
        f'    <span class="badge">Description: {document.description_length} символов</span>',
        '    <span class="badge ok">+ Статический контент</span>',
        f'    <span class="badge">{escape_html(document.canonical_url)}</span>',
        "  </div>",
        f'  <textarea id="html-{doc_id}" readonly>{escape_html(document.html)}</textarea>',
        "  <div>",
        f'    <button class="download" data-id="{doc_id}" data-filename="{escape_html(document.filename)}" '
        'onclick="downloadDocument(this.dataset.id, this.dataset.filename)">'
        f"Скачать {escape_html(document.filename)}</button>",
        f'    <button class="copy" data-id="{doc_id}" onclick="copyDocument(this)">Копировать</button>',
        "  </div>",
        "</section>",
    ]


def _instructions_section(export: ExportResponse) -> List[str]:
    lines = ["<section>", "  <h2>Инструкция по публикации</h2>"]
    if export.folder_preview:
        lines.append(f"  <pre>{escape_html(chr(10).join(export.folder_preview))}</pre>")
    for section in export.instructions:
        lines.append(f"  <h3>{escape_html(section.title)}</h3>")
        lines.append("  <ol>")
        lines.extend(f"    <li>{escape_html(step)}</li>" for step in section.steps)
        lines.append("  </ol>")
        if section.note:
            lines.append(f"  <p><small>{escape_html(section.note)}</small></p>")
    lines.append("</section>")
    return lines


def render_preview(export: ExportResponse) -> str:
    """Return the presentation shell for *export* as a standalone HTML page."""
    lines = [
        "<!doctype html>",
        '<html lang="ru">',
        "<head>",
        '<meta charset="UTF-8" />',
        "<title>SEO HTML</title>",
        f"<style>{_STYLE}</style>",
        "</head>",
        "<body>",
        "<p>HTML содержит статический контент внутри &lt;noscript&gt;, "
        "который видят поисковые боты: заголовки, описания курсов, FAQ и другой текст.</p>",
    ]
    for document in export.documents:
        lines.extend(_document_section(document))
    lines.extend(_instructions_section(export))
    lines += [
        '<div id="notice" role="status"></div>',
        f"<script>{_SCRIPT}</script>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines)
