"""
Chuyển OCRResult thành dữ liệu hiển thị: HTML từ markdown, tên file tải
xuống, đoạn HTML copy vào clipboard. Không phụ thuộc Streamlit, cùng
input luôn cho cùng output.
"""
import html
import json
import re
from dataclasses import dataclass, field
from typing import List

import markdown

from ocr_md_utils import utils
from ocr_md_utils.schemas import OCRResult

MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]

# Từ dài (URL, chuỗi số, công thức) phải xuống dòng trong khung thay vì tràn ra ngoài
RESULT_CSS = """
<style>
.ocr-md { overflow: hidden; }
.ocr-md p, .ocr-md td, .ocr-md th, .ocr-md code, .ocr-md pre {
  overflow-wrap: anywhere; word-break: break-word;
}
.ocr-md pre { white-space: pre-wrap; overflow-x: auto; }
.ocr-md .table-wrap { overflow-x: auto; width: 100%; }
.ocr-md table { border-collapse: collapse; min-width: 100%; table-layout: auto; }
.ocr-md th, .ocr-md td {
  border: 1px solid #d1d5db; padding: 0.5rem; font-size: 0.75rem;
  max-width: 20rem; text-align: left;
}
.ocr-md th { background: #f3f4f6; font-weight: 500; }
.ocr-md tr:nth-child(even) { background: #f9fafb; }
</style>
"""


@dataclass(frozen=True)
class EntryView:
    filename: str
    html: str
    raw: str
    download_name: str


@dataclass(frozen=True)
class ResultView:
    header: str
    entries: List[EntryView] = field(default_factory=list)


def render_markdown(md_content: str) -> str:
    body = markdown.markdown(md_content, extensions=MARKDOWN_EXTENSIONS)
    body = body.replace("<table>", '<div class="table-wrap"><table>')
    body = body.replace("</table>", "</table></div>")
    return f'<div class="ocr-md">{body}</div>'


def download_name(filename: str) -> str:
    """doc.pdf → doc.md; chỉ bỏ phần mở rộng cuối cùng."""
    return re.sub(r"\.[^/.]+$", "", filename) + ".md"


def download_bytes(md_content: str) -> bytes:
    return md_content.encode("utf-8")


def copy_button_html(md_content: str, label: str = "Copy") -> str:
    element_id = f"copy_{utils.compute_file_hash(download_bytes(md_content))}"
    # "</" trong chuỗi JS sẽ đóng thẻ <script> sớm
    payload = json.dumps(md_content).replace("</", "<\\/")
    return (
        f'<button id="{element_id}">{html.escape(label)}</button>'
        "<script>"
        f'const btn = document.getElementById("{element_id}");'
        "btn.addEventListener(\"click\", () => {"
        f"navigator.clipboard.writeText({payload})"
        ".then(() => { btn.innerText = \"Copied!\"; });"
        "});"
        "</script>"
    )


def build_view(result: OCRResult) -> ResultView:
    entries = [
        EntryView(
            filename=name,
            html=render_markdown(entry.md_content),
            raw=entry.md_content,
            download_name=download_name(name),
        )
        for name, entry in result.results.items()
    ]
    return ResultView(
        header=f"Backend: {result.backend} | Version: {result.version}",
        entries=entries,
    )
