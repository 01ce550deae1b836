from __future__ import annotations

import datetime as dt
import json
import re
from pathlib import Path

import markdown
from pygments.formatters import HtmlFormatter

from .config import SiteConfig
from .elements import Element, new_element
from .utils import join_url

TAG_RE = re.compile(r"<[^>]+>")
DATE_FMT = "%Y-%m-%d %H:%M:%S"
SUMMARY_LENGTH = 200
DEFAULT_FILENAME = "index.html"


def slugify(text: str) -> str:
    text = text.lower()
    text = re.sub(r"[^\w]+", "-", text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", "-")
    return text or "post"


def strip_tags(html_text: str) -> str:
    return TAG_RE.sub("", html_text)


def parse_front_matter(text: str) -> tuple[dict, str]:
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end = i
            break
    if end is None:
        return {}, clean_text

    meta = {}
    for line in lines[1:end]:
        line = line.strip()
        if not line or line.startswith("#") or ":" not in line:
            continue
        key, value = line.split(":", 1)
        meta[key.strip().lower()] = value.strip()
    body = "\n".join(lines[end + 1 :])
    return meta, body


def extract_title(meta: dict, body: str) -> tuple[str, str]:
    if meta.get("title"):
        return meta["title"], body
    lines = body.splitlines()
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            title = stripped[2:].strip() or "Untitled"
            new_body = "\n".join(lines[i + 1 :]).lstrip()
            return title, new_body
        if stripped:
            break
    return "Untitled", body


def markdown_to_html(text: str) -> str:
    md = markdown.Markdown(extensions=["fenced_code", "codehilite"])
    html_content = md.convert(text)
    if not html_content.endswith("\n"):
        html_content += "\n"
    return html_content


def highlight_css() -> str:
    return HtmlFormatter().get_style_defs(".codehilite")


def url_to_path(url: str) -> str:
    """Drop scheme and host: ``https://host/blog/x/`` becomes ``/blog/x/``."""
    parts = url.split("/")
    if len(parts) < 3:
        raise ValueError(f"Cannot derive a path from url {url!r}")
    return "/" + "/".join(parts[3:])


def read_text(mapping: object, key: str) -> str:
    if not isinstance(mapping, dict):
        return ""
    value = mapping.get(key)
    return "" if value is None else str(value)


def read_record(data: dict, key: str, site: SiteConfig) -> Element:
    entry = data.get(key)
    if not isinstance(entry, dict):
        raise ValueError(f"Record has no '{key}' object")
    thumb_url = read_text(data, "thumbImg") or read_text(data, "postThumb") or site.default_image_url
    image_url = read_text(data, "postImg") or site.default_image_url
    custom_fields = entry.get("custom_fields")
    thread_ids = custom_fields.get("dsq_thread_id") if isinstance(custom_fields, dict) else None
    disqus_id = str(thread_ids[0]) if isinstance(thread_ids, list) and thread_ids else ""
    return new_element(
        read_text(entry, "post_id"),
        read_text(entry, "title"),
        read_text(entry, "excerpt"),
        read_text(entry, "content"),
        image_url,
        thumb_url,
        site.domain,
        url_to_path(read_text(entry, "url")),
        DEFAULT_FILENAME,
        read_text(entry, "date"),
        disqus_id,
    )


def load_elements(directory: Path, key: str, site: SiteConfig) -> list[Element]:
    """Read every ``*.json`` record in ``directory``, oldest first."""
    elements = []
    for path in sorted(directory.glob("*.json"), key=lambda p: p.as_posix()):
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"JSON record must be an object: {path}")
        try:
            elements.append(read_record(data, key, site))
        except ValueError as exc:
            raise ValueError(f"{path}: {exc}") from exc
    elements.sort(key=lambda element: element.published_time)
    return elements


def date_path(now: dt.datetime) -> str:
    return f"{now.year}/{now.month}/{now.day}/"


def post_url(blog_url: str, title: str, now: dt.datetime) -> str:
    return join_url(blog_url, date_path(now) + slugify(title)) + "/"


def new_post_record(
    markdown_text: str,
    blog_url: str,
    now: dt.datetime,
    image_url: str = "",
    thumb_url: str = "",
    record_filename: str = "",
) -> dict:
    meta, body = parse_front_matter(markdown_text)
    title, body = extract_title(meta, body)
    html_content = markdown_to_html(body)
    excerpt = meta.get("excerpt") or meta.get("description")
    if not excerpt:
        excerpt = strip_tags(html_content).strip().replace("\n", " ")
        excerpt = excerpt[:SUMMARY_LENGTH] + ("..." if len(excerpt) > SUMMARY_LENGTH else "")
    return {
        "thumbImg": thumb_url,
        "postImg": image_url,
        "filename": record_filename,
        "post": {
            "post_id": meta.get("id", ""),
            "date": now.strftime(DATE_FMT),
            "url": post_url(blog_url, title, now),
            "title": title,
            "excerpt": excerpt,
            "content": html_content,
            "custom_fields": {"dsq_thread_id": [meta.get("disqus_id", "")]},
        },
    }
